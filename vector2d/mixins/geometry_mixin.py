"""Geometry mixin for Vector2.

Encapsulates the geometric toolkit:
- Products: dot product and 2D determinant (scalar cross product)
- Angles: unsigned, signed, wide (0..2pi) and the vector's own orientation
- Normalization, distance and direction

Zero-magnitude operands never produce nan here: normalizing yields the zero
vector and angles yield 0.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import numpy as np

from vector2d.components import Component, apply, magnitude_of, rem_euclid, to_component
from vector2d.config import TAU

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="GeometryMixin")

_COS_MIN = to_component(-1.0)
_COS_MAX = to_component(1.0)


class GeometryMixin:
    """Mixin providing geometric operations for vectors.

    Expects the host class to derive from VectorStorage.
    """

    __slots__ = ()

    _x: Component
    _y: Component
    _magnitude: Component

    def _dot(self, other: "GeometryMixin") -> Component:
        with np.errstate(all="ignore"):
            return self._x * other._x + self._y * other._y

    def _det(self, other: "GeometryMixin") -> Component:
        with np.errstate(all="ignore"):
            return self._x * other._y - self._y * other._x

    def _magnitude_product(self, other: "GeometryMixin") -> Component:
        return apply(np.multiply, self._magnitude, other._magnitude)

    def _normalized_components(self) -> tuple[Component, Component]:
        if self._magnitude == 0:
            logger.debug("Normalizing zero-length vector, using zero vector")
            return to_component(0.0), to_component(0.0)
        return apply(np.divide, self._x, self._magnitude), apply(np.divide, self._y, self._magnitude)

    def dot_product(self, other: "GeometryMixin") -> float:
        """Dot product ``a.x*b.x + a.y*b.y``."""
        return float(self._dot(other))

    def determinant(self, other: "GeometryMixin") -> float:
        """2D cross product ``a.x*b.y - a.y*b.x``.

        This is the signed area of the parallelogram spanned by both vectors:
        positive when ``other`` is counter-clockwise from ``self``.
        """
        return float(self._det(other))

    def normalized(self: V) -> V:
        """Return the unit vector with the same direction, or the zero vector."""
        return self._from_components(*self._normalized_components())  # type: ignore[attr-defined]

    def normalize(self: V) -> V:
        """Normalize this vector in-place."""
        self._assign(*self._normalized_components())  # type: ignore[attr-defined]
        return self

    def angle(self, other: "GeometryMixin") -> float:
        """Unsigned angle between both vectors, in [0, pi].

        Returns 0 when either vector has zero magnitude.
        """
        mg_base = self._magnitude_product(other)
        if mg_base == 0:
            logger.debug("Angle with zero-length vector, using 0")
            return 0.0
        with np.errstate(all="ignore"):
            cos = np.clip(self._dot(other) / mg_base, _COS_MIN, _COS_MAX)
            return float(np.arccos(cos))

    def signed_angle(self, other: "GeometryMixin") -> float:
        """Angle from ``self`` to ``other`` in (-pi, pi], counter-clockwise positive.

        Returns 0 when either vector has zero magnitude.
        """
        if self._magnitude_product(other) == 0:
            logger.debug("Signed angle with zero-length vector, using 0")
            return 0.0
        return float(self._signed_angle(other))

    def _signed_angle(self, other: "GeometryMixin") -> Component:
        with np.errstate(all="ignore"):
            return np.arctan2(self._det(other), self._dot(other))

    def wide_angle(self, other: "GeometryMixin") -> float:
        """Counter-clockwise angle from ``self`` to ``other``, in [0, 2pi).

        A tiny negative signed angle rounds up to exactly ``TAU`` in single
        precision, so the result can reach 2pi itself.

        Returns 0 when either vector has zero magnitude.
        """
        if self._magnitude_product(other) == 0:
            logger.debug("Wide angle with zero-length vector, using 0")
            return 0.0
        return float(rem_euclid(self._signed_angle(other), TAU))

    def to_angle(self) -> float:
        """Orientation of this vector, ``atan2(y, x)``, in (-pi, pi]."""
        with np.errstate(all="ignore"):
            return float(np.arctan2(self._y, self._x))

    def distance(self, other: "GeometryMixin") -> float:
        """Euclidean distance between the points described by both vectors."""
        dx = apply(np.subtract, self._x, other._x)
        dy = apply(np.subtract, self._y, other._y)
        return float(magnitude_of(dx, dy))

    def direction(self: V, other: "GeometryMixin") -> V:
        """Unit vector pointing from ``self`` toward ``other``.

        Returns the zero vector when both vectors are equal.
        """
        offset = self._from_components(  # type: ignore[attr-defined]
            apply(np.subtract, other._x, self._x),
            apply(np.subtract, other._y, self._y),
        )
        return offset.normalize()


__all__ = ["GeometryMixin"]
