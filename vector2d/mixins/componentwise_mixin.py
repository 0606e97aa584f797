"""Component-wise convenience mixin for Vector2.

Each operation applies the scalar helper of the same name from
``vector2d.components`` to x and y independently and returns a new vector.
"""

from __future__ import annotations

from typing import TypeVar

from vector2d import components
from vector2d.components import Component

V = TypeVar("V", bound="ComponentwiseMixin")


class ComponentwiseMixin:
    """Mixin providing component-wise rounding and modulo helpers.

    Expects the host class to derive from VectorStorage.
    """

    __slots__ = ()

    _x: Component
    _y: Component

    def abs(self: V) -> V:
        return self._from_components(components.absolute(self._x), components.absolute(self._y))  # type: ignore[attr-defined]

    def __abs__(self: V) -> V:
        return self.abs()

    def fract(self: V) -> V:
        """Fractional parts, keeping the sign of each component."""
        return self._from_components(components.fract(self._x), components.fract(self._y))  # type: ignore[attr-defined]

    def floor(self: V) -> V:
        return self._from_components(components.floor(self._x), components.floor(self._y))  # type: ignore[attr-defined]

    def rem_euclid(self: V, n: float) -> V:
        """Euclidean remainder of both components by ``n``.

        Unlike ``%``, results are never negative:
        ``Vector2(-7, -2).rem_euclid(4) == Vector2(1, 2)``.
        """
        k = components.to_component(n)
        return self._from_components(components.rem_euclid(self._x, k), components.rem_euclid(self._y, k))  # type: ignore[attr-defined]


__all__ = ["ComponentwiseMixin"]
