"""Component storage and cached magnitude for 2D vectors.

``VectorStorage`` owns the two components and the magnitude derived from
them. The magnitude is cached at construction and every write path goes
through ``_assign`` so that it is never stale.
"""

from __future__ import annotations

from typing import TypeVar

from vector2d.components import Component, magnitude_of, to_component

V = TypeVar("V", bound="VectorStorage")


class VectorStorage:
    """Base storage for a 2D vector of 32-bit float components."""

    __slots__ = ("_x", "_y", "_magnitude")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._assign(to_component(x), to_component(y))

    def _assign(self, x: Component, y: Component) -> None:
        """Replace both components and refresh the cached magnitude."""
        self._x = x
        self._y = y
        self._magnitude = magnitude_of(x, y)

    @classmethod
    def _from_components(cls: type[V], x: Component, y: Component) -> V:
        vector = cls.__new__(cls)
        vector._assign(x, y)
        return vector

    @property
    def x(self) -> float:
        return float(self._x)

    @x.setter
    def x(self, value: float) -> None:
        self._assign(to_component(value), self._y)

    @property
    def y(self) -> float:
        return float(self._y)

    @y.setter
    def y(self, value: float) -> None:
        self._assign(self._x, to_component(value))

    @property
    def magnitude(self) -> float:
        """Euclidean length, always consistent with the current components."""
        return float(self._magnitude)

    def set_x(self: V, value: float) -> V:
        """Replace the x component in-place and return self."""
        self.x = value
        return self

    def set_y(self: V, value: float) -> V:
        """Replace the y component in-place and return self."""
        self.y = value
        return self

    def copy(self: V) -> V:
        """Return a copy of this vector."""
        return self._from_components(self._x, self._y)

    def __eq__(self, other: object) -> bool:
        """Exact component-wise equality (no tolerance)."""
        if not isinstance(other, VectorStorage):
            return False
        return bool(self._x == other._x and self._y == other._y)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"


__all__ = ["VectorStorage"]
