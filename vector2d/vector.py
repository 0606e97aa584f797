"""The Vector2 value type.

Vector2 combines component storage with the arithmetic, geometry and
component-wise layers. Each layer only relies on VectorStorage.

Example:
    >>> v = Vector2(4, 3)
    >>> v.magnitude
    5.0
    >>> (v % Vector2(3, 2))
    Vector2(1.0, 1.0)
"""

from __future__ import annotations

from vector2d.mixins import ArithmeticMixin, ComponentwiseMixin, GeometryMixin
from vector2d.storage import VectorStorage


class Vector2(VectorStorage, ArithmeticMixin, GeometryMixin, ComponentwiseMixin):
    """A 2D vector of 32-bit float components with a cached magnitude."""

    __slots__ = ()


__all__ = ["Vector2"]
