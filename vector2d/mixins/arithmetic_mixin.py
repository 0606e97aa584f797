"""Arithmetic operator mixin for Vector2.

Encapsulates the operator protocol:
- Binary operators (+, -, *, /, %) against a vector or a scalar
- Augmented assignments (+=, -=, *=, /=, %=) that mutate the receiver
- Reflected scalar forms for the commutative operators (k + v, k * v)

Vector operands combine component-wise, scalar operands are applied to both
components. Division and remainder by zero produce inf/nan rather than
raising. ``%`` is the truncating remainder (sign of the dividend), not
Python's floor remainder.
"""

from __future__ import annotations

import numbers
from typing import TypeVar

import numpy as np

from vector2d.components import BinaryOp, Component, apply, to_component, truncating_rem
from vector2d.storage import VectorStorage

V = TypeVar("V", bound="ArithmeticMixin")


class ArithmeticMixin:
    """Mixin providing arithmetic operators for vectors.

    Expects the host class to derive from VectorStorage.
    """

    __slots__ = ()

    _x: Component
    _y: Component

    def _operands(self, other: object) -> tuple[Component, Component] | None:
        """Resolve the right-hand operand to a pair of components."""
        if isinstance(other, VectorStorage):
            return other._x, other._y
        if isinstance(other, numbers.Real):
            k = to_component(other)
            return k, k
        return None

    def _combine(self: V, other: object, op: BinaryOp) -> V:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        ox, oy = operands
        return self._from_components(apply(op, self._x, ox), apply(op, self._y, oy))  # type: ignore[attr-defined]

    def _combine_inplace(self: V, other: object, op: BinaryOp) -> V:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        ox, oy = operands
        self._assign(apply(op, self._x, ox), apply(op, self._y, oy))  # type: ignore[attr-defined]
        return self

    def __add__(self: V, other: object) -> V:
        return self._combine(other, np.add)

    def __radd__(self: V, other: object) -> V:
        return self._combine(other, np.add)

    def __iadd__(self: V, other: object) -> V:
        return self._combine_inplace(other, np.add)

    def __sub__(self: V, other: object) -> V:
        return self._combine(other, np.subtract)

    def __isub__(self: V, other: object) -> V:
        return self._combine_inplace(other, np.subtract)

    def __mul__(self: V, other: object) -> V:
        return self._combine(other, np.multiply)

    def __rmul__(self: V, other: object) -> V:
        return self._combine(other, np.multiply)

    def __imul__(self: V, other: object) -> V:
        return self._combine_inplace(other, np.multiply)

    def __truediv__(self: V, other: object) -> V:
        return self._combine(other, np.divide)

    def __itruediv__(self: V, other: object) -> V:
        return self._combine_inplace(other, np.divide)

    def __mod__(self: V, other: object) -> V:
        return self._combine(other, truncating_rem)

    def __imod__(self: V, other: object) -> V:
        return self._combine_inplace(other, truncating_rem)

    def __neg__(self: V) -> V:
        return self._from_components(-self._x, -self._y)  # type: ignore[attr-defined]


__all__ = ["ArithmeticMixin"]
