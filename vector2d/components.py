"""Scalar helpers operating on single vector components.

Components are stored as 32-bit floats. Every helper here takes plain numbers
or ``numpy.float32`` values and returns a ``numpy.float32``, following
IEEE-754 rules: division or remainder by zero yields ``inf`` or ``nan``
instead of raising, and no numpy floating-point warning is emitted.

Design Note:
    These are pure functions with no vector dependencies. The vector layers
    call them once per component.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from vector2d.config import COMPONENT_DTYPE

Component = np.float32
BinaryOp = Callable[[Component, Component], Component]


def to_component(value: float) -> Component:
    """Convert a number to component precision (out-of-range values become +/-inf)."""
    with np.errstate(all="ignore"):
        return COMPONENT_DTYPE(value)


def magnitude_of(x: Component, y: Component) -> Component:
    """Euclidean length of (x, y), computed in component precision."""
    with np.errstate(all="ignore"):
        return np.sqrt(x * x + y * y)


def apply(op: BinaryOp, a: Component, b: Component) -> Component:
    """Apply a numpy binary ufunc to two components with warnings silenced."""
    with np.errstate(all="ignore"):
        return op(a, b)


def truncating_rem(a: Component, b: Component) -> Component:
    """Remainder whose sign follows the dividend, like C ``fmod``.

    Example:
        >>> float(truncating_rem(to_component(-7), to_component(2)))
        -1.0
    """
    with np.errstate(all="ignore"):
        return np.fmod(a, b)


def rem_euclid(a: Component, n: Component) -> Component:
    """Euclidean remainder of ``a`` by ``n``.

    The result is never negative for a finite non-zero modulus, whatever the
    sign of ``a`` or ``n``. A zero or non-finite modulus gives ``nan``.

    Example:
        >>> float(rem_euclid(to_component(-7), to_component(4)))
        1.0
    """
    with np.errstate(all="ignore"):
        r = np.fmod(a, n)
        if r < 0:
            r = r + np.abs(n)
        return r


def fract(a: Component) -> Component:
    """Fractional part ``a - trunc(a)``, keeping its sign (``fract(-2.5) == -0.5``).

    Infinite inputs give ``nan``.
    """
    with np.errstate(all="ignore"):
        return a - np.trunc(a)


def floor(a: Component) -> Component:
    with np.errstate(all="ignore"):
        return np.floor(a)


def absolute(a: Component) -> Component:
    with np.errstate(all="ignore"):
        return np.abs(a)


__all__ = [
    "Component",
    "absolute",
    "apply",
    "floor",
    "fract",
    "magnitude_of",
    "rem_euclid",
    "to_component",
    "truncating_rem",
]
