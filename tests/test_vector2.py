"""Tests for Vector2 storage and the cached magnitude."""

import logging
import math

import numpy as np
import pytest

from vector2d import Vector2


def test_vector2_holds_components():
    v = Vector2(1, 2)
    assert v.x == 1
    assert v.y == 2

    v = Vector2(2, 1)
    assert v.x == 2
    assert v.y == 1


def test_vector2_defaults_to_zero():
    v = Vector2()
    assert v.x == 0.0
    assert v.y == 0.0
    assert v.magnitude == 0.0


def test_vector2_magnitude_on_init():
    assert Vector2(4, 3).magnitude == 5


def test_vector2_components_are_32_bit():
    v = Vector2(0.1, -0.1)
    assert v.x == float(np.float32(0.1))
    assert v.x != 0.1
    assert v.y == -v.x
    assert isinstance(v.x, float)
    assert isinstance(v.magnitude, float)


def test_vector2_setters_update_components():
    v = Vector2(1, 2)
    v.set_x(3)
    assert v.x == 3
    v.set_y(4)
    assert v.y == 4


def test_vector2_magnitude_updates_on_set():
    v = Vector2(4, 1)
    v.set_y(3)
    assert v.magnitude == 5

    v = Vector2(1, 4)
    v.set_x(3)
    assert v.magnitude == 5


def test_vector2_property_setters_refresh_magnitude():
    v = Vector2(0, 0)
    v.x = 3
    assert v.magnitude == 3
    v.y = 4
    assert v.magnitude == 5


def test_vector2_setters_chain():
    v = Vector2(-8.5, 12)
    result = v.set_x(6).set_y(-2.25)
    assert result is v
    assert v == Vector2(6, -2.25)
    assert v.magnitude == Vector2(6, -2.25).magnitude


def test_vector2_magnitude_is_read_only():
    v = Vector2(4, 3)
    with pytest.raises(AttributeError):
        v.magnitude = 1.0  # type: ignore[misc]


def test_vector2_rejects_unknown_attributes():
    v = Vector2(1, 1)
    with pytest.raises(AttributeError):
        v.z = 1.0  # type: ignore[attr-defined]


def test_vector2_magnitude_zero_only_for_zero_vector():
    samples = [(0, 0), (1, 0), (0, -1), (3.5, -2), (-0.25, 0.125), (1e-3, 0)]
    for x, y in samples:
        v = Vector2(x, y)
        assert v.magnitude >= 0
        assert (v.magnitude == 0) == (x == 0 and y == 0), f"Unexpected magnitude for {v!r}"


def test_vector2_non_finite_components_propagate():
    v = Vector2(math.inf, 1)
    assert v.x == math.inf
    assert v.magnitude == math.inf

    v = Vector2(math.nan, 1)
    assert math.isnan(v.x)
    assert math.isnan(v.magnitude)


def test_vector2_overflowing_input_becomes_infinite():
    v = Vector2(1e39, -1e39)
    assert v.x == math.inf
    assert v.y == -math.inf


def test_vector2_equality_is_exact():
    base = Vector2(1.0, 1.0)
    assert base == Vector2(1, 1)
    assert base != Vector2(1.0, 1.0001)
    assert base != Vector2(1.0 + 1e-6, 1.0)


def test_vector2_equality_with_other_types():
    assert Vector2(1, 2) != (1, 2)
    assert not (Vector2(1, 2) == "Vector2(1.0, 2.0)")


def test_vector2_nan_is_not_equal_to_itself():
    v = Vector2(math.nan, 0)
    assert v != v.copy()


def test_vector2_is_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))


def test_vector2_copy_is_independent():
    original = Vector2(1, 2)
    clone = original.copy()
    assert clone == original
    assert clone is not original

    clone.set_x(10)
    assert original.x == 1
    assert clone.magnitude != original.magnitude


def test_vector2_repr():
    assert repr(Vector2(1, -2.5)) == "Vector2(1.0, -2.5)"


def test_package_logger_is_silent_by_default():
    """The package only attaches a NullHandler, leaving configuration to applications."""
    package_logger = logging.getLogger("vector2d")
    assert any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)
    assert package_logger.level == logging.NOTSET
