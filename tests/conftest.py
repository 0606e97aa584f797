"""Pytest configuration and fixtures for vector2d tests."""

import pytest

from vector2d import Vector2


@pytest.fixture
def zero():
    """Provide the zero vector."""
    return Vector2(0, 0)


@pytest.fixture
def unit_x():
    return Vector2(1, 0)


@pytest.fixture
def unit_y():
    return Vector2(0, 1)
