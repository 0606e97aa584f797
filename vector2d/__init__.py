"""2D vector value type with 32-bit float components.

Provides Vector2 (storage, arithmetic operators, geometry and component-wise
helpers) and approximate-equality assertions for tests.
"""

import logging

from vector2d.vector import Vector2

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Vector2"]
