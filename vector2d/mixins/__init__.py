"""Vector2 mixins for cleaner separation of concerns.

Each mixin encapsulates a logical group of behavior on top of VectorStorage:
- ArithmeticMixin: +, -, *, /, % and their augmented forms
- GeometryMixin: Dot product, determinant, angles, normalization, distance
- ComponentwiseMixin: abs, fract, floor, Euclidean remainder per component
"""

from vector2d.mixins.arithmetic_mixin import ArithmeticMixin
from vector2d.mixins.componentwise_mixin import ComponentwiseMixin
from vector2d.mixins.geometry_mixin import GeometryMixin

__all__ = ["ArithmeticMixin", "ComponentwiseMixin", "GeometryMixin"]
