"""Approximate-equality assertions for test suites.

Vector equality is exact; these helpers are what tests use when a result is
only expected within a tolerance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vector2d.config import APPROX_DELTA

if TYPE_CHECKING:
    from vector2d.storage import VectorStorage


def assert_approx_equal(expected: float, actual: float, delta: float = APPROX_DELTA) -> None:
    """Assert that ``actual`` lies strictly within ``expected +/- delta``.

    Args:
        expected: Target value
        actual: Value under test
        delta: Tolerance, its sign is ignored

    Raises:
        AssertionError: Naming the bound (max or min) that ``actual`` exceeded
    """
    delta = abs(delta)

    bound = expected + delta
    if not actual < bound:
        raise AssertionError(
            "Value did not match expected precision: exceeded max bound\n"
            f"-->\t(value {actual} > bound {bound})"
        )

    bound = expected - delta
    if not actual > bound:
        raise AssertionError(
            "Value did not match expected precision: exceeded min bound\n"
            f"-->\t(value {actual} < bound {bound})"
        )


def assert_vector_approx_equal(
    expected: "VectorStorage", actual: "VectorStorage", delta: float = APPROX_DELTA
) -> None:
    """Assert both components of ``actual`` are within ``delta`` of ``expected``."""
    for name in ("x", "y"):
        try:
            assert_approx_equal(getattr(expected, name), getattr(actual, name), delta)
        except AssertionError as exc:
            raise AssertionError(f"Component {name} of {actual!r} vs {expected!r}: {exc}") from exc


__all__ = ["assert_approx_equal", "assert_vector_approx_equal"]
