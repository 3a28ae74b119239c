"""Internal cubic Bezier evaluation helpers.

This is an internal module containing helper functions for outline sampling.
Not intended for public use.
"""

from leatherpattern.domain import Point


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> tuple[float, float]:
    """Evaluate a cubic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Curve parameter in [0, 1]

    Returns:
        (x, y) position on the curve
    """
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return (
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def sample_cubic(points: list[Point], steps: int) -> list[tuple[float, float]]:
    """Sample a cubic Bezier at ``k / steps`` for ``k`` in ``[0, steps)``.

    The end point is excluded so consecutive segments can be concatenated
    without duplicating shared anchors.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        steps: Number of samples

    Returns:
        List of sampled (x, y) positions
    """
    p0, p1, p2, p3 = points
    return [cubic_point(p0, p1, p2, p3, k / steps) for k in range(steps)]
