"""Inward offsetting of outlines for stitch lines and cavities.

Open paths (the right-half outline) are offset point by point along their
normals. Closed paths (merged outlines, holes, cutouts) go through the
boolean backend's round-join offset.
"""

import math
from collections.abc import Sequence

import structlog

from leatherpattern.core.clipper import BooleanBackend, ClipperBackend
from leatherpattern.core.geometry import (
    ensure_orientation,
    perpendicular_direction,
    polygon_area,
    rotate_to_nearest,
    signed_area,
)
from leatherpattern.domain import Point
from leatherpattern.exceptions import BooleanOperationError

logger = structlog.get_logger(__name__)


def _tangent(points: Sequence[Point], i: int) -> tuple[float, float]:
    """Forward difference at the start, backward at the end, central elsewhere."""
    last = len(points) - 1
    if i == 0:
        a, b = points[0], points[1]
    elif i == last:
        a, b = points[last - 1], points[last]
    else:
        a, b = points[i - 1], points[i + 1]
    return b.x - a.x, b.y - a.y


def offset_open_path(points: Sequence[Point], delta: float, center: Point) -> list[Point]:
    """Offset an open path relative to a reference center.

    At each point, of the two unit normals the one whose endpoint lies
    farther from ``center`` is taken as outward. The point moves by
    ``normal * delta``, so a negative delta moves it inward. When both
    candidates are equally far the second normal is used. No joins are
    built between neighbours.

    This is a heuristic: on strongly non-convex curves the chosen normal can
    flip between neighbours.

    Args:
        points: Open path in world space
        delta: Offset distance, negative for inward
        center: Interior reference point, typically the holster origin

    Returns:
        Offset path with one point per input point, or the input unchanged
        when it has fewer than 2 points
    """
    if len(points) < 2:
        return list(points)

    result: list[Point] = []
    for i, p in enumerate(points):
        normal = perpendicular_direction(*_tangent(points, i))
        if normal is None:
            result.append(Point(p.x, p.y))
            continue

        nx, ny = normal
        d1 = math.hypot(p.x + nx - center.x, p.y + ny - center.y)
        d2 = math.hypot(p.x - nx - center.x, p.y - ny - center.y)
        if d1 <= d2:
            nx, ny = -nx, -ny

        result.append(Point(p.x + nx * delta, p.y + ny * delta))

    return result


def offset_closed_path(
    points: Sequence[Point],
    delta: float,
    backend: BooleanBackend | None = None,
) -> list[Point]:
    """Offset a closed path with round joins.

    The largest resulting polygon is returned, wound like the input and
    starting at the vertex nearest the input's first point.

    Args:
        points: Closed path in world space
        delta: Offset distance, negative shrinks
        backend: Boolean backend (pyclipper by default)

    Returns:
        The offset path; the input unchanged when it has fewer than 3 points
        or the backend fails; an empty list when the path collapses
    """
    if len(points) < 3:
        return list(points)

    backend = backend or ClipperBackend()
    try:
        solution = backend.offset(points, delta)
    except BooleanOperationError as e:
        logger.warning("Closed offset failed, using input path", error=str(e))
        return list(points)

    if not solution:
        logger.debug("Closed offset collapsed", delta=delta, points=len(points))
        return []

    best = max(solution, key=polygon_area)
    best = ensure_orientation(best, counter_clockwise=signed_area(points) >= 0)
    return rotate_to_nearest(best, points[0])
