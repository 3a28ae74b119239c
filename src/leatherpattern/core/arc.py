"""Arc-length parameterization of sampled paths.

An arc table pairs every path point with its cumulative distance from the
start. It converts between positions and fractions of total length: placing
range markers and stitch holes (distance to point) and turning a dragged
handle position back into a range fraction (point to fraction).
"""

from collections.abc import Sequence

from leatherpattern.core.geometry import distance, nearest_point_on_segment
from leatherpattern.domain import ArcEntry, Point


def build_arc(points: Sequence[Point]) -> list[ArcEntry]:
    """Build the cumulative-distance table of an open path.

    Examples:
        >>> [e.d for e in build_arc([Point(0, 0), Point(3, 0), Point(3, 4)])]
        [0.0, 3.0, 7.0]
    """
    table: list[ArcEntry] = []
    total = 0.0
    for i, p in enumerate(points):
        if i > 0:
            total += distance(points[i - 1], p)
        table.append(ArcEntry(p.x, p.y, total))
    return table


def build_arc_closed(points: Sequence[Point]) -> list[ArcEntry]:
    """Build the table of a closed path.

    The first point is repeated at the end, so the last entry's distance is
    the perimeter.
    """
    if not points:
        return []
    return build_arc([*points, points[0]])


def arc_length(table: Sequence[ArcEntry]) -> float:
    """Total length covered by a table (0 for an empty table)."""
    return table[-1].d if table else 0.0


def point_at_distance(table: Sequence[ArcEntry], d: float) -> Point | None:
    """Position at distance ``d`` along the path.

    ``d`` is clamped to ``[0, total]`` and the position is interpolated
    linearly between the bracketing entries.

    Returns:
        The position, or None when the table has fewer than 2 entries or
        zero total length
    """
    if len(table) < 2:
        return None
    total = table[-1].d
    if total <= 0:
        return None

    d = max(0.0, min(total, d))
    for i in range(1, len(table)):
        b = table[i]
        if b.d >= d:
            a = table[i - 1]
            span = b.d - a.d
            t = (d - a.d) / span if span > 0 else 0.0
            return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)
    return table[-1].point


def point_at_fraction(table: Sequence[ArcEntry], fraction: float) -> Point | None:
    """Position at a fraction of the total length."""
    return point_at_distance(table, arc_length(table) * fraction)


def project_to_distance(table: Sequence[ArcEntry], point: Point) -> float | None:
    """Distance along the path of the path position closest to ``point``.

    Every table segment is tested, and the projection onto the nearest one is
    interpolated, so the result changes continuously as the point moves
    along the path. Ties go to the earlier segment.
    """
    if len(table) < 2 or table[-1].d <= 0:
        return None

    best_d = 0.0
    best_dist = float("inf")
    for i in range(1, len(table)):
        a, b = table[i - 1], table[i]
        nearest, dist = nearest_point_on_segment(point, a.point, b.point)
        if dist < best_dist:
            best_dist = dist
            best_d = a.d + distance(a.point, nearest)
    return best_d


def project_to_fraction(
    path: Sequence[Point],
    point: Point,
    table: Sequence[ArcEntry] | None = None,
) -> float | None:
    """Fraction of total length at which ``path`` passes closest to ``point``.

    Args:
        path: Sampled path the table was built from
        point: World point, typically the cursor during a handle drag
        table: Arc table of ``path``; built as an open table when omitted

    Returns:
        Fraction in [0, 1], or None for degenerate paths
    """
    if table is None:
        table = build_arc(path)
    d = project_to_distance(table, point)
    if d is None:
        return None
    return d / table[-1].d
