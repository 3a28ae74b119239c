"""Geometric operations shared by the pattern engine.

Helpers used across the geometry pipeline:
- Distances and bounding boxes
- Signed and unsigned polygon area
- Point containment (even-odd rule)
- Nearest point on a segment
- Unit normals of a direction
- Winding normalization of closed paths

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from leatherpattern.domain import Point, SampledPoint


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def bounding_box(points: Sequence[Point]) -> Bounds:
    """Calculate the bounding box of a point sequence.

    Returns a zero box at the origin for an empty sequence.
    """
    if not points:
        return Bounds(0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bounds(min(xs), min(ys), max(xs), max(ys))


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area of a closed path.

    Positive for counter-clockwise traversal with the Y axis up, negative
    for clockwise. Outlines are normalized to positive area.

    Args:
        points: Closed path; the closing edge back to the first point is implied

    Returns:
        Area in square millimeters, 0.0 for fewer than 3 points

    Examples:
        >>> signed_area([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
        100.0
        >>> signed_area([Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)])
        -100.0
    """
    if len(points) < 3:
        return 0.0

    twice_area = 0.0
    prev = points[-1]
    for p in points:
        twice_area += prev.x * p.y - p.x * prev.y
        prev = p

    return twice_area / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    """Unsigned enclosed area of a polygon."""
    return abs(signed_area(points))


def path_length(points: Sequence[Point], closed: bool = False) -> float:
    """Total length of a polyline, including the closing edge when closed."""
    total = 0.0
    for i in range(1, len(points)):
        total += distance(points[i - 1], points[i])
    if closed and len(points) > 1:
        total += distance(points[-1], points[0])
    return total


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Whether a point lies inside a closed outline (even-odd rule).

    A ray from the point toward +X is tested against every edge; an odd
    number of crossings means inside. Points exactly on an edge may go
    either way.
    """
    if len(polygon) < 3:
        return False

    inside = False
    px, py = point.x, point.y
    prev = polygon[-1]
    for cur in polygon:
        if (cur.y > py) != (prev.y > py):
            cross_x = cur.x + (prev.x - cur.x) * (py - cur.y) / (prev.y - cur.y)
            if px < cross_x:
                inside = not inside
        prev = cur

    return inside


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Project ``point`` onto the segment from ``seg_start`` to ``seg_end``.

    Returns:
        (projection clamped to the segment, distance from ``point`` to it).
        A zero-length segment projects onto its start.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-18:
        return Point(seg_start.x, seg_start.y), distance(point, seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_sq
    t = min(1.0, max(0.0, t))
    nearest = Point(seg_start.x + dx * t, seg_start.y + dy * t)
    return nearest, distance(point, nearest)


def perpendicular_direction(dx: float, dy: float) -> tuple[float, float] | None:
    """Unit normal of the direction (dx, dy), turned a quarter counter-clockwise.

    Returns None for a zero-length direction.
    """
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return None
    return -dy / length, dx / length


def reverse_closed(points: Sequence[Point]) -> list[Point]:
    """Reverse the traversal direction of a closed path, keeping its start point."""
    if len(points) < 2:
        return list(points)
    return [points[0], *reversed(points[1:])]


def ensure_orientation(points: Sequence[Point], counter_clockwise: bool = True) -> list[Point]:
    """Return the closed path wound in the requested direction.

    Degenerate paths (zero area) are returned unchanged.
    """
    area = signed_area(points)
    if area == 0.0 or (area > 0) == counter_clockwise:
        return list(points)
    return reverse_closed(points)


def rotate_to_nearest(points: Sequence[Point], target: Point) -> list[Point]:
    """Rotate a closed path so it starts at the vertex nearest ``target``."""
    if not points:
        return []
    best = min(range(len(points)), key=lambda i: distance(points[i], target))
    return list(points[best:]) + list(points[:best])


def retag(points: Sequence[Point], seg_idx: int) -> list[SampledPoint]:
    """Copy points as SampledPoints carrying a single segment index."""
    return [SampledPoint(p.x, p.y, seg_idx) for p in points]
