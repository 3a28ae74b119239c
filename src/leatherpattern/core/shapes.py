"""Outlines of holes, cutouts and extension shapes.

Each shape variant is first outlined in its own local space, then placed
with its transform. Symmetric shapes are placed in holster-local space and
get a mirrored twin on the left of the fold (side -1).
"""

import math
from collections.abc import Sequence

from leatherpattern.core.geometry import ensure_orientation, signed_area
from leatherpattern.core.outline import DEFAULT_STEPS, sample_outline
from leatherpattern.core.transform import map_path
from leatherpattern.domain import (
    Circle,
    CustomPolygon,
    Ellipse,
    Extension,
    Hole,
    Pill,
    Point,
    Rectangle,
    Shape,
    Transform,
)

DEFAULT_HOLE_SEGMENTS = 40


def ellipse_points(rx: float, ry: float, segments: int) -> list[Point]:
    """Regular parametric polygon approximating an origin-centered ellipse."""
    return [
        Point(rx * math.cos(2 * math.pi * i / segments), ry * math.sin(2 * math.pi * i / segments))
        for i in range(segments)
    ]


def pill_points(width: float, height: float, segments: int) -> list[Point]:
    """Slot outline: two semicircles joined along the longer axis."""
    horizontal = width >= height
    long_side, short_side = (width, height) if horizontal else (height, width)
    r = short_side / 2.0
    reach = max(long_side / 2.0 - r, 0.0)
    half = max(segments // 2, 2)

    points: list[Point] = []
    for cap, base_angle in ((reach, -math.pi / 2), (-reach, math.pi / 2)):
        for i in range(half + 1):
            a = base_angle + math.pi * i / half
            points.append(Point(cap + r * math.cos(a), r * math.sin(a)))

    if horizontal:
        return points
    return [Point(-p.y, p.x) for p in points]


def rectangle_points(width: float, height: float) -> list[Point]:
    """Corners of an origin-centered rectangle, counter-clockwise."""
    hw, hh = width / 2.0, height / 2.0
    return [Point(-hw, -hh), Point(hw, -hh), Point(hw, hh), Point(-hw, hh)]


def shape_local_outline(
    shape: Shape,
    segments: int = DEFAULT_HOLE_SEGMENTS,
    steps: int = DEFAULT_STEPS,
) -> list[Point]:
    """Closed outline of a shape in its own local space.

    Linked circles have no stored outline (their size is derived) and
    return an empty list.
    """
    if isinstance(shape, Circle):
        return ellipse_points(shape.width / 2.0, shape.width / 2.0, segments)
    if isinstance(shape, Ellipse):
        return ellipse_points(shape.width / 2.0, shape.height / 2.0, segments)
    if isinstance(shape, Pill):
        return pill_points(shape.width, shape.height, segments)
    if isinstance(shape, Rectangle):
        return rectangle_points(shape.width, shape.height)
    if isinstance(shape, CustomPolygon | Extension):
        return list(sample_outline(shape.nodes, closed=True, steps=steps))
    return []


def shape_sides(shape: Shape) -> tuple[int, ...]:
    """Sides of the fold a shape appears on."""
    return (1, -1) if shape.symmetric else (1,)


def shape_world_outline(
    shape: Shape,
    holster: Transform,
    side: int = 1,
    segments: int = DEFAULT_HOLE_SEGMENTS,
    steps: int = DEFAULT_STEPS,
) -> list[Point]:
    """Place a shape's outline in world space.

    Args:
        shape: The shape to outline
        holster: Pattern transform, used for symmetric shapes
        side: 1 for the shape itself, -1 for its mirrored twin
        segments: Polygon segments for round shapes
        steps: Samples per bezier segment for node-defined shapes

    Returns:
        Closed world outline with the same winding as the local outline
    """
    local = shape_local_outline(shape, segments, steps)
    if not local:
        return []

    placed = map_path(local, shape.transform)
    if not shape.symmetric:
        return placed

    if side == -1:
        placed = [Point(-p.x, p.y) for p in placed]
    world = map_path(placed, holster)
    return ensure_orientation(world, counter_clockwise=signed_area(local) >= 0)


def shape_center(shape: Shape, holster: Transform, side: int = 1) -> Point:
    """World position of a shape's origin."""
    origin = Point(shape.transform.x, shape.transform.y)
    if not shape.symmetric:
        return origin
    if side == -1:
        origin = Point(-origin.x, origin.y)
    return map_path([origin], holster)[0]


def is_bordered(shape: Shape) -> bool:
    """Whether a shape carries a stitch border."""
    return isinstance(shape, Hole | CustomPolygon) and shape.stitch_border


def holes(shapes: Sequence[Shape]) -> list[Shape]:
    """Shapes that are cut out of the pattern."""
    return [s for s in shapes if isinstance(s, Hole | CustomPolygon)]
