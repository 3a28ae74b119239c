"""Circles sized to match an edge range.

A linked circle is the round part (a bottom plug, a cap) that gets stitched
onto an edge. Its circumference equals the real length of the source range
on the unmodified outline, and it carries the same number of stitches, so
both parts line up hole for hole.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from leatherpattern.core.arc import arc_length, build_arc, build_arc_closed
from leatherpattern.core.stitches import count_stitches
from leatherpattern.domain import EdgeRange, Point

logger = structlog.get_logger(__name__)

DEFAULT_CIRCLE_SEGMENTS = 72


@dataclass
class LinkedCircleGeometry:
    """Derived geometry of a linked circle.

    Attributes:
        center: Circle center in world space
        radius: Radius such that 2*pi*radius equals the source length
        source_length: Real length of the source range (mm)
        points: Polygon approximation of the circle
        stitch_fractions: Hole positions as fractions of the circumference
        stitch_points: Hole positions in world space
    """

    center: Point
    radius: float
    source_length: float
    points: list[Point]
    stitch_fractions: list[float]
    stitch_points: list[Point]

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    @property
    def stitch_count(self) -> int:
        return len(self.stitch_fractions)


def linked_circle(
    reference_path: Sequence[Point],
    closed: bool,
    ranges: Sequence[EdgeRange],
    range_idx: int,
    center: Point,
    spacing: float,
    rotation: float = 0.0,
    segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> LinkedCircleGeometry | None:
    """Derive a circle matching the length of ``ranges[range_idx]``.

    Args:
        reference_path: The unmodified (not offset) path the range is on
        closed: Whether the path is a closed perimeter
        ranges: Range list the index refers to
        range_idx: Index of the source range
        center: Circle center in world space
        spacing: Stitch spacing (mm)
        rotation: Angle of the first stitch (radians)
        segments: Polygon segments of the circle outline

    Returns:
        The circle geometry, or None when the range is missing, the
        reference path has fewer than 3 points, or the length is not positive
    """
    if not 0 <= range_idx < len(ranges):
        logger.warning("Linked circle source range missing", range_idx=range_idx, ranges=len(ranges))
        return None
    if len(reference_path) < 3:
        logger.debug("Linked circle reference path too short", points=len(reference_path))
        return None

    table = build_arc_closed(reference_path) if closed else build_arc(reference_path)
    source = ranges[range_idx]
    length = arc_length(table) * (source.end - source.start)
    if length <= 0:
        logger.debug("Linked circle source range has no length", range_idx=range_idx)
        return None

    radius = length / (2.0 * math.pi)
    points = [
        Point(
            center.x + radius * math.cos(2 * math.pi * i / segments),
            center.y + radius * math.sin(2 * math.pi * i / segments),
        )
        for i in range(segments)
    ]

    fractions = [k * spacing / length for k in range(count_stitches(length, spacing))]
    stitch_points = [
        Point(
            center.x + radius * math.cos(rotation + 2 * math.pi * f),
            center.y + radius * math.sin(rotation + 2 * math.pi * f),
        )
        for f in fractions
    ]

    return LinkedCircleGeometry(
        center=center,
        radius=radius,
        source_length=length,
        points=points,
        stitch_fractions=fractions,
        stitch_points=stitch_points,
    )
