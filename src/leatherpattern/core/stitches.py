"""Stitch placement along edge ranges.

Stitches follow the outline offset inward by the stitch margin. A range's
fractions are applied to that offset path's own length, and holes are
emitted every ``spacing`` millimeters from the range start up to its end.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from leatherpattern.core.arc import (
    arc_length,
    point_at_distance,
    project_to_fraction,
)
from leatherpattern.domain import ArcEntry, EdgeRange, Point

logger = structlog.get_logger(__name__)

RANGE_START = "start"
RANGE_END = "end"


@dataclass
class StitchPlacement:
    """Stitch holes of one stitch line.

    Attributes:
        label: Identifies the stitch line in reports
        points: Hole centers along the offset path
        mirrored_points: Reflected holes on the other side of the fold
        hole_size: Hole diameter (mm)
        spacing: Hole spacing (mm)
    """

    label: str
    points: list[Point] = field(default_factory=list)
    mirrored_points: list[Point] = field(default_factory=list)
    hole_size: float = 0.0
    spacing: float = 0.0

    @property
    def count(self) -> int:
        """Total holes, mirrored ones included."""
        return len(self.points) + len(self.mirrored_points)

    def all_points(self) -> list[Point]:
        return [*self.points, *self.mirrored_points]


@dataclass
class StitchReport:
    """Stitch counts per stitch line of a pattern."""

    lines: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(count for _, count in self.lines)

    @classmethod
    def from_placements(cls, placements: Sequence[StitchPlacement]) -> "StitchReport":
        return cls(lines=[(p.label, p.count) for p in placements])


def count_stitches(length: float, spacing: float) -> int:
    """Holes in a run of ``length`` with holes at both ends: floor(length/spacing) + 1.

    Returns 0 when the spacing is not positive or the length is negative.
    """
    if spacing <= 0 or length < 0:
        return 0
    return math.floor(length / spacing) + 1


def stitch_distances(total: float, edge_range: EdgeRange, spacing: float) -> list[float]:
    """Distances along a path of length ``total`` at which holes fall."""
    start = total * edge_range.start
    end = total * edge_range.end
    n = count_stitches(end - start, spacing)
    return [start + k * spacing for k in range(n)]


def place_stitches(table: Sequence[ArcEntry], edge_range: EdgeRange, spacing: float) -> list[Point]:
    """Hole positions of a range over an arc table.

    Returns an empty list for degenerate tables or non-positive spacing.
    """
    total = arc_length(table)
    if len(table) < 2 or total <= 0:
        return []
    points: list[Point] = []
    for d in stitch_distances(total, edge_range, spacing):
        pt = point_at_distance(table, d)
        if pt is not None:
            points.append(pt)
    return points


def range_handles(table: Sequence[ArcEntry], edge_range: EdgeRange) -> tuple[Point | None, Point | None]:
    """Positions of a range's start and end handles."""
    total = arc_length(table)
    return (
        point_at_distance(table, total * edge_range.start),
        point_at_distance(table, total * edge_range.end),
    )


def with_start(edge_range: EdgeRange, fraction: float, min_gap: float = 0.01) -> EdgeRange:
    """Move a range's start, keeping it in [0, end - min_gap]."""
    start = max(0.0, min(edge_range.end - min_gap, fraction))
    return EdgeRange(start=start, end=edge_range.end)


def with_end(edge_range: EdgeRange, fraction: float, min_gap: float = 0.01) -> EdgeRange:
    """Move a range's end, keeping it in [start + min_gap, 1]."""
    end = max(edge_range.start + min_gap, min(1.0, fraction))
    return EdgeRange(start=edge_range.start, end=end)


def drag_range(
    edge_range: EdgeRange,
    handle: str,
    path: Sequence[Point],
    table: Sequence[ArcEntry],
    cursor: Point,
    min_gap: float = 0.01,
) -> EdgeRange:
    """Update a range from a handle drag.

    The cursor is projected onto the path and the dragged end is clamped so
    the range never inverts.

    Args:
        edge_range: Range being edited
        handle: RANGE_START or RANGE_END
        path: Offset path the handles are drawn on
        table: Arc table of ``path``
        cursor: Cursor position in world space
        min_gap: Minimum start/end separation in fraction space

    Returns:
        The updated range, or the original when the path is degenerate
    """
    fraction = project_to_fraction(path, cursor, table)
    if fraction is None:
        return edge_range
    if handle == RANGE_START:
        return with_start(edge_range, fraction, min_gap)
    if handle == RANGE_END:
        return with_end(edge_range, fraction, min_gap)
    raise ValueError(f"Unknown range handle: {handle!r}")


def compare_stitch_counts(first: StitchReport, second: StitchReport) -> int:
    """Difference in total stitch count between two joined layers.

    A non-zero difference is logged as a warning, since layers stitched
    together need matching hole counts.
    """
    difference = first.total - second.total
    if difference:
        logger.warning(
            "Stitch count mismatch between layers",
            first=first.total,
            second=second.total,
            difference=difference,
        )
    return difference
