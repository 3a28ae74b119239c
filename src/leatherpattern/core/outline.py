"""Bezier outline sampling.

Turns an ordered node list into a sampled point sequence. Each output point
is tagged with the index of the segment it came from so that positions along
the path can be mapped back to editable segments.

In open (half-outline) mode the outline runs from the fold line to the first
node, through all nodes, and back to the fold line. The two fold stubs are
straight runs tagged FOLD_SEGMENT.
"""

import math
from collections.abc import Sequence

from leatherpattern.core._bezier import sample_cubic
from leatherpattern.core.geometry import distance
from leatherpattern.domain import FOLD_SEGMENT, Node, Point, SampledPoint

DEFAULT_STEPS = 20
DEFAULT_FOLD_SPACING = 5.0


def sample_segment(current: Node, following: Node, seg_idx: int, steps: int) -> list[SampledPoint]:
    """Sample the cubic segment between two consecutive nodes.

    The curve uses control points ``current``, ``current + h2``,
    ``following + h1`` and ``following``. The end anchor is not included.
    """
    controls = [current.anchor, current.out_control, following.in_control, following.anchor]
    return [SampledPoint(x, y, seg_idx) for x, y in sample_cubic(controls, steps)]


def _fold_stub(start: Point, end: Point, spacing: float, include_start: bool) -> list[SampledPoint]:
    """Sample a straight run at roughly ``spacing`` intervals.

    The run includes exactly one of its endpoints: the start when
    ``include_start`` is set, otherwise the end.
    """
    length = distance(start, end)
    if length < 1e-9:
        return []
    count = max(1, math.ceil(length / spacing))
    ks = range(count) if include_start else range(1, count + 1)
    return [
        SampledPoint(
            start.x + (end.x - start.x) * k / count,
            start.y + (end.y - start.y) * k / count,
            FOLD_SEGMENT,
        )
        for k in ks
    ]


def sample_outline(
    nodes: Sequence[Node],
    closed: bool,
    steps: int = DEFAULT_STEPS,
    fold_spacing: float = DEFAULT_FOLD_SPACING,
) -> list[SampledPoint]:
    """Sample an outline defined by bezier nodes.

    Args:
        nodes: Ordered outline nodes
        closed: True for a full perimeter (last segment wraps to the first
            node), False for a half outline bounded by the fold line x = 0
        steps: Samples per bezier segment
        fold_spacing: Approximate spacing of fold stub samples (open mode)

    Returns:
        Ordered sampled points. Degenerate segments produce duplicate points.
    """
    n = len(nodes)
    if n == 0:
        return []

    points: list[SampledPoint] = []

    if closed:
        for i in range(n):
            points.extend(sample_segment(nodes[i], nodes[(i + 1) % n], i, steps))
        return points

    first = nodes[0]
    points.extend(_fold_stub(Point(0.0, first.y), first.anchor, fold_spacing, include_start=True))

    for i in range(n - 1):
        points.extend(sample_segment(nodes[i], nodes[i + 1], i, steps))

    last = nodes[-1]
    points.append(SampledPoint(last.x, last.y, n - 2 if n > 1 else FOLD_SEGMENT))
    points.extend(_fold_stub(last.anchor, Point(0.0, last.y), fold_spacing, include_start=False))

    return points


def sample_polyline(nodes: Sequence[Node], steps: int = DEFAULT_STEPS) -> list[SampledPoint]:
    """Sample an open bezier line through ``nodes`` without fold stubs.

    Used for free-drawn stitch lines. The last anchor closes the line and
    carries the index of the final segment.
    """
    n = len(nodes)
    if n == 0:
        return []
    points: list[SampledPoint] = []
    for i in range(n - 1):
        points.extend(sample_segment(nodes[i], nodes[i + 1], i, steps))
    last = nodes[-1]
    points.append(SampledPoint(last.x, last.y, max(n - 2, 0)))
    return points
