"""Local-to-world mapping and outline mirroring.

Symmetric geometry lives in holster-local space where the fold line is the
Y axis. Mapping to world space scales, rotates and then translates. A full
symmetric outline is the right half followed by its mirror image traversed
in reverse, which keeps a single consistent winding across the seam.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from leatherpattern.core.geometry import ensure_orientation
from leatherpattern.core.outline import DEFAULT_FOLD_SPACING, DEFAULT_STEPS, sample_outline
from leatherpattern.domain import Node, Point, SampledPoint, Transform

P = TypeVar("P", bound=Point)


def local_to_world(point: Point, transform: Transform) -> Point:
    """Map a local point to world space (scale, rotate, translate)."""
    sx = point.x * transform.scale_x
    sy = point.y * transform.scale_y
    cos = math.cos(transform.rotation)
    sin = math.sin(transform.rotation)
    return Point(
        transform.x + sx * cos - sy * sin,
        transform.y + sx * sin + sy * cos,
    )


def world_to_local(point: Point, transform: Transform) -> Point:
    """Inverse of local_to_world. A zero scale is treated as 1."""
    dx = point.x - transform.x
    dy = point.y - transform.y
    cos = math.cos(-transform.rotation)
    sin = math.sin(-transform.rotation)
    rx = dx * cos - dy * sin
    ry = dx * sin + dy * cos
    return Point(rx / (transform.scale_x or 1.0), ry / (transform.scale_y or 1.0))


def map_path(points: Sequence[P], transform: Transform) -> list[Point]:
    """Map a path to world space, keeping segment tags of sampled points."""
    mapped: list[Point] = []
    for p in points:
        w = local_to_world(p, transform)
        if isinstance(p, SampledPoint):
            mapped.append(SampledPoint(w.x, w.y, p.seg_idx))
        else:
            mapped.append(w)
    return mapped


def mirror_path(half: Sequence[SampledPoint]) -> list[SampledPoint]:
    """Close a local half outline with its mirror image.

    The half path is followed by its x-negated copy in reverse order, so the
    result is symmetric about x = 0 and has no crossing at the seam.
    """
    mirrored = [SampledPoint(-p.x, p.y, p.seg_idx) for p in reversed(half)]
    return [*half, *mirrored]


def reflect_across_fold(points: Sequence[Point], fold_x: float) -> list[Point]:
    """Reflect world points across the vertical line x = fold_x."""
    return [Point(2.0 * fold_x - p.x, p.y) for p in points]


def local_outline(
    nodes: Sequence[Node],
    asymmetric: bool,
    steps: int = DEFAULT_STEPS,
    fold_spacing: float = DEFAULT_FOLD_SPACING,
) -> list[SampledPoint]:
    """Sample the outline in holster-local space.

    Symmetric outlines are returned as the open right half, asymmetric
    outlines as the full closed perimeter.
    """
    return sample_outline(nodes, closed=asymmetric, steps=steps, fold_spacing=fold_spacing)


def world_outline(
    nodes: Sequence[Node],
    holster: Transform,
    asymmetric: bool,
    steps: int = DEFAULT_STEPS,
    fold_spacing: float = DEFAULT_FOLD_SPACING,
) -> list[Point]:
    """Build the full closed world outline of a pattern.

    Symmetric outlines are mirrored about the fold; asymmetric outlines are
    only transformed. Either way the result is wound counter-clockwise
    (positive signed area) with its start point preserved.
    """
    local = local_outline(nodes, asymmetric, steps, fold_spacing)
    if not asymmetric:
        local = mirror_path(local)
    return ensure_orientation(map_path(local, holster), counter_clockwise=True)


def edge_path(
    nodes: Sequence[Node],
    holster: Transform,
    asymmetric: bool,
    steps: int = DEFAULT_STEPS,
    fold_spacing: float = DEFAULT_FOLD_SPACING,
) -> list[Point]:
    """World path that mirrorable edge ranges are measured along.

    For symmetric outlines this is the open right half. For asymmetric
    outlines it is the whole perimeter with its first point repeated at the
    end, so fractions cover the full loop.
    """
    local = local_outline(nodes, asymmetric, steps, fold_spacing)
    if asymmetric and local:
        local = [*local, local[0]]
    return map_path(local, holster)
