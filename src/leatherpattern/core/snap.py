"""Snapping and node editing helpers."""

from collections.abc import Sequence

from leatherpattern.config import SnapConfig
from leatherpattern.core.geometry import distance
from leatherpattern.domain import Node, Point, SampledPoint


def snap_to_grid(value: float, grid_size: float) -> float:
    """Round a coordinate to the nearest grid line."""
    if grid_size <= 0:
        return value
    return round(value / grid_size) * grid_size


def snap_point(point: Point, snap: SnapConfig) -> Point:
    """Snap a point to the grid when grid snapping is enabled."""
    if not snap.snap_grid:
        return point
    return Point(snap_to_grid(point.x, snap.grid_size), snap_to_grid(point.y, snap.grid_size))


def constrain_node(point: Point, asymmetric: bool, snap: SnapConfig) -> Point:
    """Apply editing constraints to a node position in holster-local space.

    Grid snapping is applied first. Half-outline nodes cannot cross the fold
    line (x >= 0) and, with fold snapping on, nodes within the fold
    threshold are placed on it.
    """
    point = snap_point(point, snap)
    if asymmetric:
        return point
    x = max(0.0, point.x)
    if snap.snap_fold and x <= snap.fold_threshold:
        x = 0.0
    return Point(x, point.y)


def insert_node(
    nodes: Sequence[Node],
    local_path: Sequence[SampledPoint],
    local_point: Point,
    tolerance: float,
) -> tuple[list[Node], int] | None:
    """Insert a zero-handle node on the segment nearest ``local_point``.

    Only samples belonging to editable segments (``seg_idx >= 0``) are
    considered. The new node goes right after the segment's start node.

    Args:
        nodes: Current outline nodes
        local_path: Sampled outline in holster-local space
        local_point: Requested node position in holster-local space
        tolerance: Maximum distance from the nearest sample

    Returns:
        (new node list, index of the inserted node), or None when no
        editable sample is within tolerance
    """
    best_idx = -1
    best_dist = float("inf")
    for p in local_path:
        if p.seg_idx < 0:
            continue
        d = distance(p, local_point)
        if d < best_dist:
            best_dist = d
            best_idx = p.seg_idx

    if best_idx < 0 or best_dist >= tolerance:
        return None

    inserted = best_idx + 1
    new_nodes = list(nodes)
    new_nodes.insert(inserted, Node(x=local_point.x, y=local_point.y))
    return new_nodes, inserted
