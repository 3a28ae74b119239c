"""Unit tests for snapping and node insertion."""

import pytest

from leatherpattern.config import SnapConfig
from leatherpattern.core.outline import sample_outline
from leatherpattern.core.snap import constrain_node, insert_node, snap_point, snap_to_grid
from leatherpattern.domain import Node, Point


class TestSnapping:
    """Tests for grid and fold snapping."""

    def test_snap_to_grid(self) -> None:
        """Values round to the nearest grid line."""
        assert snap_to_grid(7.4, 5.0) == 5.0
        assert snap_to_grid(7.6, 5.0) == 10.0
        assert snap_to_grid(7.6, 0.0) == 7.6

    def test_snap_point_disabled(self) -> None:
        """Points are untouched when grid snapping is off."""
        assert snap_point(Point(7.6, 1.2), SnapConfig()) == Point(7.6, 1.2)

    def test_snap_point_enabled(self) -> None:
        """Both coordinates snap when grid snapping is on."""
        snap = SnapConfig(snap_grid=True, grid_size=5.0)
        assert snap_point(Point(7.6, 1.2), snap) == Point(10.0, 0.0)

    def test_half_outline_cannot_cross_fold(self) -> None:
        """Half-outline nodes are kept on the right of the fold."""
        assert constrain_node(Point(-4.0, 3.0), False, SnapConfig()) == Point(0.0, 3.0)

    def test_asymmetric_unconstrained(self) -> None:
        """Full outlines may use negative x."""
        assert constrain_node(Point(-4.0, 3.0), True, SnapConfig()) == Point(-4.0, 3.0)

    def test_fold_snap(self) -> None:
        """Nodes near the fold land on it when fold snapping is on."""
        snap = SnapConfig(snap_fold=True, fold_threshold=3.0)
        assert constrain_node(Point(2.5, 8.0), False, snap) == Point(0.0, 8.0)
        assert constrain_node(Point(3.5, 8.0), False, snap) == Point(3.5, 8.0)


class TestInsertNode:
    """Tests for inserting nodes on the outline."""

    @pytest.fixture
    def nodes(self) -> list[Node]:
        return [Node(0, -50), Node(40, -50), Node(40, 50), Node(0, 50)]

    def test_inserts_after_segment_start(self, nodes: list[Node]) -> None:
        """A point on segment 1 becomes node 2."""
        path = sample_outline(nodes, closed=False)
        result = insert_node(nodes, path, Point(41.0, 0.0), tolerance=5.0)
        assert result is not None
        new_nodes, idx = result
        assert idx == 2
        assert len(new_nodes) == 5
        assert new_nodes[2] == Node(41.0, 0.0)
        assert nodes[2] == Node(40, 50)

    def test_too_far(self, nodes: list[Node]) -> None:
        """Points beyond the tolerance are rejected."""
        path = sample_outline(nodes, closed=False)
        assert insert_node(nodes, path, Point(20.0, 0.0), tolerance=5.0) is None

    def test_fold_stubs_not_editable(self) -> None:
        """Points near fold stubs do not insert nodes."""
        nodes = [Node(20, -10), Node(20, 10)]
        path = sample_outline(nodes, closed=False, fold_spacing=1.0)
        assert insert_node(nodes, path, Point(2.0, -10.0), tolerance=3.0) is None
