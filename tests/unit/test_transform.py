"""Unit tests for transforms and mirroring."""

import math

import pytest

from leatherpattern.core.geometry import signed_area
from leatherpattern.core.outline import sample_outline
from leatherpattern.core.transform import (
    edge_path,
    local_to_world,
    map_path,
    mirror_path,
    reflect_across_fold,
    world_outline,
    world_to_local,
)
from leatherpattern.domain import HolsterTransform, Node, Point, SampledPoint, Transform


class TestLocalToWorld:
    """Tests for point mapping."""

    def test_identity(self) -> None:
        """The identity transform leaves points in place."""
        assert local_to_world(Point(3, 4), Transform()) == Point(3, 4)

    def test_scale_rotate_translate(self) -> None:
        """Scaling happens before rotation, translation last."""
        t = Transform(x=100, y=50, rotation=math.pi / 2, scale_x=2.0)
        w = local_to_world(Point(1, 0), t)
        assert w.x == pytest.approx(100.0)
        assert w.y == pytest.approx(52.0)

    def test_inverse(self) -> None:
        """world_to_local undoes local_to_world."""
        t = Transform(x=-20, y=7, rotation=0.7, scale_x=1.5, scale_y=0.5)
        p = Point(12.0, -3.0)
        back = world_to_local(local_to_world(p, t), t)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_zero_scale_treated_as_one(self) -> None:
        """A zero scale does not divide by zero."""
        assert world_to_local(Point(5, 5), Transform(scale_x=0.0)) == Point(5.0, 5.0)

    def test_map_path_keeps_tags(self) -> None:
        """Sampled points keep their segment index when mapped."""
        mapped = map_path([SampledPoint(1, 1, 4)], Transform(x=10))
        assert mapped == [SampledPoint(11.0, 1.0, 4)]


class TestMirroring:
    """Tests for closing a half outline with its mirror."""

    def test_mirror_is_symmetric(self) -> None:
        """Every point has its reflection in the mirrored outline."""
        nodes = [Node(10, -30, h2=Point(15, 0)), Node(40, 10, h1=Point(0, -10)), Node(5, 30)]
        full = mirror_path(sample_outline(nodes, closed=False))
        coords = {(round(p.x, 9), round(p.y, 9)) for p in full}
        for x, y in coords:
            assert (-x, y) in coords

    def test_mirror_order(self) -> None:
        """The mirrored half follows in reverse order."""
        half = [SampledPoint(0, 0, -1), SampledPoint(5, 1, 0), SampledPoint(0, 2, -1)]
        full = mirror_path(half)
        assert [p.to_tuple() for p in full[3:]] == [(-0.0, 2), (-5, 1), (-0.0, 0)]

    def test_two_node_half_area(self) -> None:
        """A straight two-node half closes into a 100 x 100 triangle."""
        nodes = [Node(0, -100), Node(50, 0)]
        full = mirror_path(sample_outline(nodes, closed=False))
        assert signed_area(full) == pytest.approx(5000.0)

    def test_reflect_across_fold(self) -> None:
        """Points are reflected about x = fold_x."""
        assert reflect_across_fold([Point(120, 3)], 100.0) == [Point(80.0, 3)]


class TestWorldOutline:
    """Tests for world outline construction."""

    def test_symmetric_outline(self, half_nodes) -> None:
        """The symmetric rectangle is mirrored to 80 x 100."""
        outline = world_outline(half_nodes, HolsterTransform(x=200, y=100), asymmetric=False)
        assert signed_area(outline) == pytest.approx(8000.0)
        assert min(p.x for p in outline) == pytest.approx(160.0)
        assert max(p.x for p in outline) == pytest.approx(240.0)

    def test_counter_clockwise(self) -> None:
        """Clockwise node loops are rewound, keeping the start point."""
        nodes = [Node(0, 0), Node(0, 10), Node(10, 10), Node(10, 0)]
        outline = world_outline(nodes, HolsterTransform(), asymmetric=True)
        assert signed_area(outline) > 0
        assert outline[0].to_tuple() == (0.0, 0.0)

    def test_mirror_flip_keeps_ccw(self, half_nodes) -> None:
        """A negative holster scale still yields a counter-clockwise outline."""
        outline = world_outline(half_nodes, HolsterTransform(scale_x=-1.0), asymmetric=False)
        assert signed_area(outline) == pytest.approx(8000.0)


class TestEdgePath:
    """Tests for the path edge ranges are measured along."""

    def test_symmetric_is_open_half(self, half_nodes) -> None:
        """Symmetric outlines expose only the right half."""
        path = edge_path(half_nodes, HolsterTransform(x=10), asymmetric=False)
        assert path[0].to_tuple() == (10.0, -50.0)
        assert path[-1].to_tuple() == (10.0, 50.0)
        assert all(p.x >= 10.0 for p in path)

    def test_asymmetric_repeats_start(self) -> None:
        """Asymmetric outlines are closed by repeating the first point."""
        nodes = [Node(0, 0), Node(10, 0), Node(10, 10), Node(0, 10)]
        path = edge_path(nodes, HolsterTransform(), asymmetric=True)
        assert path[0].to_tuple() == path[-1].to_tuple()
        assert len(path) == 81
