"""Unit tests for arc-length tables."""

import math

import pytest

from leatherpattern.core.arc import (
    arc_length,
    build_arc,
    build_arc_closed,
    point_at_distance,
    point_at_fraction,
    project_to_distance,
    project_to_fraction,
)
from leatherpattern.domain import Point

L_PATH = [Point(0, 0), Point(30, 0), Point(30, 40)]


class TestBuildArc:
    """Tests for table construction."""

    def test_cumulative_distances(self) -> None:
        """Distances accumulate along the path."""
        assert [e.d for e in build_arc(L_PATH)] == [0.0, 30.0, 70.0]

    def test_closed_repeats_first_point(self) -> None:
        """Closed tables end at the start with the perimeter as distance."""
        table = build_arc_closed(L_PATH)
        assert len(table) == 4
        assert table[-1].point == L_PATH[0]
        assert arc_length(table) == pytest.approx(120.0)

    def test_empty(self) -> None:
        """Empty paths give empty tables of zero length."""
        assert build_arc([]) == []
        assert build_arc_closed([]) == []
        assert arc_length([]) == 0.0


class TestPointAtDistance:
    """Tests for distance to position lookup."""

    def test_endpoints_open(self) -> None:
        """Distance 0 is the first point and the total is the last."""
        table = build_arc(L_PATH)
        assert point_at_distance(table, 0.0) == Point(0.0, 0.0)
        assert point_at_distance(table, 70.0) == Point(30.0, 40.0)

    def test_end_of_closed_is_start(self) -> None:
        """On a closed table the total distance returns to the start."""
        table = build_arc_closed(L_PATH)
        assert point_at_distance(table, arc_length(table)) == Point(0.0, 0.0)

    def test_interpolates(self) -> None:
        """Positions between entries are interpolated linearly."""
        assert point_at_distance(build_arc(L_PATH), 50.0) == Point(30.0, 20.0)

    def test_clamps(self) -> None:
        """Distances outside the path clamp to its ends."""
        table = build_arc(L_PATH)
        assert point_at_distance(table, -5.0) == Point(0.0, 0.0)
        assert point_at_distance(table, 500.0) == Point(30.0, 40.0)

    def test_degenerate(self) -> None:
        """Short or zero-length tables have no positions."""
        assert point_at_distance(build_arc([Point(1, 1)]), 0.0) is None
        assert point_at_distance(build_arc([Point(1, 1), Point(1, 1)]), 0.0) is None

    def test_fraction(self) -> None:
        """Fractions scale by the total length."""
        assert point_at_fraction(build_arc(L_PATH), 0.5) == Point(30.0, 5.0)


class TestProjection:
    """Tests for position to fraction projection."""

    def test_round_trip(self) -> None:
        """Projecting a path position returns its fraction."""
        path = [Point(10 * math.cos(a / 10), 10 * math.sin(a / 10)) for a in range(30)]
        table = build_arc(path)
        total = arc_length(table)
        for d in (0.0, 3.3, 12.7, total / 2, total):
            point = point_at_distance(table, d)
            assert project_to_fraction(path, point, table) == pytest.approx(d / total, abs=1e-6)

    def test_off_path_point(self) -> None:
        """Off-path points project onto the nearest segment."""
        assert project_to_distance(build_arc(L_PATH), Point(35, 10)) == pytest.approx(40.0)

    def test_builds_table_when_missing(self) -> None:
        """The table is optional."""
        assert project_to_fraction(L_PATH, Point(15, -3)) == pytest.approx(15.0 / 70.0)

    def test_degenerate(self) -> None:
        """Degenerate paths have no fraction."""
        assert project_to_fraction([Point(0, 0)], Point(1, 1)) is None
        assert project_to_fraction([Point(0, 0), Point(0, 0)], Point(1, 1)) is None
