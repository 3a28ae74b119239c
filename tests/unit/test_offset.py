"""Unit tests for open and closed path offsetting."""

import pytest

from leatherpattern.core.geometry import polygon_area, signed_area
from leatherpattern.core.offset import offset_closed_path, offset_open_path
from leatherpattern.domain import Point
from leatherpattern.exceptions import BooleanOperationError

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


class FailingBackend:
    """Backend whose offset always fails."""

    def union(self, subjects, clips):
        raise BooleanOperationError("union", "boom")

    def offset(self, path, delta):
        raise BooleanOperationError("offset", "boom")


class TestOffsetOpenPath:
    """Tests for the normal-based open path offset."""

    def test_single_point_unchanged(self) -> None:
        """A one-point path is returned as is."""
        assert offset_open_path([Point(3, 4)], -2.0, Point(0, 0)) == [Point(3, 4)]

    def test_empty(self) -> None:
        """An empty path stays empty."""
        assert offset_open_path([], -2.0, Point(0, 0)) == []

    def test_moves_toward_center(self) -> None:
        """A negative delta moves points toward the reference center."""
        path = [Point(x, -50) for x in range(0, 41, 10)]
        result = offset_open_path(path, -5.0, Point(0, 0))
        assert [p.y for p in result] == pytest.approx([-45.0] * 5)
        assert [p.x for p in result] == pytest.approx([p.x for p in path])

    def test_positive_delta_moves_away(self) -> None:
        """A positive delta moves points away from the center."""
        path = [Point(50, y) for y in range(-20, 21, 10)]
        result = offset_open_path(path, 3.0, Point(0, 0))
        assert all(p.x == pytest.approx(53.0) for p in result)

    def test_one_point_per_input(self) -> None:
        """No joins are added or removed."""
        path = [Point(0, -50), Point(40, -50), Point(40, 50), Point(0, 50)]
        assert len(offset_open_path(path, -5.0, Point(0, 0))) == len(path)

    def test_zero_tangent_keeps_point(self) -> None:
        """Points with no tangent direction are not moved."""
        path = [Point(5, 5), Point(5, 5), Point(5, 5)]
        assert offset_open_path(path, -2.0, Point(0, 0)) == path

    def test_tie_uses_second_normal(self) -> None:
        """With the center on the path's line the second normal wins."""
        # Tangent (1, 0): first normal (0, 1), second normal (0, -1)
        path = [Point(-1, 0), Point(0, 0), Point(1, 0)]
        result = offset_open_path(path, 2.0, Point(0, 0))
        assert result[1].x == pytest.approx(0.0)
        assert result[1].y == pytest.approx(-2.0)


class TestOffsetClosedPath:
    """Tests for the boolean-backed closed path offset."""

    def test_square_inward(self) -> None:
        """A 10mm square offset by -2mm has area 36."""
        result = offset_closed_path(SQUARE, -2.0)
        assert polygon_area(result) == pytest.approx(36.0, abs=0.1)

    def test_area_decreases_monotonically(self) -> None:
        """Deeper insets give strictly smaller areas until collapse."""
        areas = [polygon_area(offset_closed_path(SQUARE, -d)) for d in (0.5, 1.0, 2.0, 3.0, 4.0)]
        assert all(a < polygon_area(SQUARE) for a in areas)
        assert areas == sorted(areas, reverse=True)
        assert len(set(areas)) == len(areas)

    def test_collapse_returns_empty(self) -> None:
        """Insetting past the half width collapses the path."""
        assert offset_closed_path(SQUARE, -6.0) == []

    def test_single_point_unchanged(self) -> None:
        """Degenerate input is returned unchanged without raising."""
        assert offset_closed_path([Point(1, 1)], -2.0) == [Point(1, 1)]

    def test_keeps_winding(self) -> None:
        """Clockwise inputs give clockwise results."""
        clockwise = list(reversed(SQUARE))
        assert signed_area(offset_closed_path(clockwise, -1.0)) < 0
        assert signed_area(offset_closed_path(SQUARE, -1.0)) > 0

    def test_starts_near_input_start(self) -> None:
        """The result is rotated to start next to the input's first point."""
        result = offset_closed_path(SQUARE, -2.0)
        assert result[0].x == pytest.approx(2.0, abs=0.05)
        assert result[0].y == pytest.approx(2.0, abs=0.05)

    def test_outward_rounds_corners(self) -> None:
        """Outward offsets use round joins."""
        result = offset_closed_path(SQUARE, 2.0)
        # Square grown by 2mm with quarter-circle corners
        expected = 14 * 14 - (4 - 3.14159) * 4
        assert polygon_area(result) == pytest.approx(expected, abs=2.5)

    def test_backend_failure_returns_input(self) -> None:
        """A failing backend leaves the path unchanged."""
        assert offset_closed_path(SQUARE, -2.0, FailingBackend()) == SQUARE
