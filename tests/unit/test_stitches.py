"""Unit tests for stitch counting, placement and range editing."""

import pytest

from leatherpattern.core.arc import build_arc
from leatherpattern.core.stitches import (
    RANGE_END,
    RANGE_START,
    StitchPlacement,
    StitchReport,
    compare_stitch_counts,
    count_stitches,
    drag_range,
    place_stitches,
    range_handles,
    stitch_distances,
    with_end,
    with_start,
)
from leatherpattern.domain import EdgeRange, Point

LINE = [Point(0, 0), Point(50, 0), Point(100, 0)]


class TestCountStitches:
    """Tests for count_stitches."""

    @pytest.mark.parametrize(
        ("length", "spacing", "expected"),
        [
            (100.0, 4.0, 26),
            (99.9, 4.0, 25),
            (0.0, 4.0, 1),
            (3.9, 4.0, 1),
            (62.83, 4.0, 16),
        ],
    )
    def test_floor_plus_one(self, length: float, spacing: float, expected: int) -> None:
        """Holes at both ends: floor(length / spacing) + 1."""
        assert count_stitches(length, spacing) == expected

    def test_invalid_inputs(self) -> None:
        """Non-positive spacing or negative length gives no holes."""
        assert count_stitches(10.0, 0.0) == 0
        assert count_stitches(-1.0, 4.0) == 0


class TestPlaceStitches:
    """Tests for hole placement along a range."""

    def test_full_range_count(self) -> None:
        """A 100mm path at 4mm spacing holds 26 holes."""
        points = place_stitches(build_arc(LINE), EdgeRange(0.0, 1.0), 4.0)
        assert len(points) == 26
        assert points[0] == Point(0.0, 0.0)
        assert points[-1] == Point(100.0, 0.0)

    def test_partial_range(self) -> None:
        """Holes start at the range start and keep the spacing."""
        points = place_stitches(build_arc(LINE), EdgeRange(0.25, 0.75), 5.0)
        assert len(points) == 11
        assert [p.x for p in points[:3]] == pytest.approx([25.0, 30.0, 35.0])

    def test_distances(self) -> None:
        """Distances are start + k * spacing."""
        assert stitch_distances(10.0, EdgeRange(0.0, 1.0), 4.0) == [0.0, 4.0, 8.0]

    def test_degenerate_table(self) -> None:
        """Tables without length place nothing."""
        assert place_stitches(build_arc([Point(0, 0)]), EdgeRange(), 4.0) == []
        assert place_stitches([], EdgeRange(), 4.0) == []

    def test_handles(self) -> None:
        """Handles sit at the range ends."""
        start, end = range_handles(build_arc(LINE), EdgeRange(0.1, 0.6))
        assert start == Point(10.0, 0.0)
        assert end == Point(60.0, 0.0)


class TestRangeEditing:
    """Tests for dragging range handles."""

    def test_with_start_clamps(self) -> None:
        """The start cannot pass the end minus the gap."""
        assert with_start(EdgeRange(0.2, 0.5), 0.9).start == pytest.approx(0.49)
        assert with_start(EdgeRange(0.2, 0.5), -1.0).start == 0.0

    def test_with_end_clamps(self) -> None:
        """The end cannot pass the start plus the gap, nor 1."""
        assert with_end(EdgeRange(0.2, 0.5), 0.1).end == pytest.approx(0.21)
        assert with_end(EdgeRange(0.2, 0.5), 1.5).end == 1.0

    def test_drag_end(self) -> None:
        """Dragging the end handle follows the projected cursor."""
        table = build_arc(LINE)
        updated = drag_range(EdgeRange(0.0, 1.0), RANGE_END, LINE, table, Point(40, 7))
        assert updated.start == 0.0
        assert updated.end == pytest.approx(0.4)

    def test_drag_start_past_end(self) -> None:
        """Dragging the start beyond the end keeps the minimum gap."""
        table = build_arc(LINE)
        updated = drag_range(EdgeRange(0.0, 0.5), RANGE_START, LINE, table, Point(90, 0))
        assert updated.start == pytest.approx(0.49)
        assert updated.end == 0.5

    def test_drag_degenerate_path(self) -> None:
        """Dragging on a degenerate path leaves the range alone."""
        path = [Point(0, 0)]
        edge_range = EdgeRange(0.2, 0.4)
        assert drag_range(edge_range, RANGE_END, path, build_arc(path), Point(3, 3)) == edge_range

    def test_unknown_handle(self) -> None:
        """Unknown handle names are rejected."""
        with pytest.raises(ValueError, match="Unknown range handle"):
            drag_range(EdgeRange(), "middle", LINE, build_arc(LINE), Point(10, 0))


class TestStitchReport:
    """Tests for stitch reports and layer comparison."""

    def test_counts_include_mirrored(self) -> None:
        """Mirrored holes count towards a line's total."""
        placement = StitchPlacement(
            label="edge 1",
            points=[Point(0, 0), Point(1, 0)],
            mirrored_points=[Point(-1, 0)],
        )
        assert placement.count == 3
        assert placement.all_points() == [Point(0, 0), Point(1, 0), Point(-1, 0)]

    def test_report_total(self) -> None:
        """The total sums every line."""
        report = StitchReport.from_placements(
            [
                StitchPlacement(label="a", points=[Point(0, 0)] * 4),
                StitchPlacement(label="b", points=[Point(0, 0)] * 6),
            ]
        )
        assert report.lines == [("a", 4), ("b", 6)]
        assert report.total == 10

    def test_compare_matching(self) -> None:
        """Matching layers have no difference."""
        report = StitchReport(lines=[("a", 5)])
        assert compare_stitch_counts(report, StitchReport(lines=[("b", 5)])) == 0

    def test_compare_mismatch(self) -> None:
        """The difference is first minus second."""
        first = StitchReport(lines=[("a", 5), ("b", 3)])
        second = StitchReport(lines=[("a", 10)])
        assert compare_stitch_counts(first, second) == -2
