"""Tests for domain models to verify they work correctly."""

import pytest

from leatherpattern.domain import (
    FOLD_SEGMENT,
    SHAPE_KINDS,
    ArcEntry,
    Circle,
    CustomPolygon,
    EdgeRange,
    EdgeStitch,
    Extension,
    HolsterTransform,
    LinkedCircle,
    Node,
    PatternDocument,
    Pill,
    Point,
    Rectangle,
    SampledPoint,
    StitchLine,
    Transform,
    shape_from_dict,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(12.5, -3.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_sampled_point_default_segment(self) -> None:
        """Sampled points default to the fold segment."""
        p = SampledPoint(1.0, 2.0)
        assert p.seg_idx == FOLD_SEGMENT
        assert p.to_dict() == {"x": 1.0, "y": 2.0, "seg_idx": -1}

    def test_arc_entry_point(self) -> None:
        """Arc entries expose their position."""
        assert ArcEntry(3.0, 4.0, 5.0).point == Point(3.0, 4.0)


class TestNode:
    """Tests for Node class."""

    def test_controls_are_relative(self) -> None:
        """Handles are offsets from the anchor."""
        node = Node(10, 20, h1=Point(-5, 0), h2=Point(5, 1))
        assert node.anchor == Point(10, 20)
        assert node.in_control == Point(5, 20)
        assert node.out_control == Point(15, 21)

    def test_moved_to_keeps_handles(self) -> None:
        """Moving a node keeps its handle offsets."""
        node = Node(0, 0, h2=Point(3, 3)).moved_to(10, 10)
        assert node.anchor == Point(10, 10)
        assert node.out_control == Point(13, 13)

    def test_from_dict_missing_handles(self) -> None:
        """Missing handles deserialize as zero offsets."""
        node = Node.from_dict({"x": 1, "y": 2})
        assert node.h1 == Point(0.0, 0.0)
        assert node.h2 == Point(0.0, 0.0)

    def test_round_trip(self) -> None:
        """Test node serialization and deserialization."""
        node = Node(1.0, 2.0, h1=Point(-1.0, 0.0), h2=Point(1.0, 0.5))
        assert Node.from_dict(node.to_dict()) == node


class TestTransform:
    """Tests for Transform and HolsterTransform."""

    def test_identity_defaults(self) -> None:
        """Missing fields take identity values."""
        t = Transform.from_dict({})
        assert t == Transform(0.0, 0.0, 0.0, 1.0, 1.0)
        assert t.origin == Point(0.0, 0.0)

    def test_holster_lock_serialized(self) -> None:
        """The edit lock survives serialization."""
        holster = HolsterTransform(x=100, y=50, rotation=0.5, locked=True)
        data = holster.to_dict()
        assert data["locked"] is True
        assert HolsterTransform.from_dict(data) == holster


class TestStitching:
    """Tests for EdgeRange and EdgeStitch."""

    def test_range_span(self) -> None:
        """Span is the covered fraction."""
        assert EdgeRange(0.25, 0.75).span == pytest.approx(0.5)

    def test_range_defaults_cover_path(self) -> None:
        """A default range covers the whole path."""
        r = EdgeRange.from_dict({})
        assert (r.start, r.end) == (0.0, 1.0)

    def test_edge_stitch_defaults(self) -> None:
        """Unset distances stay None so config defaults apply."""
        stitch = EdgeStitch.from_dict({"range_idx": 2})
        assert stitch.range_idx == 2
        assert stitch.margin is None
        assert stitch.spacing is None
        assert stitch.mirror is True
        assert stitch.show_holes is True

    def test_edge_stitch_requires_range(self) -> None:
        """A stitch line without a range index is malformed."""
        with pytest.raises(KeyError):
            EdgeStitch.from_dict({})

    def test_stitch_line_defaults(self) -> None:
        """Drawn stitch lines are symmetric and unlocked unless stated."""
        line = StitchLine.from_dict({"nodes": [{"x": 1, "y": 2}, {"x": 3, "y": 4}]})
        assert line.nodes == [Node(1, 2), Node(3, 4)]
        assert line.symmetric is True
        assert line.locked is False
        assert line.margin == 0.0
        assert line.spacing is None


class TestShapes:
    """Tests for the tagged shape variants."""

    def test_kinds_registered(self) -> None:
        """Every variant is registered under its kind."""
        assert set(SHAPE_KINDS) == {
            "circle",
            "ellipse",
            "pill",
            "rectangle",
            "custom",
            "extension",
            "linked_circle",
        }

    @pytest.mark.parametrize(
        "shape",
        [
            Circle(width=10, stitch_border=True, border_margin=2.0),
            Pill(width=20, height=6, symmetric=True),
            Rectangle(width=8, height=4, transform=Transform(x=5, rotation=0.3)),
            CustomPolygon(nodes=[Node(0, 0), Node(5, 0), Node(0, 5)], stitch_border=True),
            Extension(nodes=[Node(0, 0), Node(5, 0), Node(0, 5)], name="tab"),
            LinkedCircle(source_range=1, merged=True, spacing=3.0),
        ],
    )
    def test_shape_round_trip(self, shape) -> None:
        """Each variant deserializes to an equal shape."""
        data = shape.to_dict()
        assert data["kind"] == shape.kind
        assert shape_from_dict(data) == shape

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError, match="Unknown shape kind"):
            shape_from_dict({"kind": "hexagon"})

    def test_circle_height_defaults_to_width(self) -> None:
        """A circle stored with only a width stays round."""
        shape = shape_from_dict({"kind": "circle", "width": 12})
        assert isinstance(shape, Circle)
        assert shape.height == 12


class TestPatternDocument:
    """Tests for PatternDocument."""

    def test_empty_document(self) -> None:
        """An empty dictionary is a valid empty pattern."""
        doc = PatternDocument.from_dict({})
        assert doc.nodes == []
        assert doc.asymmetric is False
        assert doc.shapes == []

    def test_extensions_filtered(self) -> None:
        """Only extension shapes are returned by extensions()."""
        ext = Extension(nodes=[Node(0, 0), Node(1, 0), Node(0, 1)])
        doc = PatternDocument(shapes=[Circle(width=4), ext, LinkedCircle()])
        assert doc.extensions() == [ext]

    def test_round_trip(self, rect_document: PatternDocument) -> None:
        """Test document serialization and deserialization."""
        rect_document.shapes.append(Circle(width=6, symmetric=True))
        rect_document.merged_edge_ranges.append(EdgeRange(0.1, 0.4))
        rect_document.stitch_lines.append(
            StitchLine(nodes=[Node(5, 0), Node(25, 10)], symmetric=False, margin=2.0, locked=True)
        )
        restored = PatternDocument.from_dict(rect_document.to_dict())
        assert restored == rect_document
