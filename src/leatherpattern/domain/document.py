"""The editable pattern document.

A PatternDocument holds every user-edited entity: the outline nodes, the
holster transform, edge ranges, stitch lines and shapes. All other geometry
is derived from it on demand.
"""

from dataclasses import dataclass, field
from typing import Any

from leatherpattern.domain.geometry import HolsterTransform, Node
from leatherpattern.domain.shapes import Extension, Shape, shape_from_dict
from leatherpattern.domain.stitching import EdgeRange, EdgeStitch, StitchLine


@dataclass
class PatternDocument:
    """A leather pattern under edit.

    In symmetric mode (``asymmetric`` False) the nodes describe the right
    half of the outline in holster-local space and the left half is its
    mirror image. In asymmetric mode the nodes describe the whole closed
    perimeter.

    Attributes:
        nodes: Ordered outline nodes in holster-local space
        holster: Transform from holster-local space to world space
        asymmetric: Whether nodes define the full perimeter
        edge_ranges: Ranges over the open right-half outline
        merged_edge_ranges: Ranges over the closed merged perimeter
        edge_stitches: Stitch lines on ``edge_ranges``
        merged_edge_stitches: Stitch lines on ``merged_edge_ranges``
        stitch_lines: Free-drawn stitch lines
        shapes: Holes, cutouts, extensions and linked circles
        name: Display name of the pattern
    """

    nodes: list[Node] = field(default_factory=list)
    holster: HolsterTransform = field(default_factory=HolsterTransform)
    asymmetric: bool = False
    edge_ranges: list[EdgeRange] = field(default_factory=list)
    merged_edge_ranges: list[EdgeRange] = field(default_factory=list)
    edge_stitches: list[EdgeStitch] = field(default_factory=list)
    merged_edge_stitches: list[EdgeStitch] = field(default_factory=list)
    stitch_lines: list[StitchLine] = field(default_factory=list)
    shapes: list[Shape] = field(default_factory=list)
    name: str = ""

    def extensions(self) -> list[Extension]:
        """Return the shapes that are unioned into the outline."""
        return [s for s in self.shapes if isinstance(s, Extension)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "asymmetric": self.asymmetric,
            "holster": self.holster.to_dict(),
            "nodes": [n.to_dict() for n in self.nodes],
            "edge_ranges": [r.to_dict() for r in self.edge_ranges],
            "merged_edge_ranges": [r.to_dict() for r in self.merged_edge_ranges],
            "edge_stitches": [s.to_dict() for s in self.edge_stitches],
            "merged_edge_stitches": [s.to_dict() for s in self.merged_edge_stitches],
            "stitch_lines": [s.to_dict() for s in self.stitch_lines],
            "shapes": [s.to_dict() for s in self.shapes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PatternDocument":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a document

        Returns:
            PatternDocument instance
        """
        return cls(
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            holster=HolsterTransform.from_dict(data.get("holster", {})),
            asymmetric=bool(data.get("asymmetric", False)),
            edge_ranges=[EdgeRange.from_dict(r) for r in data.get("edge_ranges", [])],
            merged_edge_ranges=[
                EdgeRange.from_dict(r) for r in data.get("merged_edge_ranges", [])
            ],
            edge_stitches=[EdgeStitch.from_dict(s) for s in data.get("edge_stitches", [])],
            merged_edge_stitches=[
                EdgeStitch.from_dict(s) for s in data.get("merged_edge_stitches", [])
            ],
            stitch_lines=[StitchLine.from_dict(s) for s in data.get("stitch_lines", [])],
            shapes=[shape_from_dict(s) for s in data.get("shapes", [])],
            name=str(data.get("name", "")),
        )
