"""Edge ranges and stitch line definitions.

An edge range selects part of a path by fraction of its total length. Stitch
lines reference a range by index, so deleting a range leaves dangling
references that dependent computations must skip. Free-drawn stitch lines
carry their own nodes instead of referencing a range.
"""

from dataclasses import dataclass, field
from typing import Any

from leatherpattern.domain.geometry import Node


@dataclass(frozen=True, slots=True)
class EdgeRange:
    """A fractional sub-interval of a parameterized path.

    Attributes:
        start: Start fraction in [0, 1]
        end: End fraction in [0, 1], greater than start
    """

    start: float = 0.0
    end: float = 1.0

    @property
    def span(self) -> float:
        """Fraction of the path covered by the range."""
        return self.end - self.start

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EdgeRange":
        """Deserialize from dictionary."""
        return cls(start=float(data.get("start", 0.0)), end=float(data.get("end", 1.0)))


@dataclass(frozen=True, slots=True)
class EdgeStitch:
    """A stitch line placed along an edge range.

    Unset distances fall back to the configured stitch defaults.

    Attributes:
        range_idx: Index of the edge range the stitches follow
        margin: Inset of the stitch line from the outline (mm)
        spacing: Distance between stitch holes (mm)
        hole_size: Stitch hole diameter (mm)
        mirror: Reflect holes across the fold line (symmetric outlines only)
        show_holes: Whether holes are placed at all
    """

    range_idx: int
    margin: float | None = None
    spacing: float | None = None
    hole_size: float | None = None
    mirror: bool = True
    show_holes: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "range_idx": self.range_idx,
            "margin": self.margin,
            "spacing": self.spacing,
            "hole_size": self.hole_size,
            "mirror": self.mirror,
            "show_holes": self.show_holes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EdgeStitch":
        """Deserialize from dictionary."""
        return cls(
            range_idx=int(data["range_idx"]),
            margin=data.get("margin"),
            spacing=data.get("spacing"),
            hole_size=data.get("hole_size"),
            mirror=bool(data.get("mirror", True)),
            show_holes=bool(data.get("show_holes", True)),
        )


@dataclass
class StitchLine:
    """A free-drawn stitch line through its own bezier nodes.

    Symmetric lines are drawn in holster-local space on the right of the
    fold and repeated mirrored on the left. Asymmetric lines are drawn in
    world space.

    Attributes:
        nodes: Ordered nodes of the open line
        symmetric: Whether the line is mirrored across the fold line
        spacing: Distance between stitch holes (mm), None for default
        hole_size: Stitch hole diameter (mm), None for default
        margin: Offset of the holes from the drawn line (mm), away from
            the holster origin for positive values
        locked: Whether the line's nodes are locked against editing
        name: Optional display name
    """

    nodes: list[Node] = field(default_factory=list)
    symmetric: bool = True
    spacing: float | None = None
    hole_size: float | None = None
    margin: float = 0.0
    locked: bool = False
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "symmetric": self.symmetric,
            "spacing": self.spacing,
            "hole_size": self.hole_size,
            "margin": self.margin,
            "locked": self.locked,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StitchLine":
        """Deserialize from dictionary."""
        return cls(
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            symmetric=bool(data.get("symmetric", True)),
            spacing=data.get("spacing"),
            hole_size=data.get("hole_size"),
            margin=float(data.get("margin", 0.0)),
            locked=bool(data.get("locked", False)),
            name=data.get("name"),
        )
