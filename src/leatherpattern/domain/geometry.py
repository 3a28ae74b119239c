"""Core geometric types for pattern representation.

This module defines the fundamental geometric types used throughout the engine:
- Point: A 2D point in millimeters
- SampledPoint: A point produced by bezier sampling, tagged with its segment
- ArcEntry: One entry of a cumulative-distance (arc) table
- Node: An editable outline anchor with two bezier handles
- Transform: Position, rotation and scale mapping local space to world space
- HolsterTransform: The pattern's own transform, with an edit lock
"""

from dataclasses import dataclass, field
from typing import Any

FOLD_SEGMENT = -1
"""Segment index given to points that do not belong to an editable segment."""


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in millimeters
        y: Y coordinate in millimeters
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class SampledPoint(Point):
    """A point produced by outline sampling.

    Attributes:
        seg_idx: Index of the bezier segment the point was sampled from, or
            FOLD_SEGMENT for synthetic fold-line points and boolean results
    """

    seg_idx: int = FOLD_SEGMENT

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, including the segment index."""
        return {"x": self.x, "y": self.y, "seg_idx": self.seg_idx}


@dataclass(frozen=True, slots=True)
class ArcEntry:
    """A sampled path position with its cumulative distance from the start.

    Attributes:
        x: X coordinate in millimeters
        y: Y coordinate in millimeters
        d: Distance along the path from the first entry
    """

    x: float
    y: float
    d: float

    @property
    def point(self) -> Point:
        """Position of this entry as a Point."""
        return Point(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Node:
    """An editable outline anchor.

    Handles are offsets relative to the anchor. ``h1`` shapes the curve
    arriving at the node and ``h2`` the curve leaving it.

    Attributes:
        x: Anchor X coordinate
        y: Anchor Y coordinate
        h1: Incoming control handle offset
        h2: Outgoing control handle offset
    """

    x: float
    y: float
    h1: Point = field(default=Point(0.0, 0.0))
    h2: Point = field(default=Point(0.0, 0.0))

    @property
    def anchor(self) -> Point:
        """Anchor position as a Point."""
        return Point(self.x, self.y)

    @property
    def in_control(self) -> Point:
        """Absolute position of the incoming control point."""
        return Point(self.x + self.h1.x, self.y + self.h1.y)

    @property
    def out_control(self) -> Point:
        """Absolute position of the outgoing control point."""
        return Point(self.x + self.h2.x, self.y + self.h2.y)

    def moved_to(self, x: float, y: float) -> "Node":
        """Return a copy with the anchor moved, handles kept relative."""
        return Node(x=x, y=y, h1=self.h1, h2=self.h2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "h1": self.h1.to_dict(),
            "h2": self.h2.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        """Deserialize from dictionary. Missing handles default to zero."""
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            h1=Point.from_dict(data["h1"]) if data.get("h1") else Point(0.0, 0.0),
            h2=Point.from_dict(data["h2"]) if data.get("h2") else Point(0.0, 0.0),
        )


@dataclass(frozen=True, slots=True)
class Transform:
    """Scale, rotate, then translate mapping from local to world space.

    Attributes:
        x: World X of the local origin
        y: World Y of the local origin
        rotation: Rotation in radians
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor
    """

    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def origin(self) -> Point:
        """World position of the local origin."""
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transform":
        """Deserialize from dictionary. Missing fields take identity values."""
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            rotation=float(data.get("rotation", 0.0)),
            scale_x=float(data.get("scale_x", 1.0)),
            scale_y=float(data.get("scale_y", 1.0)),
        )


@dataclass(frozen=True, slots=True)
class HolsterTransform(Transform):
    """Transform of the pattern itself.

    The fold line is the local Y axis (x = 0), which this transform places
    at world X = ``x`` when unrotated.

    Attributes:
        locked: Whether the outline is locked against editing
    """

    locked: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
            "locked": self.locked,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HolsterTransform":
        """Deserialize from dictionary."""
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            rotation=float(data.get("rotation", 0.0)),
            scale_x=float(data.get("scale_x", 1.0)),
            scale_y=float(data.get("scale_y", 1.0)),
            locked=bool(data.get("locked", False)),
        )
