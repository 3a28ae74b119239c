"""Tagged shape variants placed on a pattern.

Every shape carries a transform and a ``symmetric`` flag. Symmetric shapes
are positioned in holster-local space and appear on both sides of the fold;
asymmetric shapes are positioned directly in world space. The concrete class
is the discriminant: holes, custom cutouts, extensions and linked circles
each carry only the fields they need.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from leatherpattern.domain.geometry import Node, Transform


@dataclass(kw_only=True)
class Shape:
    """Base class for all shapes.

    Attributes:
        transform: Placement of the shape's local origin
        symmetric: Whether the shape is mirrored across the fold line
        name: Optional display name
    """

    kind: ClassVar[str] = "shape"

    transform: Transform = field(default_factory=Transform)
    symmetric: bool = False
    name: str | None = None

    def _fields_to_dict(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary tagged with the shape kind."""
        data: dict[str, Any] = {
            "kind": self.kind,
            "transform": self.transform.to_dict(),
            "symmetric": self.symmetric,
            "name": self.name,
        }
        data.update(self._fields_to_dict())
        return data


@dataclass(kw_only=True)
class Hole(Shape):
    """A cutout hole, optionally surrounded by a stitch border.

    Attributes:
        width: Extent along the local X axis (mm)
        height: Extent along the local Y axis (mm)
        stitch_border: Whether stitches run around the hole
        border_margin: Inset of the border stitch line (mm), None for default
        border_spacing: Border stitch spacing (mm), None for default
    """

    width: float = 4.0
    height: float = 4.0
    stitch_border: bool = False
    border_margin: float | None = None
    border_spacing: float | None = None

    def _fields_to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "stitch_border": self.stitch_border,
            "border_margin": self.border_margin,
            "border_spacing": self.border_spacing,
        }


@dataclass(kw_only=True)
class Circle(Hole):
    """Round hole. Uses ``width`` as the diameter."""

    kind: ClassVar[str] = "circle"


@dataclass(kw_only=True)
class Ellipse(Hole):
    """Elliptical hole."""

    kind: ClassVar[str] = "ellipse"


@dataclass(kw_only=True)
class Pill(Hole):
    """Slot with semicircular ends along its longer axis."""

    kind: ClassVar[str] = "pill"


@dataclass(kw_only=True)
class Rectangle(Hole):
    """Rectangular hole."""

    kind: ClassVar[str] = "rectangle"


@dataclass(kw_only=True)
class CustomPolygon(Shape):
    """Closed bezier cutout defined by its own nodes.

    Attributes:
        nodes: Closed node loop in the shape's local space
        stitch_border: Whether stitches run around the cutout
        border_margin: Inset of the border stitch line (mm), None for default
        border_spacing: Border stitch spacing (mm), None for default
    """

    kind: ClassVar[str] = "custom"

    nodes: list[Node] = field(default_factory=list)
    stitch_border: bool = False
    border_margin: float | None = None
    border_spacing: float | None = None

    def _fields_to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "stitch_border": self.stitch_border,
            "border_margin": self.border_margin,
            "border_spacing": self.border_spacing,
        }


@dataclass(kw_only=True)
class Extension(Shape):
    """Closed bezier shape unioned into the base outline.

    Attributes:
        nodes: Closed node loop in the shape's local space
    """

    kind: ClassVar[str] = "extension"

    nodes: list[Node] = field(default_factory=list)

    def _fields_to_dict(self) -> dict[str, Any]:
        return {"nodes": [n.to_dict() for n in self.nodes]}


@dataclass(kw_only=True)
class LinkedCircle(Shape):
    """Circle whose circumference matches the length of an edge range.

    Attributes:
        source_range: Index of the edge range to match
        merged: True when the index refers to the merged-perimeter ranges
        spacing: Stitch spacing (mm), None to use the configured default
    """

    kind: ClassVar[str] = "linked_circle"

    source_range: int = 0
    merged: bool = False
    spacing: float | None = None

    def _fields_to_dict(self) -> dict[str, Any]:
        return {
            "source_range": self.source_range,
            "merged": self.merged,
            "spacing": self.spacing,
        }


SHAPE_KINDS: dict[str, type[Shape]] = {
    cls.kind: cls
    for cls in (Circle, Ellipse, Pill, Rectangle, CustomPolygon, Extension, LinkedCircle)
}


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Deserialize a shape from its tagged dictionary form.

    Args:
        data: Dictionary with a ``kind`` discriminant

    Returns:
        Instance of the shape class registered for the kind

    Raises:
        ValueError: If the kind is missing or unknown
    """
    kind = data.get("kind")
    cls = SHAPE_KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise ValueError(f"Unknown shape kind: {kind!r}")

    common: dict[str, Any] = {
        "transform": Transform.from_dict(data.get("transform", {})),
        "symmetric": bool(data.get("symmetric", False)),
        "name": data.get("name"),
    }

    if issubclass(cls, Hole):
        return cls(
            **common,
            width=float(data.get("width", 4.0)),
            height=float(data.get("height", data.get("width", 4.0))),
            stitch_border=bool(data.get("stitch_border", False)),
            border_margin=data.get("border_margin"),
            border_spacing=data.get("border_spacing"),
        )
    if cls is CustomPolygon:
        return CustomPolygon(
            **common,
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            stitch_border=bool(data.get("stitch_border", False)),
            border_margin=data.get("border_margin"),
            border_spacing=data.get("border_spacing"),
        )
    if cls is Extension:
        return Extension(**common, nodes=[Node.from_dict(n) for n in data.get("nodes", [])])
    return LinkedCircle(
        **common,
        source_range=int(data.get("source_range", 0)),
        merged=bool(data.get("merged", False)),
        spacing=data.get("spacing"),
    )
