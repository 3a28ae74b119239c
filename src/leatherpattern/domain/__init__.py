"""Domain models for leatherpattern.

This module contains the domain models representing the editable pattern:
nodes, transforms, edge ranges, stitch lines and shapes. Models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for JSON documents
- Independent of the clipping library used by the engine

Key classes:
- Point / SampledPoint: 2D points, optionally tagged with a segment index
- ArcEntry: Entry of a cumulative-distance table
- Node: Outline anchor with bezier handles
- Transform / HolsterTransform: Local-to-world mappings
- EdgeRange / EdgeStitch: Stitch scoping and stitch line settings
- StitchLine: Free-drawn stitch line with its own nodes
- Shape variants: Circle, Ellipse, Pill, Rectangle, CustomPolygon,
  Extension, LinkedCircle
- PatternDocument: The complete editable pattern
"""

from leatherpattern.domain.document import PatternDocument
from leatherpattern.domain.geometry import (
    FOLD_SEGMENT,
    ArcEntry,
    HolsterTransform,
    Node,
    Point,
    SampledPoint,
    Transform,
)
from leatherpattern.domain.shapes import (
    SHAPE_KINDS,
    Circle,
    CustomPolygon,
    Ellipse,
    Extension,
    Hole,
    LinkedCircle,
    Pill,
    Rectangle,
    Shape,
    shape_from_dict,
)
from leatherpattern.domain.stitching import EdgeRange, EdgeStitch, StitchLine

__all__: list[str] = [
    "FOLD_SEGMENT",
    "SHAPE_KINDS",
    # Core types
    "ArcEntry",
    "HolsterTransform",
    "Node",
    "Point",
    "SampledPoint",
    "Transform",
    # Stitching
    "EdgeRange",
    "EdgeStitch",
    "StitchLine",
    # Shapes
    "Circle",
    "CustomPolygon",
    "Ellipse",
    "Extension",
    "Hole",
    "LinkedCircle",
    "Pill",
    "Rectangle",
    "Shape",
    "shape_from_dict",
    # Document
    "PatternDocument",
]
