"""Core geometry algorithms for leatherpattern.

This module contains the algorithms for:

- Outline sampling (bezier flattening, fold stubs)
- Mirroring and local/world transforms
- Extension merging and closed-path offsetting (pyclipper)
- Open-path offsetting for the right half
- Arc-length tables and stitch placement
- Linked circles derived from edge range lengths

Functions are stateless; PatternEngine ties them together for a document
under edit and memoizes derived paths.

Key functions:
- sample_outline: Sample an outline from bezier nodes
- sample_polyline: Sample an open drawn line from bezier nodes
- world_outline: Closed world outline, mirrored when symmetric
- union_outline: Union an outline with extension outlines
- offset_open_path / offset_closed_path: Inset stitch paths
- build_arc / build_arc_closed: Cumulative-distance tables
- place_stitches: Stitch hole positions along a range
- linked_circle: Circle matching an edge range length

Key classes:
- PatternEngine: Computes and caches geometry for a document
- ClipperBackend: Polygon boolean backend on pyclipper
- PathCache: Version-keyed path memoization
"""

from leatherpattern.core.arc import (
    arc_length,
    build_arc,
    build_arc_closed,
    point_at_distance,
    point_at_fraction,
    project_to_fraction,
)
from leatherpattern.core.cache import PathCache
from leatherpattern.core.clipper import BooleanBackend, ClipperBackend
from leatherpattern.core.engine import PatternEngine
from leatherpattern.core.geometry import (
    bounding_box,
    ensure_orientation,
    path_length,
    point_in_polygon,
    polygon_area,
    signed_area,
)
from leatherpattern.core.linked import LinkedCircleGeometry, linked_circle
from leatherpattern.core.merger import merge_extensions, union_outline
from leatherpattern.core.offset import offset_closed_path, offset_open_path
from leatherpattern.core.outline import sample_outline, sample_polyline
from leatherpattern.core.stitches import (
    StitchPlacement,
    StitchReport,
    compare_stitch_counts,
    count_stitches,
    drag_range,
    place_stitches,
)
from leatherpattern.core.transform import edge_path, mirror_path, world_outline

__all__ = [
    # Engine
    "PatternEngine",
    # Backends and caching
    "BooleanBackend",
    "ClipperBackend",
    "PathCache",
    # Results
    "LinkedCircleGeometry",
    "StitchPlacement",
    "StitchReport",
    # Geometry functions
    "arc_length",
    "bounding_box",
    "build_arc",
    "build_arc_closed",
    "compare_stitch_counts",
    "count_stitches",
    "drag_range",
    "edge_path",
    "ensure_orientation",
    "linked_circle",
    "merge_extensions",
    "mirror_path",
    "offset_closed_path",
    "offset_open_path",
    "path_length",
    "place_stitches",
    "point_at_distance",
    "point_at_fraction",
    "point_in_polygon",
    "polygon_area",
    "project_to_fraction",
    "sample_outline",
    "sample_polyline",
    "signed_area",
    "union_outline",
    "world_outline",
]
