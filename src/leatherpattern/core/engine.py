"""Pattern engine orchestrating the geometry pipeline.

The PatternEngine owns a PatternDocument and derives every output from it:
outlines, merged outline, stitch paths, stitch placements and linked
circles. Derived paths are memoized per geometry version; every edit to
nodes, the holster transform or shapes bumps the version.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from leatherpattern.config import PatternSettings
from leatherpattern.core.arc import build_arc, build_arc_closed
from leatherpattern.core.cache import PathCache
from leatherpattern.core.clipper import BooleanBackend, ClipperBackend
from leatherpattern.core.linked import LinkedCircleGeometry, linked_circle
from leatherpattern.core.merger import merge_extensions
from leatherpattern.core.offset import offset_closed_path, offset_open_path
from leatherpattern.core.outline import sample_polyline
from leatherpattern.core.shapes import (
    is_bordered,
    shape_center,
    shape_sides,
    shape_world_outline,
)
from leatherpattern.core.snap import constrain_node, insert_node, snap_point
from leatherpattern.core.stitches import (
    StitchPlacement,
    StitchReport,
    drag_range,
    place_stitches,
    range_handles,
)
from leatherpattern.core.transform import (
    edge_path,
    local_outline,
    map_path,
    reflect_across_fold,
    world_outline,
    world_to_local,
)
from leatherpattern.domain import (
    ArcEntry,
    CustomPolygon,
    EdgeRange,
    EdgeStitch,
    Hole,
    HolsterTransform,
    LinkedCircle,
    Node,
    PatternDocument,
    Point,
    SampledPoint,
    Shape,
    StitchLine,
)
from leatherpattern.utils import EngineLogger, EngineStats

P = TypeVar("P", bound=Point)


class PatternEngine:
    """Computes pattern geometry for a document under edit.

    Example:
        engine = PatternEngine(document)
        outline = engine.merged_outline()
        report = engine.stitch_report()
    """

    def __init__(
        self,
        document: PatternDocument | None = None,
        settings: PatternSettings | None = None,
        backend: BooleanBackend | None = None,
        logger: EngineLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            document: Pattern to edit (an empty pattern if None)
            settings: Engine settings (defaults if None)
            backend: Boolean backend (pyclipper at the configured scale if None)
            logger: Engine logger (a default structlog logger if None)
        """
        self.document = document if document is not None else PatternDocument()
        self.settings = settings if settings is not None else PatternSettings()
        geometry = self.settings.geometry
        self.backend = backend or ClipperBackend(
            scale=geometry.clipper_scale, arc_tolerance=geometry.arc_tolerance
        )
        self.logger = logger or EngineLogger()
        self.cache = PathCache()
        self._version = 0

    # Versioning

    @property
    def version(self) -> int:
        """Geometry version, bumped by every geometry edit."""
        return self._version

    def touch(self) -> None:
        """Mark geometry as changed, invalidating cached paths."""
        self._version += 1

    @property
    def stats(self) -> EngineStats:
        """Engine statistics, cache counters included."""
        self.logger.record_cache(self.cache.hits, self.cache.misses)
        return self.logger.stats

    # Outlines

    def _steps(self) -> int:
        return self.settings.geometry.samples_per_segment

    def _cached(self, key: str, compute: Callable[[], list[P]]) -> list[P]:
        # Cached lists are shared; callers get their own copy.
        return list(self.cache.get(key, self._version, compute))

    def local_outline(self) -> list[SampledPoint]:
        """Sampled outline in holster-local space (half or full perimeter)."""
        doc = self.document
        return self._cached(
            "local",
            lambda: local_outline(
                doc.nodes, doc.asymmetric, self._steps(), self.settings.geometry.fold_stub_spacing
            ),
        )

    def base_outline(self) -> list[Point]:
        """Closed world outline before extensions are merged."""

        def compute() -> list[Point]:
            doc = self.document
            outline = world_outline(
                doc.nodes,
                doc.holster,
                doc.asymmetric,
                self._steps(),
                self.settings.geometry.fold_stub_spacing,
            )
            self.logger.log_outline_built(len(outline), doc.asymmetric)
            return outline

        return self._cached("base", compute)

    def right_half_world(self) -> list[Point]:
        """World path that mirrorable edge ranges are measured along."""
        doc = self.document
        return self._cached(
            "edge",
            lambda: edge_path(
                doc.nodes,
                doc.holster,
                doc.asymmetric,
                self._steps(),
                self.settings.geometry.fold_stub_spacing,
            ),
        )

    def merged_outline(self) -> list[Point]:
        """Base outline with all extensions unioned in."""

        def compute() -> list[Point]:
            extensions = self.document.extensions()
            merged = merge_extensions(
                self.base_outline(),
                extensions,
                self.document.holster,
                self.backend,
                self._steps(),
            )
            if extensions:
                self.logger.log_merge(len(extensions), len(merged))
            return merged

        return self._cached("merged", compute)

    # Stitch paths

    def _margin(self, margin: float | None) -> float:
        return self.settings.stitch.margin if margin is None else margin

    def edge_stitch_path(self, margin: float | None = None) -> list[Point]:
        """Edge path offset inward by the stitch margin."""
        margin = self._margin(margin)
        return self._cached(
            f"edge_stitch:{margin}",
            lambda: offset_open_path(self.right_half_world(), -margin, self.document.holster.origin),
        )

    def merged_stitch_path(self, margin: float | None = None) -> list[Point]:
        """Merged outline offset inward by the stitch margin."""
        margin = self._margin(margin)
        return self._cached(
            f"merged_stitch:{margin}",
            lambda: offset_closed_path(self.merged_outline(), -margin, self.backend),
        )

    def edge_stitch_table(self, margin: float | None = None) -> list[ArcEntry]:
        """Arc table of the edge stitch path."""
        return build_arc(self.edge_stitch_path(margin))

    def merged_stitch_table(self, margin: float | None = None) -> list[ArcEntry]:
        """Arc table of the merged stitch path (closed)."""
        return build_arc_closed(self.merged_stitch_path(margin))

    # Stitch placement

    def _range(self, ranges: Sequence[EdgeRange], idx: int, kind: str) -> EdgeRange | None:
        if 0 <= idx < len(ranges):
            return ranges[idx]
        self.logger.log_missing_reference(kind, idx, len(ranges))
        return None

    def _placement(
        self,
        stitch: EdgeStitch,
        label: str,
        edge_range: EdgeRange,
        table: list[ArcEntry],
        mirror: bool,
    ) -> StitchPlacement:
        spacing = stitch.spacing or self.settings.stitch.spacing
        placement = StitchPlacement(
            label=label,
            hole_size=stitch.hole_size or self.settings.stitch.hole_size,
            spacing=spacing,
        )
        if stitch.show_holes:
            placement.points = place_stitches(table, edge_range, spacing)
            if mirror:
                placement.mirrored_points = reflect_across_fold(
                    placement.points, self.document.holster.x
                )
        self.logger.log_stitches(label, placement.count)
        return placement

    def edge_stitch_placements(self) -> list[StitchPlacement]:
        """Stitch holes of every edge stitch line.

        Lines whose range is missing or whose offset path has fewer than 3
        points are skipped.
        """
        doc = self.document
        placements: list[StitchPlacement] = []
        for i, stitch in enumerate(doc.edge_stitches):
            edge_range = self._range(doc.edge_ranges, stitch.range_idx, "edge_range")
            if edge_range is None:
                continue
            path = self.edge_stitch_path(stitch.margin)
            if len(path) < 3:
                self.logger.log_collapsed(f"edge:{i}", self._margin(stitch.margin))
                continue
            mirror = (
                stitch.mirror
                and self.settings.stitch.mirror_edge_stitches
                and not doc.asymmetric
            )
            placements.append(
                self._placement(stitch, f"edge {i + 1}", edge_range, build_arc(path), mirror)
            )
        return placements

    def merged_stitch_placements(self) -> list[StitchPlacement]:
        """Stitch holes of every merged-perimeter stitch line."""
        doc = self.document
        placements: list[StitchPlacement] = []
        for i, stitch in enumerate(doc.merged_edge_stitches):
            edge_range = self._range(doc.merged_edge_ranges, stitch.range_idx, "merged_edge_range")
            if edge_range is None:
                continue
            path = self.merged_stitch_path(stitch.margin)
            if len(path) < 3:
                self.logger.log_collapsed(f"merged:{i}", self._margin(stitch.margin))
                continue
            placements.append(
                self._placement(
                    stitch, f"merged {i + 1}", edge_range, build_arc_closed(path), mirror=False
                )
            )
        return placements

    # Shapes

    def hole_outlines(self) -> list[tuple[int, int, list[Point]]]:
        """World outlines of holes and cutouts as (shape index, side, outline)."""
        segments = self.settings.geometry.hole_segments
        outlines: list[tuple[int, int, list[Point]]] = []
        for idx, shape in enumerate(self.document.shapes):
            if not isinstance(shape, Hole | CustomPolygon):
                continue
            for side in shape_sides(shape):
                outline = shape_world_outline(
                    shape, self.document.holster, side, segments, self._steps()
                )
                if len(outline) >= 3:
                    outlines.append((idx, side, outline))
        return outlines

    def hole_border_placements(self) -> list[StitchPlacement]:
        """Stitch holes around every bordered hole or cutout."""
        stitch_cfg = self.settings.stitch
        placements: list[StitchPlacement] = []
        for idx, side, outline in self.hole_outlines():
            shape = self.document.shapes[idx]
            if not is_bordered(shape):
                continue
            margin = shape.border_margin or stitch_cfg.hole_border_margin
            spacing = shape.border_spacing or stitch_cfg.hole_border_spacing
            label = f"hole {idx + 1}" + (" (mirror)" if side == -1 else "")
            path = offset_closed_path(outline, -margin, self.backend)
            if len(path) < 3:
                self.logger.log_collapsed(label, margin)
                continue
            points = place_stitches(build_arc_closed(path), EdgeRange(0.0, 1.0), spacing)
            placement = StitchPlacement(
                label=label, points=points, hole_size=stitch_cfg.hole_size, spacing=spacing
            )
            self.logger.log_stitches(label, placement.count)
            placements.append(placement)
        return placements

    # Free-drawn stitch lines

    def _stitch_line(self, idx: int) -> StitchLine | None:
        lines = self.document.stitch_lines
        if 0 <= idx < len(lines):
            return lines[idx]
        self.logger.log_missing_reference("stitch_line", idx, len(lines))
        return None

    def stitch_line_path(self, idx: int, side: int = 1) -> list[Point]:
        """World path of a free-drawn stitch line, offset by its margin.

        Symmetric lines are drawn in holster-local space; side -1 is their
        mirror image across the fold. Asymmetric lines are already in world
        space and have a single side.
        """
        line = self._stitch_line(idx)
        if line is None:
            return []
        samples = sample_polyline(line.nodes, self._steps())
        holster = self.document.holster
        if line.symmetric:
            if side == -1:
                samples = [SampledPoint(-p.x, p.y, p.seg_idx) for p in samples]
            path = map_path(samples, holster)
        elif side == 1:
            path = [Point(p.x, p.y) for p in samples]
        else:
            return []
        if line.margin:
            path = offset_open_path(path, line.margin, holster.origin)
        return path

    def stitch_line_placements(self) -> list[StitchPlacement]:
        """Stitch holes along every free-drawn stitch line.

        Symmetric lines also get holes on their mirror image. Lines with
        fewer than two nodes are skipped.
        """
        placements: list[StitchPlacement] = []
        for i, line in enumerate(self.document.stitch_lines):
            label = line.name or f"line {i + 1}"
            path = self.stitch_line_path(i)
            if len(line.nodes) < 2 or len(path) < 2:
                self.logger.log_collapsed(label, line.margin)
                continue
            spacing = line.spacing or self.settings.stitch.spacing
            whole = EdgeRange(0.0, 1.0)
            placement = StitchPlacement(
                label=label,
                points=place_stitches(build_arc(path), whole, spacing),
                hole_size=line.hole_size or self.settings.stitch.hole_size,
                spacing=spacing,
            )
            if line.symmetric:
                mirrored = self.stitch_line_path(i, side=-1)
                placement.mirrored_points = place_stitches(build_arc(mirrored), whole, spacing)
            self.logger.log_stitches(label, placement.count)
            placements.append(placement)
        return placements

    def _linked_spacing(self, shape: LinkedCircle) -> float:
        """Spacing of the stitch line on the circle's source range.

        Falls back to the circle's own spacing, then the configured default,
        when no stitch line uses the range.
        """
        doc = self.document
        stitches = doc.merged_edge_stitches if shape.merged else doc.edge_stitches
        for stitch in stitches:
            if stitch.range_idx == shape.source_range:
                return stitch.spacing or self.settings.stitch.spacing
        return shape.spacing or self.settings.stitch.spacing

    def linked_circle(self, shape_idx: int, side: int = 1) -> LinkedCircleGeometry | None:
        """Geometry of the linked circle at ``shape_idx``.

        Returns None when the index is not a linked circle or its source
        range cannot be measured.
        """
        shapes = self.document.shapes
        if not 0 <= shape_idx < len(shapes):
            self.logger.log_missing_reference("shape", shape_idx, len(shapes))
            return None
        shape = shapes[shape_idx]
        if not isinstance(shape, LinkedCircle):
            return None

        if shape.merged:
            ranges, reference, closed = self.document.merged_edge_ranges, self.merged_outline(), True
        else:
            ranges, reference, closed = self.document.edge_ranges, self.right_half_world(), False

        if not 0 <= shape.source_range < len(ranges):
            self.logger.log_missing_reference("linked_circle_range", shape.source_range, len(ranges))
            return None

        return linked_circle(
            reference,
            closed,
            ranges,
            shape.source_range,
            shape_center(shape, self.document.holster, side),
            self._linked_spacing(shape),
            rotation=shape.transform.rotation,
            segments=self.settings.geometry.circle_segments,
        )

    def linked_circles(self) -> list[tuple[int, LinkedCircleGeometry]]:
        """All resolvable linked circles as (shape index, geometry)."""
        circles: list[tuple[int, LinkedCircleGeometry]] = []
        for idx, shape in enumerate(self.document.shapes):
            if not isinstance(shape, LinkedCircle):
                continue
            for side in shape_sides(shape):
                geometry = self.linked_circle(idx, side)
                if geometry is not None:
                    circles.append((idx, geometry))
        return circles

    # Reporting

    def all_placements(self) -> list[StitchPlacement]:
        """Every stitch line of the pattern."""
        return [
            *self.edge_stitch_placements(),
            *self.merged_stitch_placements(),
            *self.hole_border_placements(),
            *self.stitch_line_placements(),
        ]

    def stitch_report(self) -> StitchReport:
        """Stitch counts per stitch line."""
        return StitchReport.from_placements(self.all_placements())

    # Range editing

    def _range_context(self, merged: bool) -> tuple[list[EdgeRange], list[Point], list[ArcEntry]]:
        if merged:
            path = self.merged_stitch_path()
            return self.document.merged_edge_ranges, path, build_arc_closed(path)
        path = self.edge_stitch_path()
        return self.document.edge_ranges, path, build_arc(path)

    def range_handles(self, idx: int, merged: bool = False) -> tuple[Point | None, Point | None] | None:
        """Start and end handle positions of a range, None if it is missing."""
        ranges, _, table = self._range_context(merged)
        edge_range = self._range(ranges, idx, "merged_edge_range" if merged else "edge_range")
        if edge_range is None:
            return None
        return range_handles(table, edge_range)

    def drag_range(self, idx: int, handle: str, cursor: Point, merged: bool = False) -> EdgeRange | None:
        """Move a range handle toward the cursor and store the new range."""
        ranges, path, table = self._range_context(merged)
        edge_range = self._range(ranges, idx, "merged_edge_range" if merged else "edge_range")
        if edge_range is None:
            return None
        updated = drag_range(
            edge_range, handle, path, table, cursor, self.settings.geometry.min_range_gap
        )
        ranges[idx] = updated
        return updated

    # Geometry editing

    def set_nodes(self, nodes: Sequence[Node]) -> None:
        """Replace the outline nodes."""
        self.document.nodes = list(nodes)
        self.touch()

    def move_node(self, idx: int, local_point: Point) -> bool:
        """Move a node to a holster-local position, applying snap constraints.

        Returns:
            False when the outline is locked or the index is invalid
        """
        doc = self.document
        if doc.holster.locked or not 0 <= idx < len(doc.nodes):
            return False
        target = constrain_node(local_point, doc.asymmetric, self.settings.snap)
        doc.nodes[idx] = doc.nodes[idx].moved_to(target.x, target.y)
        self.touch()
        return True

    def insert_node(self, world_point: Point, tolerance: float = 30.0) -> int | None:
        """Insert a node on the outline near a world position.

        Returns:
            Index of the new node, or None when the outline is locked or the
            point is not near an editable segment
        """
        doc = self.document
        if doc.holster.locked:
            return None
        local = world_to_local(world_point, doc.holster)
        scale = min(abs(doc.holster.scale_x) or 1.0, abs(doc.holster.scale_y) or 1.0)
        if not doc.asymmetric:
            local = Point(max(0.0, local.x), local.y)
        result = insert_node(doc.nodes, self.local_outline(), local, tolerance / scale)
        if result is None:
            return None
        doc.nodes, inserted = result
        self.touch()
        return inserted

    def set_holster(self, holster: HolsterTransform) -> None:
        """Replace the holster transform."""
        self.document.holster = holster
        self.touch()

    def add_shape(self, shape: Shape) -> int:
        """Add a shape and return its index."""
        self.document.shapes.append(shape)
        self.touch()
        return len(self.document.shapes) - 1

    def remove_shape(self, idx: int) -> Shape | None:
        """Remove and return the shape at ``idx``."""
        if not 0 <= idx < len(self.document.shapes):
            return None
        shape = self.document.shapes.pop(idx)
        self.touch()
        return shape

    def add_stitch_line(self, line: StitchLine) -> int:
        """Add a free-drawn stitch line and return its index."""
        self.document.stitch_lines.append(line)
        return len(self.document.stitch_lines) - 1

    def remove_stitch_line(self, idx: int) -> StitchLine | None:
        """Remove and return the stitch line at ``idx``."""
        if not 0 <= idx < len(self.document.stitch_lines):
            return None
        return self.document.stitch_lines.pop(idx)

    def move_stitch_point(self, line_idx: int, point_idx: int, world_point: Point) -> bool:
        """Move a stitch line node to a world position, applying grid snap.

        Symmetric lines store holster-local nodes kept right of the fold, so
        a point dragged on the mirror side lands on its reflection.

        Returns:
            False when the line is locked or either index is invalid
        """
        line = self._stitch_line(line_idx)
        if line is None or line.locked or not 0 <= point_idx < len(line.nodes):
            return False
        if line.symmetric:
            local = world_to_local(world_point, self.document.holster)
            target = snap_point(Point(abs(local.x), local.y), self.settings.snap)
        else:
            target = snap_point(world_point, self.settings.snap)
        line.nodes[point_idx] = line.nodes[point_idx].moved_to(target.x, target.y)
        return True
