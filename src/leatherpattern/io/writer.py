"""Geometry writer for exporting computed pattern geometry.

The payload is plain JSON: world-space outlines, stitch holes per line,
hole outlines, linked circles and stitch counts. Rendering and file-format
exporters consume it downstream.
"""

import json
from pathlib import Path
from typing import Any

from leatherpattern import __version__
from leatherpattern.core.engine import PatternEngine
from leatherpattern.core.geometry import path_length, polygon_area
from leatherpattern.core.stitches import StitchPlacement
from leatherpattern.domain import Point
from leatherpattern.exceptions import DocumentSaveError


def _path(points: list[Point]) -> list[list[float]]:
    return [[p.x, p.y] for p in points]


def _placement(placement: StitchPlacement) -> dict[str, Any]:
    return {
        "label": placement.label,
        "count": placement.count,
        "spacing": placement.spacing,
        "hole_size": placement.hole_size,
        "points": _path(placement.points),
        "mirrored_points": _path(placement.mirrored_points),
    }


def build_payload(engine: PatternEngine) -> dict[str, Any]:
    """Collect the engine's derived geometry into a JSON-ready dict."""
    outline = engine.merged_outline()
    placements = engine.all_placements()
    report = engine.stitch_report()
    return {
        "generator": f"leatherpattern {__version__}",
        "name": engine.document.name,
        "outline": {
            "points": _path(outline),
            "area": polygon_area(outline),
            "perimeter": path_length(outline, closed=True),
        },
        "base_outline": _path(engine.base_outline()),
        "stitch_lines": [_placement(p) for p in placements],
        "holes": [
            {"shape": idx, "side": side, "points": _path(points)}
            for idx, side, points in engine.hole_outlines()
        ],
        "linked_circles": [
            {
                "shape": idx,
                "center": [c.center.x, c.center.y],
                "radius": c.radius,
                "source_length": c.source_length,
                "stitch_count": c.stitch_count,
                "stitch_points": _path(c.stitch_points),
            }
            for idx, c in engine.linked_circles()
        ],
        "stitch_counts": {label: count for label, count in report.lines},
        "total_stitches": report.total,
    }


class GeometryWriter:
    """Writes computed pattern geometry as JSON.

    Example:
        writer = GeometryWriter(engine, Path("holster-geometry.json"))
        writer.save()
    """

    def __init__(self, engine: PatternEngine, output_path: Path) -> None:
        """Initialize the geometry writer.

        Args:
            engine: Engine holding the document to export
            output_path: Path where the JSON will be saved
        """
        self._engine = engine
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self) -> dict[str, Any]:
        """Compute the geometry and write it to the output path.

        Returns:
            The payload that was written

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        payload = build_payload(self._engine)
        try:
            self._output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e
        return payload

    @staticmethod
    def get_geometry_path(input_path: Path) -> Path:
        """Generate the default output path for a document.

        Converts: holster.json -> holster-geometry.json

        Args:
            input_path: Pattern document path

        Returns:
            Path with -geometry suffix before the .json extension
        """
        return input_path.parent / f"{input_path.stem}-geometry.json"
