"""Union of extension shapes into the base outline.

Extensions are closed shapes that extend the pattern boundary, such as belt
tabs or welts. The merger unions them into the base outline and keeps only
the largest resulting polygon, so an extension that does not touch the
outline produces an island that is discarded.
"""

from collections.abc import Sequence

import structlog

from leatherpattern.core.clipper import BooleanBackend, ClipperBackend
from leatherpattern.core.geometry import (
    ensure_orientation,
    polygon_area,
    retag,
    rotate_to_nearest,
    signed_area,
)
from leatherpattern.core.outline import DEFAULT_STEPS
from leatherpattern.core.shapes import shape_sides, shape_world_outline
from leatherpattern.domain import FOLD_SEGMENT, Extension, Point, Transform
from leatherpattern.exceptions import BooleanOperationError

logger = structlog.get_logger(__name__)


def extension_outlines(
    extensions: Sequence[Extension],
    holster: Transform,
    steps: int = DEFAULT_STEPS,
) -> list[list[Point]]:
    """World outlines of all extensions, mirrored twins included.

    Outlines with fewer than 3 points are dropped.
    """
    outlines: list[list[Point]] = []
    for ext in extensions:
        for side in shape_sides(ext):
            outline = shape_world_outline(ext, holster, side=side, steps=steps)
            if len(outline) >= 3:
                outlines.append(outline)
    return outlines


def union_outline(
    base: Sequence[Point],
    clips: Sequence[Sequence[Point]],
    backend: BooleanBackend | None = None,
) -> list[Point]:
    """Union closed clip polygons into a closed base outline.

    The base is the subject polygon. From the union result, the polygon with
    the largest area becomes the new outline. It keeps the base's winding
    and starts at the vertex nearest the base's first point. All its points
    are tagged FOLD_SEGMENT since they no longer map onto nodes.

    Args:
        base: Closed world outline
        clips: Closed world polygons to merge in
        backend: Boolean backend (pyclipper by default)

    Returns:
        The merged outline, or the base unchanged when there is nothing to
        merge, the base is degenerate, or the union fails
    """
    if len(base) < 3 or not clips:
        return list(base)

    backend = backend or ClipperBackend()
    try:
        solution = backend.union([base], clips)
    except BooleanOperationError as e:
        logger.warning("Outline union failed, using base outline", error=str(e))
        return list(base)

    if not solution:
        logger.warning("Outline union produced no paths, using base outline")
        return list(base)

    winner = max(solution, key=polygon_area)
    if len(solution) > 1:
        logger.debug("Discarded union islands", islands=len(solution) - 1)

    winner = ensure_orientation(winner, counter_clockwise=signed_area(base) >= 0)
    winner = rotate_to_nearest(winner, base[0])
    return retag(winner, FOLD_SEGMENT)


def merge_extensions(
    base: Sequence[Point],
    extensions: Sequence[Extension],
    holster: Transform,
    backend: BooleanBackend | None = None,
    steps: int = DEFAULT_STEPS,
) -> list[Point]:
    """Build the merged pattern path from the base outline and extensions.

    Without extensions the base outline is returned unchanged.
    """
    if not extensions:
        return list(base)
    return union_outline(base, extension_outlines(extensions, holster, steps), backend)
