"""Polygon boolean backend.

The merger and the closed-path offset only need two operations, described by
the BooleanBackend protocol. ClipperBackend implements them with pyclipper,
which works on integer coordinates: millimeter paths are scaled by a fixed
factor (100 units per millimeter by default) on the way in and divided back
on the way out.
"""

from collections.abc import Sequence
from typing import Protocol

import pyclipper

from leatherpattern.domain import Point
from leatherpattern.exceptions import BooleanOperationError

FixedPath = list[tuple[int, int]]


class BooleanBackend(Protocol):
    """Polygon operations used by the engine, on millimeter paths."""

    def union(
        self, subjects: Sequence[Sequence[Point]], clips: Sequence[Sequence[Point]]
    ) -> list[list[Point]]:
        """Non-zero union of subject and clip polygons."""
        ...

    def offset(self, path: Sequence[Point], delta: float) -> list[list[Point]]:
        """Offset a closed polygon by delta (negative shrinks) with round joins."""
        ...


class ClipperBackend:
    """BooleanBackend implementation backed by pyclipper.

    Example:
        backend = ClipperBackend(scale=100)
        merged = backend.union([outline], [tab])
    """

    def __init__(self, scale: int = 100, arc_tolerance: float = 0.25, miter_limit: float = 2.0) -> None:
        """Initialize the backend.

        Args:
            scale: Fixed-point units per millimeter
            arc_tolerance: Maximum deviation of round joins from a true arc (mm)
            miter_limit: Miter limit passed to the offsetter
        """
        self.scale = scale
        self.arc_tolerance = arc_tolerance
        self.miter_limit = miter_limit

    def to_fixed(self, path: Sequence[Point]) -> FixedPath:
        """Convert a millimeter path to fixed-point integer coordinates."""
        return [(round(p.x * self.scale), round(p.y * self.scale)) for p in path]

    def from_fixed(self, path: Sequence[Sequence[int]]) -> list[Point]:
        """Convert a fixed-point path back to millimeters."""
        return [Point(x / self.scale, y / self.scale) for x, y in path]

    def union(
        self, subjects: Sequence[Sequence[Point]], clips: Sequence[Sequence[Point]]
    ) -> list[list[Point]]:
        """Union subject and clip polygons with non-zero filling.

        Raises:
            BooleanOperationError: If pyclipper rejects a path or the operation
        """
        clipper = pyclipper.Pyclipper()
        try:
            for subject in subjects:
                clipper.AddPath(self.to_fixed(subject), pyclipper.PT_SUBJECT, True)
            for clip in clips:
                clipper.AddPath(self.to_fixed(clip), pyclipper.PT_CLIP, True)
            solution = clipper.Execute(
                pyclipper.CT_UNION, pyclipper.PFT_NONZERO, pyclipper.PFT_NONZERO
            )
        except pyclipper.ClipperException as e:
            raise BooleanOperationError("union", str(e)) from e
        return [self.from_fixed(path) for path in solution]

    def offset(self, path: Sequence[Point], delta: float) -> list[list[Point]]:
        """Offset a closed polygon with round joins.

        Raises:
            BooleanOperationError: If pyclipper rejects the path
        """
        offsetter = pyclipper.PyclipperOffset(self.miter_limit, self.arc_tolerance * self.scale)
        try:
            offsetter.AddPath(self.to_fixed(path), pyclipper.JT_ROUND, pyclipper.ET_CLOSEDPOLYGON)
            solution = offsetter.Execute(delta * self.scale)
        except pyclipper.ClipperException as e:
            raise BooleanOperationError("offset", str(e)) from e
        return [self.from_fixed(p) for p in solution]
