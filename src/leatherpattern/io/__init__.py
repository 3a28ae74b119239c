"""Document I/O layer for leatherpattern.

This module handles reading pattern documents and writing computed
geometry as JSON. It keeps file handling out of the engine and the
domain models.

Key responsibilities:
- Load JSON pattern documents into domain models
- Report missing, unreadable or malformed documents
- Write derived geometry for rendering and export tooling

Key classes:
- PatternReader: Load pattern documents
- GeometryWriter: Save computed geometry
"""

from leatherpattern.io.reader import PatternReader
from leatherpattern.io.writer import GeometryWriter

__all__ = [
    "GeometryWriter",
    "PatternReader",
]
