"""Pattern reader for loading JSON pattern documents.

This module provides the PatternReader class for loading pattern files
into PatternDocument domain models.
"""

import json
from pathlib import Path
from typing import Any

from leatherpattern.domain import PatternDocument
from leatherpattern.exceptions import DocumentFormatError, DocumentLoadError


class PatternReader:
    """Loads JSON pattern documents.

    Example:
        reader = PatternReader(Path("holster.json"))
        reader.load()
        print(len(reader.document.nodes))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the pattern reader.

        Args:
            path: Path to the JSON pattern document
        """
        self._path = path
        self._document: PatternDocument | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PatternDocument:
        """Load and parse the document.

        Returns:
            The loaded PatternDocument

        Raises:
            DocumentLoadError: If the file is missing or is not valid JSON
            DocumentFormatError: If the JSON does not describe a pattern
        """
        if not self._path.exists():
            raise DocumentLoadError(str(self._path), "file not found")

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise DocumentLoadError(str(self._path), str(e)) from e
        except json.JSONDecodeError as e:
            raise DocumentLoadError(str(self._path), f"invalid JSON: {e}") from e

        self._document = parse_document(raw)
        return self._document

    @property
    def document(self) -> PatternDocument:
        """Return the loaded document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    def __enter__(self) -> "PatternReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._document = None


def parse_document(raw: Any) -> PatternDocument:
    """Convert decoded JSON into a PatternDocument.

    Raises:
        DocumentFormatError: If required fields are missing or mistyped
    """
    if not isinstance(raw, dict):
        raise DocumentFormatError(f"expected an object, got {type(raw).__name__}")
    try:
        return PatternDocument.from_dict(raw)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DocumentFormatError(f"{type(e).__name__}: {e}") from e
