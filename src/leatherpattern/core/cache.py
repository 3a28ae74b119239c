"""Memoization of derived geometry.

Derived paths are recomputed from scratch after every geometry edit. The
cache only avoids recomputing them between edits: every entry is bound to
the geometry version it was computed for, and a version change makes all
entries stale.
"""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


class PathCache:
    """Cache of computed values keyed by name and geometry version.

    Example:
        cache = PathCache()
        merged = cache.get("merged", version, compute_merged)
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[int, Any]] = {}
        self._version: int | None = None
        self.hits = 0
        self.misses = 0

    def get(self, key: str, version: int, compute: Callable[[], T]) -> T:
        """Return the value cached for ``version``, computing it if stale.

        The first lookup at a new version drops every entry computed for an
        older one.
        """
        if version != self._version:
            self._entries.clear()
            self._version = version
        entry = self._entries.get(key)
        if entry is not None:
            self.hits += 1
            return entry[1]
        self.misses += 1
        value = compute()
        self._entries[key] = (version, value)
        return value

    def has(self, key: str, version: int) -> bool:
        """Whether a value for ``key`` is cached at ``version``."""
        entry = self._entries.get(key)
        return entry is not None and entry[0] == version

    def remove(self, key: str) -> None:
        """Drop one cached value."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop all cached values."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
