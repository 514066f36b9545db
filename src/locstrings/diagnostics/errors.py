"""locstrings exception hierarchy.

The render path never raises; these types describe failures that are
reported through return values (``LoadResult.error``,
``IniTableSource.last_error``) rather than propagated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path

__all__ = ["LocStringsError", "TableLoadError"]


class LocStringsError(Exception):
    """Base exception for all locstrings errors."""


class TableLoadError(LocStringsError):
    """Language table file could not be loaded.

    Attributes:
        path: File that failed to load
        reason: Short human-readable cause
        not_found: True if the file does not exist
    """

    def __init__(self, path: str | Path, reason: str, *, not_found: bool = False) -> None:
        """Initialize TableLoadError.

        Args:
            path: File that failed to load
            reason: Short human-readable cause
            not_found: True if the file does not exist
        """
        self.path = str(path)
        self.reason = reason
        self.not_found = not_found
        super().__init__(f"Cannot load language table {self.path}: {reason}")
