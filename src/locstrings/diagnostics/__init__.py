"""Error types for locstrings.

Python 3.13+. Zero external dependencies.
"""

from .errors import LocStringsError, TableLoadError

__all__ = [
    "LocStringsError",
    "TableLoadError",
]
