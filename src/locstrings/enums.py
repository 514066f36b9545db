"""Enumerations for locstrings type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading a language table file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File parsed; the requested language (if present) was merged."""

    NOT_FOUND = "not_found"
    """File does not exist. Default table stays in effect."""

    ERROR = "error"
    """File exists but could not be read or parsed. Default table stays in effect."""


__all__ = [
    "LoadStatus",
]
