"""Language table loading.

Provides the protocol for table sources, an INI implementation, and the
result record kept for diagnostics.

Components:
    TableSource - Protocol for two-level (language -> id -> template) stores
    IniTableSource - configparser-backed INI reader
    LoadResult - Immutable outcome of one load attempt

INI layout: one section per language, one ``id = template`` line per
message. Values may be wrapped in double quotes to preserve leading or
trailing whitespace; one pair of surrounding quotes is removed.
Indented lines are read as entries of their own (with a warning) rather
than as continuations of the previous value.

    [english]
    panel_find = "Find: "
    status_found_text = Found $REPLACE_STRING1 matches in $REPLACE_STRING2

Python 3.13+.
"""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from locstrings.diagnostics import TableLoadError
from locstrings.enums import LoadStatus
from locstrings.localization.types import LanguageCode, MessageId, RawTables, Template

__all__ = [
    "IniTableSource",
    "LoadResult",
    "TableSource",
]

logger = logging.getLogger(__name__)


class TableSource(Protocol):
    """Protocol for language table stores.

    This is a Protocol (structural typing) rather than ABC so hosts can
    plug in any store exposing the two methods.

    Example:
        >>> class DictSource:
        ...     def __init__(self, tables):
        ...         self._tables = tables
        ...     def load(self, path):
        ...         return True
        ...     def raw(self):
        ...         return self._tables
    """

    def load(self, path: str | Path) -> bool:
        """Read tables from path.

        Returns:
            True on success, False if the file is missing or unreadable
        """
        ...

    def raw(self) -> RawTables:
        """Return every loaded table keyed by language."""
        ...


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _section_entries(
    section: str, items: list[tuple[str, str]], path: str | Path
) -> dict[MessageId, Template]:
    """Build one language table from parsed options.

    configparser folds an indented line into the previous value. Templates
    are single-line (line breaks are written as ``<br/>``), so each folded
    ``id = template`` line is split back out as an entry of its own.
    """
    table: dict[MessageId, Template] = {}
    for key, value in items:
        first, *folded = value.split("\n")
        table[key] = _unquote(first)
        for line in folded:
            name, sep, text = line.partition("=")
            name = name.strip()
            if not sep or not name:
                logger.warning(
                    "Ignoring indented line without '=' in [%s] of %s: %r",
                    section,
                    path,
                    line,
                )
                continue
            logger.warning(
                "Indented line in [%s] of %s read as separate entry %r",
                section,
                path,
                name,
            )
            table[name] = _unquote(text)
    return table


class IniTableSource:
    """INI file table source.

    Section names are language codes, option names are message ids. Names
    are case-sensitive, values are taken literally (no interpolation), and
    duplicate sections or keys are tolerated with the last one winning.

    Attributes:
        last_error: Error from the most recent failed load(), else None

    Example:
        >>> source = IniTableSource()
        >>> if source.load("MultiReplace/languages.ini"):
        ...     german = source.raw().get("german", {})
    """

    __slots__ = ("_tables", "last_error")

    def __init__(self) -> None:
        self._tables: dict[LanguageCode, dict[MessageId, Template]] = {}
        self.last_error: TableLoadError | None = None

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            default_section="\x00",  # no real section can collide with DEFAULT
            delimiters=("=",),
            comment_prefixes=(";", "#"),
            inline_comment_prefixes=None,
            empty_lines_in_values=False,
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    def load(self, path: str | Path) -> bool:
        """Read and parse an INI file, replacing previously loaded tables.

        Never raises for I/O or syntax problems; the cause is kept in
        ``last_error`` and the source is left empty.

        Args:
            path: INI file path

        Returns:
            True if the file was parsed, False otherwise
        """
        self._tables = {}
        self.last_error = None
        parser = self._new_parser()

        try:
            with Path(path).open(encoding="utf-8-sig") as handle:
                parser.read_file(handle, source=str(path))
        except FileNotFoundError:
            self.last_error = TableLoadError(path, "file not found", not_found=True)
        except (OSError, UnicodeDecodeError) as e:
            self.last_error = TableLoadError(path, f"unreadable ({e})")
        except configparser.Error as e:
            self.last_error = TableLoadError(path, f"malformed INI ({e.message})")

        if self.last_error is not None:
            logger.warning("%s", self.last_error)
            return False

        for section in parser.sections():
            self._tables[section] = _section_entries(
                section, parser.items(section, raw=True), path
            )

        logger.info("Loaded language table %s: %d languages", path, len(self._tables))
        return True

    def raw(self) -> RawTables:
        """Return the loaded tables as a read-only mapping."""
        return MappingProxyType(self._tables)

    def languages(self) -> tuple[LanguageCode, ...]:
        """Return language codes in file order."""
        return tuple(self._tables)


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of loading a language table for one language.

    Attributes:
        path: File that was read
        language: Requested language code
        status: Load status (success, not_found, error)
        error: Exception if status is not SUCCESS, None otherwise
        merged_keys: Number of override entries merged over the defaults
    """

    path: str
    language: LanguageCode
    status: LoadStatus
    error: Exception | None = None
    merged_keys: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the table loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the table file was missing."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the table file could not be read or parsed."""
        return self.status == LoadStatus.ERROR
