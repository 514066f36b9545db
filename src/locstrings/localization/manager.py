"""LanguageManager - composition of table store, renderer and cache.

Owns one TemplateStore, one RenderCache and one ThreadLocalBuffer, and
exposes the three render entry points used by UI code:

    render()         - owned string, always safe
    render_cached()  - memoized string; the same object is returned for equal
                       (id, replacements) until the next table rebuild
    render_buffer()  - the calling thread's reusable StringIO, or None if the
                       result is empty; overwritten by the thread's next call

Construct one manager at startup and pass it to consumers; there is no
global instance.

Loading Behavior:
    load_from_ini() always rebuilds the table from the default table first.
    If the INI file cannot be read the defaults stay in effect and False is
    returned; a missing language section is not a failure. Every rebuild
    clears the render cache.

Python 3.13+.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path

from locstrings.constants import DEFAULT_LANGUAGE, INI_RELATIVE_PATH
from locstrings.diagnostics import TableLoadError
from locstrings.enums import LoadStatus
from locstrings.locale_utils import get_language_display_name
from locstrings.localization.detection import detect_language
from locstrings.localization.loading import IniTableSource, LoadResult, TableSource
from locstrings.localization.store import TemplateStore
from locstrings.localization.types import (
    LanguageCode,
    MessageId,
    RawTables,
    ReplacementList,
    TemplateTable,
)
from locstrings.runtime.buffer import ThreadLocalBuffer
from locstrings.runtime.cache import RenderCache
from locstrings.runtime.renderer import DEFAULT_SYNTAX, PlaceholderSyntax, render

__all__ = ["LanguageManager"]

logger = logging.getLogger(__name__)

# Long user text is truncated in log records.
_LOG_TRUNCATE: int = 50


class LanguageManager:
    """Localized string lookup with default-language fallback.

    Example - Startup:
        >>> manager = LanguageManager({"title": "Find $REPLACE_STRING"})
        >>> manager.load(plugin_dir, native_lang_xml)  # doctest: +SKIP
        >>> manager.render("title", ["all"])
        'Find all'

    Example - Direct tables:
        >>> manager = LanguageManager({"ok": "OK", "cancel": "Cancel"})
        >>> manager.apply_tables({"german": {"cancel": "Abbrechen"}}, "german")
        >>> manager.render("ok"), manager.render("cancel")
        ('OK', 'Abbrechen')

    Attributes:
        language: Active language code
    """

    __slots__ = (
        "_buffers",
        "_cache",
        "_default_language",
        "_default_table",
        "_language",
        "_last_load",
        "_source",
        "_store",
        "_syntax",
    )

    def __init__(
        self,
        default_table: TemplateTable,
        table_source: TableSource | None = None,
        *,
        cache: RenderCache | None = None,
        syntax: PlaceholderSyntax = DEFAULT_SYNTAX,
        default_language: LanguageCode = DEFAULT_LANGUAGE,
    ) -> None:
        """Initialize with the default table in effect.

        Args:
            default_table: Default-language templates; defines full key coverage
            table_source: Store used by load_from_ini (default: IniTableSource)
            cache: Render cache to use; pass a shared instance to inspect it
                (default: a new RenderCache)
            syntax: Placeholder tokens (default: $REPLACE_STRING / <br/>)
            default_language: Language assumed before any load (default: "english")

        Raises:
            TypeError: If default_table is not a mapping
            ValueError: If default_language is empty
        """
        if not hasattr(default_table, "items"):
            msg = f"default_table must be a mapping, got {type(default_table).__name__}"
            raise TypeError(msg)
        if not default_language:
            msg = "default_language cannot be empty"
            raise ValueError(msg)

        self._default_table: dict[MessageId, str] = dict(default_table)
        self._source: TableSource = table_source if table_source is not None else IniTableSource()
        self._cache = cache if cache is not None else RenderCache()
        self._store = TemplateStore(self._default_table, on_rebuild=self._cache.clear)
        self._syntax = syntax
        self._buffers = ThreadLocalBuffer()
        self._default_language = default_language
        self._language: LanguageCode = default_language
        self._last_load: LoadResult | None = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def detect_language(
        native_lang_path: str | Path, default: LanguageCode = DEFAULT_LANGUAGE
    ) -> LanguageCode:
        """Detect the active language from a nativeLang.xml file (never raises)."""
        return detect_language(native_lang_path, default)

    def load(
        self,
        plugin_dir: str | Path,
        native_lang_path: str | Path,
        *,
        ini_relative_path: Iterable[str] = INI_RELATIVE_PATH,
    ) -> bool:
        """Detect the active language and load its table from the plugin directory.

        Args:
            plugin_dir: Host plugin directory
            native_lang_path: nativeLang.xml naming the active language
            ini_relative_path: INI location below plugin_dir
                (default: MultiReplace/languages.ini)

        Returns:
            True if the INI file was read, False if defaults are in effect
        """
        language = detect_language(native_lang_path, self._default_language)
        ini_path = Path(plugin_dir).joinpath(*ini_relative_path)
        return self.load_from_ini(ini_path, language)

    def load_from_ini(self, ini_path: str | Path, language_code: LanguageCode) -> bool:
        """Rebuild the table from defaults plus one language of an INI file.

        Args:
            ini_path: INI file to read through the table source
            language_code: Section to merge over the defaults

        Returns:
            True if the file was read (even if the section is absent),
            False if the file is missing or unreadable
        """
        path = str(ini_path)
        self._store.reset(self._default_table)

        if not self._source.load(ini_path):
            error = getattr(self._source, "last_error", None)
            if error is None:
                error = TableLoadError(path, "table source reported failure")
            status = (
                LoadStatus.NOT_FOUND
                if isinstance(error, TableLoadError) and error.not_found
                else LoadStatus.ERROR
            )
            self._language = self._default_language
            self._last_load = LoadResult(path, language_code, status, error=error)
            logger.warning(
                "Using %s defaults, language table not loaded: %s",
                self._default_language,
                error,
            )
            return False

        merged = self._merge(self._source.raw(), language_code)
        self._last_load = LoadResult(path, language_code, LoadStatus.SUCCESS, merged_keys=merged)
        return True

    def apply_tables(self, raw: RawTables, language_code: LanguageCode) -> None:
        """Rebuild the table from defaults plus ``raw[language_code]``.

        For hosts that read their tables themselves.
        """
        self._merge(raw, language_code)

    def _merge(self, raw: RawTables, language_code: LanguageCode) -> int:
        override = raw.get(language_code)
        self._store.build(self._default_table, override)
        self._language = language_code

        if override is None:
            logger.info("No table for language %r, using defaults", language_code)
            return 0
        logger.info(
            "Language %r loaded: %d of %d entries translated",
            language_code,
            len(override),
            len(self._store),
        )
        return len(override)

    def invalidate_caches(self) -> None:
        """Drop every memoized rendering."""
        self._cache.clear()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def _freeze(replacements: ReplacementList | str | None) -> tuple[str, ...]:
        """Normalize caller input to an immutable tuple of strings."""
        if replacements is None:
            return ()
        if isinstance(replacements, str):
            return (replacements,)
        return tuple(r if isinstance(r, str) else str(r) for r in replacements)

    def _render(self, message_id: MessageId, replacements: ReplacementList) -> str:
        template = self._store.get(message_id)
        if template is None:
            logger.warning("Message %r not found", message_id[:_LOG_TRUNCATE])
            return message_id
        return render(template, replacements, self._syntax)

    def render(
        self, message_id: MessageId, replacements: ReplacementList | str | None = ()
    ) -> str:
        """Render a message to a new string.

        Args:
            message_id: Message identifier
            replacements: Ordered replacement values; a single string counts
                as a one-element list

        Returns:
            Rendered text, or message_id itself if the id is unknown
        """
        return self._render(message_id, self._freeze(replacements))

    def render_cached(
        self, message_id: MessageId, replacements: ReplacementList | str | None = ()
    ) -> str:
        """Render a message through the render cache.

        Equal ids with equal, equally ordered replacement lists return the
        same string object until the next table rebuild or
        invalidate_caches().
        """
        return self._cache.get_or_render(message_id, self._freeze(replacements), self._render)

    def render_buffer(
        self, message_id: MessageId, replacements: ReplacementList | str | None = ()
    ) -> io.StringIO | None:
        """Render a message into the calling thread's buffer.

        Returns:
            The thread's StringIO holding the result, or None if the result
            is empty. The buffer is rewritten by this thread's next call;
            copy with ``getvalue()`` to keep the text.
        """
        return self._buffers.write(self.render(message_id, replacements))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def language(self) -> LanguageCode:
        """Active language code."""
        return self._language

    @property
    def display_name(self) -> str:
        """Native display name of the active language (e.g., "Deutsch")."""
        return get_language_display_name(self._language)

    @property
    def cache(self) -> RenderCache:
        """Render cache used by render_cached()."""
        return self._cache

    def has_message(self, message_id: MessageId) -> bool:
        """Check whether the active table defines message_id."""
        return message_id in self._store

    def get_message_ids(self) -> list[MessageId]:
        """Return every identifier of the active table."""
        return self._store.message_ids()

    def available_languages(self) -> tuple[LanguageCode, ...]:
        """Return the languages present in the last loaded table source."""
        return tuple(self._source.raw())

    def get_load_result(self) -> LoadResult | None:
        """Return the outcome of the last load_from_ini() call, if any."""
        return self._last_load

    def get_cache_stats(self) -> dict[str, int | float]:
        """Return render cache statistics (see RenderCache.get_stats)."""
        return self._cache.get_stats()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LanguageManager(language={self._language!r}, "
            f"messages={len(self._store)}, cached={len(self._cache)})"
        )
