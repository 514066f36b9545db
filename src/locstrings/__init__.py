"""locstrings - localized string tables with placeholder rendering.

Resolves a message identifier plus ordered replacement values to the
rendered string in the active language. The host supplies the default
(English) table; overrides come from an INI file with one section per
language; the active language is detected from a nativeLang.xml file.

Public API:
    LanguageManager - Load tables and render messages (owned, cached, buffered)
    TemplateStore - Default/override merged table with identifier fallback
    RenderCache - Thread-safe memo table for rendered strings
    IniTableSource - INI language table reader
    render - Pure placeholder substitution
    detect_language - Active language from nativeLang.xml

Exceptions:
    LocStringsError - Base exception class
    TableLoadError - Language table could not be loaded

Submodules:
    locstrings.runtime - Renderer, cache and thread-local buffers
    locstrings.localization - Loading, detection, store and manager
    locstrings.locale_utils - Babel-backed language display names
"""

from .diagnostics import LocStringsError, TableLoadError
from .localization import (
    IniTableSource,
    LanguageManager,
    LoadResult,
    TemplateStore,
    detect_language,
)
from .runtime import PlaceholderSyntax, RenderCache, render

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("locstrings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "IniTableSource",
    "LanguageManager",
    "LoadResult",
    "LocStringsError",
    "PlaceholderSyntax",
    "RenderCache",
    "TableLoadError",
    "TemplateStore",
    "__version__",
    "detect_language",
    "render",
]
