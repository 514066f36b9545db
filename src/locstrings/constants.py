"""Shared constants for locstrings.

Centralizes the placeholder tokens, cache key delimiter and default
language so that the runtime and localization packages agree on them
without importing each other.

Constants are grouped by domain:
- Template tokens: Placeholder and line-break markers recognized by the renderer
- Cache keys: Delimiter used when building RenderCache keys
- Languages: Default language and on-disk locations

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template tokens
    "PLACEHOLDER",
    "LINE_BREAK_MARKER",
    "LINE_BREAK",
    # Cache keys
    "CACHE_KEY_DELIMITER",
    "CACHE_KEY_ESCAPE",
    # Languages
    "DEFAULT_LANGUAGE",
    "INI_RELATIVE_PATH",
    "NATIVE_LANG_PATTERN",
]

# ============================================================================
# TEMPLATE TOKENS
# ============================================================================

# Bare placeholder. Numbered placeholders append a decimal index: $REPLACE_STRING2
PLACEHOLDER: str = "$REPLACE_STRING"

LINE_BREAK_MARKER: str = "<br/>"

# Windows line break; UI toolkits on the host expect CRLF in multi-line labels.
LINE_BREAK: str = "\r\n"

# ============================================================================
# CACHE KEYS
# ============================================================================

# ASCII unit separator. Not printable and not whitespace, so it rarely
# occurs in translation text.
CACHE_KEY_DELIMITER: str = "\x1f"

# Prefixed to a delimiter or escape character occurring inside a component.
CACHE_KEY_ESCAPE: str = "\x1b"

# ============================================================================
# LANGUAGES
# ============================================================================

DEFAULT_LANGUAGE: str = "english"

# Location of the language table relative to the plugin directory.
INI_RELATIVE_PATH: tuple[str, ...] = ("MultiReplace", "languages.ini")

# Matches the active localization file in nativeLang.xml, e.g.
# <Native-Langue name="Deutsch" filename="german.xml" version="8.6">
NATIVE_LANG_PATTERN: str = r'<Native-Langue .*? filename="(.*?)\.xml"'
