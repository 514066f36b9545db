"""Language-name utilities backed by Babel.

The host names languages after its localization files ("german",
"chineseSimplified"). This module maps those names to BCP-47 locale codes
and uses Babel's CLDR data to produce human-readable display names.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LANGUAGE_LOCALES",
    "get_babel_locale",
    "get_language_display_name",
    "language_to_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Localization file names (without .xml) -> BCP-47 codes.
LANGUAGE_LOCALES = MappingProxyType({
    "arabic": "ar",
    "basque": "eu",
    "belarusian": "be",
    "brazilian_portuguese": "pt-BR",
    "bulgarian": "bg",
    "catalan": "ca",
    "chineseSimplified": "zh-Hans",
    "chineseTraditional": "zh-Hant",
    "croatian": "hr",
    "czech": "cs",
    "danish": "da",
    "dutch": "nl",
    "english": "en",
    "english_customizable": "en",
    "estonian": "et",
    "farsi": "fa",
    "finnish": "fi",
    "french": "fr",
    "galician": "gl",
    "georgian": "ka",
    "german": "de",
    "greek": "el",
    "hebrew": "he",
    "hindi": "hi",
    "hungarian": "hu",
    "indonesian": "id",
    "italian": "it",
    "japanese": "ja",
    "korean": "ko",
    "latvian": "lv",
    "lithuanian": "lt",
    "macedonian": "mk",
    "norwegian": "nb",
    "nynorsk": "nn",
    "polish": "pl",
    "portuguese": "pt-PT",
    "romanian": "ro",
    "russian": "ru",
    "serbian": "sr-Latn",
    "serbianCyrillic": "sr-Cyrl",
    "slovak": "sk",
    "slovenian": "sl",
    "spanish": "es",
    "spanish_ar": "es-AR",
    "swedish": "sv",
    "taiwaneseMandarin": "zh-Hant-TW",
    "thai": "th",
    "turkish": "tr",
    "ukrainian": "uk",
    "vietnamese": "vi",
})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel parses.

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
    """
    return locale_code.replace("-", "_")


def language_to_locale(language: str) -> str | None:
    """Return the BCP-47 code for a host language name, or None if unmapped.

    Example:
        >>> language_to_locale("german")
        'de'
        >>> language_to_locale("klingon") is None
        True
    """
    return LANGUAGE_LOCALES.get(language)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_language_display_name(language: str, display_language: str | None = None) -> str:
    """Return a human-readable name for a host language.

    Never raises: unmapped names, and names Babel cannot resolve, are
    returned unchanged.

    Args:
        language: Host language name (e.g., "german")
        display_language: Host language name to display in; None (default)
            uses the language's own name for itself (e.g., "Deutsch")

    Returns:
        Display name (e.g., "Deutsch", or "German" with display_language="english")
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    locale_code = language_to_locale(language)
    if locale_code is None:
        return language

    display_code = language_to_locale(display_language) if display_language else None
    try:
        locale = get_babel_locale(locale_code)
        display_locale = get_babel_locale(display_code) if display_code else locale
        name = locale.get_display_name(display_locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No display name for %r: %s", language, e)
        return language

    return name or language
