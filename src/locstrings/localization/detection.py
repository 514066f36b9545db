"""Active language detection from a nativeLang.xml-style file.

Best-effort scan: the file is read line by line and the first
``<Native-Langue ... filename="<code>.xml"`` tag decides the language.
Any failure degrades to the default language; nothing is raised.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from locstrings.constants import DEFAULT_LANGUAGE, NATIVE_LANG_PATTERN
from locstrings.localization.types import LanguageCode

__all__ = ["detect_language"]

logger = logging.getLogger(__name__)

_NATIVE_LANG_RE = re.compile(NATIVE_LANG_PATTERN)


def detect_language(path: str | Path, default: LanguageCode = DEFAULT_LANGUAGE) -> LanguageCode:
    """Return the language code named by a nativeLang.xml file.

    Args:
        path: Path to the markup file
        default: Code returned when detection fails (default: "english")

    Returns:
        The ``filename`` attribute without its ``.xml`` suffix, or ``default``
        if the file is missing or unreadable, has no matching tag, or names an
        empty file name

    Example:
        >>> detect_language("/nonexistent/nativeLang.xml")
        'english'
    """
    try:
        with Path(path).open(encoding="utf-8", errors="replace") as handle:
            for line in handle:
                match = _NATIVE_LANG_RE.search(line)
                if match is None:
                    continue
                language = match.group(1)
                if not language:
                    break
                logger.debug("Detected language %r from %s", language, path)
                return language
    except (OSError, ValueError) as e:
        logger.debug("Language detection failed for %s: %s", path, e)
        return default

    logger.debug("No language tag in %s, using %r", path, default)
    return default
