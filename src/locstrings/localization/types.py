"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

__all__ = [
    "LanguageCode",
    "MessageId",
    "RawTables",
    "ReplacementList",
    "Template",
    "TemplateTable",
]

MessageId: TypeAlias = str
"""Identifier for a localizable message (e.g., 'panel_find', 'status_found_text')."""

LanguageCode: TypeAlias = str
"""Language name as used by the host's localization files (e.g., 'english', 'german')."""

Template: TypeAlias = str
"""Raw message text that may contain placeholder and line-break tokens."""

TemplateTable: TypeAlias = Mapping[MessageId, Template]
"""All templates of one language."""

RawTables: TypeAlias = Mapping[LanguageCode, TemplateTable]
"""Every language table read from a table source, keyed by language."""

ReplacementList: TypeAlias = Sequence[str]
"""Ordered replacement values; index 0 fills the bare and first numbered placeholder."""
