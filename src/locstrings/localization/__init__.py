"""Language tables, detection and the LanguageManager.

Submodules:
    types      - PEP 695 type aliases (MessageId, LanguageCode, Template, ...)
    loading    - TableSource protocol, IniTableSource, LoadResult
    detection  - detect_language (nativeLang.xml scan)
    store      - TemplateStore (default/override merge, id fallback)
    manager    - LanguageManager (composition root)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from locstrings.enums import LoadStatus
from locstrings.localization.detection import detect_language
from locstrings.localization.loading import IniTableSource, LoadResult, TableSource
from locstrings.localization.manager import LanguageManager
from locstrings.localization.store import TemplateStore
from locstrings.localization.types import (
    LanguageCode,
    MessageId,
    RawTables,
    ReplacementList,
    Template,
    TemplateTable,
)

__all__ = [
    # Composition root
    "LanguageManager",
    # Table store
    "TemplateStore",
    # Loading
    "TableSource",
    "IniTableSource",
    "LoadResult",
    "LoadStatus",
    # Detection
    "detect_language",
    # Type aliases for user code type annotations
    "LanguageCode",
    "MessageId",
    "RawTables",
    "ReplacementList",
    "Template",
    "TemplateTable",
]
