"""Active-language template table.

TemplateStore holds the merged table for the active language: a copy of
the default table overlaid by the active language's overrides. Every
build fires the ``on_rebuild`` hook so derived caches can be dropped.

Merge rule:
    merged = dict(default); merged.update(override)
Keys absent from the override keep the default text, so the merged table
always covers at least the default table's keys.

Lookup rule:
    Unknown identifiers resolve to the identifier itself, which shows up in
    the UI as an obviously untranslated string.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType

from locstrings.localization.types import MessageId, Template, TemplateTable

__all__ = ["TemplateStore"]

logger = logging.getLogger(__name__)


class TemplateStore:
    """Merged template table with identifier fallback.

    Thread Safety:
        build() swaps in a freshly built dict under a lock and then fires
        ``on_rebuild``; readers always see either the old or the new table,
        never a partially merged one.

    Example:
        >>> store = TemplateStore({"ok": "OK", "cancel": "Cancel"})
        >>> _ = store.build({"ok": "OK", "cancel": "Cancel"}, {"ok": "Gut"})
        >>> store.lookup("ok"), store.lookup("cancel"), store.lookup("nope")
        ('Gut', 'Cancel', 'nope')
    """

    __slots__ = ("_lock", "_on_rebuild", "_table")

    def __init__(
        self,
        default_table: TemplateTable | None = None,
        *,
        on_rebuild: Callable[[], None] | None = None,
    ) -> None:
        """Initialize store with the default table in effect.

        Construction does not fire ``on_rebuild``.

        Args:
            default_table: Initial table (default: empty)
            on_rebuild: Called after every build(), typically RenderCache.clear
        """
        self._lock = threading.Lock()
        self._table: dict[MessageId, Template] = dict(default_table or {})
        self._on_rebuild = on_rebuild

    def build(
        self,
        default_table: TemplateTable,
        override_table: TemplateTable | None = None,
    ) -> Mapping[MessageId, Template]:
        """Replace the active table with default overlaid by override.

        Args:
            default_table: Base (default-language) table
            override_table: Active-language table; None or empty keeps defaults

        Returns:
            Read-only view of the new merged table
        """
        merged = dict(default_table)
        if override_table:
            merged.update(override_table)

        with self._lock:
            self._table = merged

        logger.debug(
            "Template table rebuilt: %d entries (%d overrides)",
            len(merged),
            len(override_table) if override_table else 0,
        )
        if self._on_rebuild is not None:
            self._on_rebuild()
        return MappingProxyType(merged)

    def reset(self, default_table: TemplateTable) -> Mapping[MessageId, Template]:
        """Rebuild with the default table only."""
        return self.build(default_table, None)

    def lookup(self, message_id: MessageId) -> Template:
        """Return the template for message_id, or message_id itself if unknown."""
        return self._table.get(message_id, message_id)

    def get(self, message_id: MessageId) -> Template | None:
        """Return the template for message_id, or None if unknown."""
        return self._table.get(message_id)

    def message_ids(self) -> list[MessageId]:
        """Return all known identifiers in table order."""
        return list(self._table)

    @property
    def table(self) -> Mapping[MessageId, Template]:
        """Read-only view of the active merged table."""
        return MappingProxyType(self._table)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._table

    def __len__(self) -> int:
        return len(self._table)
