"""Thread-safe memo table for rendered strings.

Stores one rendered string per (message id, replacement list) so that
callers needing a stable result object receive the very same ``str``
instance on every call until the next clear.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Unbounded dict; entries live until clear() (no eviction, no TTL)
    - String cache keys joined with an ASCII unit separator
    - Cleared by TemplateStore on every table rebuild

Cache Key Structure:
    message_id + US + replacement_1 + US + ... + replacement_n + US
    where US is "\\x1f". A US or ESC ("\\x1b") inside a component is prefixed
    with ESC, so distinct (id, replacements) pairs never share a key.

Thread Safety:
    get_or_render() and clear() are serialized by a single coarse lock. The
    render callback runs while the lock is held, so a rebuild that clears the
    cache cannot interleave with a render of the previous table.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from threading import RLock
from typing import TypeAlias

from locstrings.constants import CACHE_KEY_DELIMITER, CACHE_KEY_ESCAPE

__all__ = ["RenderCache", "RenderFn"]

logger = logging.getLogger(__name__)

RenderFn: TypeAlias = Callable[[str, Sequence[str]], str]
"""Callback computing a rendered string from (message_id, replacements)."""


def _escape(part: str) -> str:
    if CACHE_KEY_DELIMITER not in part and CACHE_KEY_ESCAPE not in part:
        return part
    return part.replace(CACHE_KEY_ESCAPE, CACHE_KEY_ESCAPE * 2).replace(
        CACHE_KEY_DELIMITER, CACHE_KEY_ESCAPE + CACHE_KEY_DELIMITER
    )


class RenderCache:
    """Unbounded, lock-guarded cache of rendered strings.

    Attributes:
        hits: Number of lookups served from the cache
        misses: Number of lookups that invoked the render callback

    Example:
        >>> cache = RenderCache()
        >>> first = cache.get_or_render("greet", ["Ann"], lambda i, r: f"Hi {r[0]}")
        >>> second = cache.get_or_render("greet", ["Ann"], lambda i, r: "unused")
        >>> first is second
        True
    """

    __slots__ = ("_cache", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._cache: dict[str, str] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(message_id: str, replacements: Sequence[str]) -> str:
        """Build the cache key for a message id and replacement list.

        Args:
            message_id: Message identifier
            replacements: Ordered replacement values

        Returns:
            Delimiter-joined key; every component is followed by the delimiter

        Example:
            >>> RenderCache.make_key("id", ["a", "b"])
            'id\\x1fa\\x1fb\\x1f'
        """
        parts = [_escape(part) for part in (message_id, *replacements)]
        return CACHE_KEY_DELIMITER.join(parts) + CACHE_KEY_DELIMITER

    def get_or_render(
        self,
        message_id: str,
        replacements: Sequence[str],
        render_fn: RenderFn,
    ) -> str:
        """Return the cached rendering, computing and storing it on first use.

        Thread-safe. The first caller for a key runs ``render_fn``; later
        callers with an equal key get the stored object without recomputation.

        Args:
            message_id: Message identifier
            replacements: Ordered replacement values
            render_fn: Called as ``render_fn(message_id, replacements)`` on a miss

        Returns:
            Cached rendered string, valid until the next clear()
        """
        key = self.make_key(message_id, replacements)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._hits += 1
                return cached

            self._misses += 1
            value = render_fn(message_id, replacements)
            self._cache[key] = value
            return value

    def clear(self) -> None:
        """Drop every entry and reset the metrics.

        Thread-safe. Called whenever the active template table is rebuilt.
        """
        with self._lock:
            size = len(self._cache)
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Render cache cleared (%d entries)", size)

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, key: object) -> bool:
        """Check whether a key (see make_key) is cached."""
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._cache)

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses
