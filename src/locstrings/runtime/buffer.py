"""Per-thread mutable output buffer.

Some consumers want a writable text buffer instead of an immutable ``str``.
ThreadLocalBuffer hands each thread its own ``io.StringIO`` and rewrites it
on every call, so a buffer returned to one thread is never touched by
another. The contents are valid until the same thread writes again.

Python 3.13+.
"""

from __future__ import annotations

import io
import threading

__all__ = ["ThreadLocalBuffer"]


class ThreadLocalBuffer:
    """One reusable StringIO per thread.

    Example:
        >>> buffers = ThreadLocalBuffer()
        >>> buf = buffers.write("hello")
        >>> buf.getvalue()
        'hello'
        >>> buffers.write("") is None
        True
    """

    __slots__ = ("_local",)

    def __init__(self) -> None:
        self._local = threading.local()

    def _buffer(self) -> io.StringIO:
        buf: io.StringIO | None = getattr(self._local, "buffer", None)
        if buf is None:
            buf = io.StringIO()
            self._local.buffer = buf
        return buf

    def write(self, text: str) -> io.StringIO | None:
        """Overwrite the calling thread's buffer with text.

        Args:
            text: New buffer contents

        Returns:
            The thread's buffer, rewound to position 0, or None if text is empty
            (the buffer is still cleared in that case)
        """
        buf = self._buffer()
        buf.seek(0)
        buf.truncate()
        if not text:
            return None
        buf.write(text)
        buf.seek(0)
        return buf

    def current(self) -> str:
        """Return the calling thread's current buffer contents."""
        return self._buffer().getvalue()
