"""Thread Safety Example - Sharing one LanguageManager across threads.

Demonstrates:
1. Concurrent cached rendering (one render per distinct key)
2. Per-thread mutable buffers from render_buffer()
3. Switching language while readers are active

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from locstrings import LanguageManager

DEFAULT_TABLE = {
    "greeting": "Hello, $REPLACE_STRING!",
    "status_found": "Found $REPLACE_STRING1 matches",
}

TABLES = {
    "german": {"greeting": "Hallo, $REPLACE_STRING!"},
    "french": {"greeting": "Bonjour, $REPLACE_STRING !"},
}


def example_1_cached_reads(manager: LanguageManager) -> None:
    """Example 1: Many threads, few distinct keys."""
    print("=" * 60)
    print("Example 1: Concurrent Cached Rendering")
    print("=" * 60)

    names = ["Alice", "Bob", "Charlie"]
    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = [
            executor.submit(manager.render_cached, "greeting", [names[i % len(names)]])
            for i in range(60)
        ]
        results = {future.result() for future in as_completed(futures)}

    print(sorted(results))
    print(manager.get_cache_stats())
    # 3 misses (one per name), 57 hits


def example_2_thread_buffers(manager: LanguageManager) -> None:
    """Example 2: Each thread owns its render_buffer() StringIO."""
    print("\n" + "=" * 60)
    print("Example 2: Thread-Local Buffers")
    print("=" * 60)

    def worker(n: int) -> None:
        buf = manager.render_buffer("status_found", [str(n)])
        assert buf is not None
        print(f"  [Thread-{n}] {buf.getvalue()}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def example_3_language_switch(manager: LanguageManager) -> None:
    """Example 3: Readers keep working while the language changes."""
    print("\n" + "=" * 60)
    print("Example 3: Language Switch Under Load")
    print("=" * 60)

    stop = threading.Event()

    def reader() -> None:
        while not stop.is_set():
            manager.render_cached("greeting", ["World"])

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for language in ("german", "french", "german"):
        manager.apply_tables(TABLES, language)
    stop.set()
    for thread in readers:
        thread.join()

    print(manager.render_cached("greeting", ["World"]))
    # Output: Hallo, World!


if __name__ == "__main__":
    shared = LanguageManager(DEFAULT_TABLE)
    example_1_cached_reads(shared)
    example_2_thread_buffers(shared)
    example_3_language_switch(shared)
