"""Quickstart example for locstrings.

This example demonstrates basic usage of locstrings: rendering messages
with placeholders, loading a translated table, and cached rendering.
"""

import tempfile
from pathlib import Path

from locstrings import LanguageManager, render

DEFAULT_TABLE = {
    "panel_find": "Find what:",
    "status_found": "Found $REPLACE_STRING1 matches in $REPLACE_STRING2 documents",
    "status_saved": "List saved to $REPLACE_STRING",
    "tooltip_wrap": "Wrap around<br/>at end of document",
}

# Example 1: The renderer on its own
print("=" * 50)
print("Example 1: Placeholder Rendering")
print("=" * 50)

print(render("Found $REPLACE_STRING1 of $REPLACE_STRING2", ["3", "7"]))
# Output: Found 3 of 7

print(repr(render("Line 1<br/>Line 2")))
# Output: 'Line 1\r\nLine 2'

# Example 2: Default table
print("\n" + "=" * 50)
print("Example 2: Default Table")
print("=" * 50)

manager = LanguageManager(DEFAULT_TABLE)
print(manager.render("status_found", ["12", "3"]))
# Output: Found 12 matches in 3 documents

print(manager.render("missing_key"))
# Output: missing_key

# Example 3: Loading a translation
print("\n" + "=" * 50)
print("Example 3: Loading languages.ini")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    plugin_dir = Path(tmpdir)
    ini_dir = plugin_dir / "MultiReplace"
    ini_dir.mkdir()
    (ini_dir / "languages.ini").write_text(
        "[german]\n"
        "panel_find = Suchen nach:\n"
        "status_found = $REPLACE_STRING1 Treffer in $REPLACE_STRING2 Dokumenten\n",
        encoding="utf-8",
    )
    native_lang = plugin_dir / "nativeLang.xml"
    native_lang.write_text(
        '<NotepadPlus>\n<Native-Langue name="Deutsch" filename="german.xml" version="8.6">\n',
        encoding="utf-8",
    )

    manager.load(plugin_dir, native_lang)
    print(f"Active language: {manager.language} ({manager.display_name})")
    # Output: Active language: german (Deutsch)

    print(manager.render("panel_find"))
    # Output: Suchen nach:

    print(manager.render("status_saved", "out.txt"))
    # Output: List saved to out.txt  (untranslated key falls back to English)

# Example 4: Cached rendering
print("\n" + "=" * 50)
print("Example 4: Cached Rendering")
print("=" * 50)

first = manager.render_cached("status_found", ["1", "2"])
second = manager.render_cached("status_found", ["1", "2"])
print(first, "| same object:", first is second)
print(manager.get_cache_stats())
# Output: {'size': 1, 'hits': 1, 'misses': 1, 'hit_rate': 50.0}
