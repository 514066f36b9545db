"""Pytest configuration for the locstrings test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

DEFAULT_TABLE: dict[str, str] = {
    "panel_find": "Find",
    "panel_replace": "Replace",
    "status_found": "Found $REPLACE_STRING1 matches in $REPLACE_STRING2",
    "status_saved": "Saved to $REPLACE_STRING",
    "tooltip_wrap": "Wrap around<br/>at end of document",
}

LANGUAGES_INI = """\
[english]
panel_find = Find

[german]
panel_find = Suchen
status_found = "$REPLACE_STRING1 Treffer in $REPLACE_STRING2 gefunden"

[french]
panel_replace = Remplacer
"""

NATIVE_LANG_XML = """\
<?xml version="1.0" encoding="UTF-8" ?>
<NotepadPlus>
    <Native-Langue name="Deutsch" filename="{filename}" version="8.6.4">
        <Menu>
        </Menu>
    </Native-Langue>
</NotepadPlus>
"""


@pytest.fixture
def default_table() -> dict[str, str]:
    """Fresh copy of the default (English) table."""
    return dict(DEFAULT_TABLE)


@pytest.fixture
def languages_ini(tmp_path: Path) -> Path:
    """languages.ini with english, german and french sections."""
    path = tmp_path / "languages.ini"
    path.write_text(LANGUAGES_INI, encoding="utf-8")
    return path


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    """Plugin directory with MultiReplace/languages.ini in place."""
    root = tmp_path / "plugins"
    ini_dir = root / "MultiReplace"
    ini_dir.mkdir(parents=True)
    (ini_dir / "languages.ini").write_text(LANGUAGES_INI, encoding="utf-8")
    return root


@pytest.fixture
def write_native_lang(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a nativeLang.xml whose tag names the given file."""

    def _write(filename: str) -> Path:
        path = tmp_path / "nativeLang.xml"
        path.write_text(NATIVE_LANG_XML.format(filename=filename), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def native_lang_xml(write_native_lang: Callable[[str], Path]) -> Path:
    """nativeLang.xml selecting german."""
    return write_native_lang("german.xml")
