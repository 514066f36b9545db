"""Tests for detect_language."""

from collections.abc import Callable
from pathlib import Path

import pytest

from locstrings.localization.detection import detect_language


class TestDetectLanguage:
    """nativeLang.xml scanning."""

    def test_detects_filename(self, native_lang_xml: Path) -> None:
        """The filename attribute without .xml is the language."""
        assert detect_language(native_lang_xml) == "german"

    @pytest.mark.parametrize(
        "filename", ["chineseSimplified.xml", "brazilian_portuguese.xml", "spanish_ar.xml"]
    )
    def test_various_names(
        self, write_native_lang: Callable[[str], Path], filename: str
    ) -> None:
        """Names with case and underscores are returned verbatim."""
        path = write_native_lang(filename)

        assert detect_language(path) == filename.removesuffix(".xml")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing file yields the default."""
        assert detect_language(tmp_path / "absent.xml") == "english"

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        """Unreadable path yields the default."""
        assert detect_language(tmp_path) == "english"

    def test_no_tag(self, tmp_path: Path) -> None:
        """File without the tag yields the default."""
        path = tmp_path / "nativeLang.xml"
        path.write_text("<NotepadPlus>\n</NotepadPlus>\n", encoding="utf-8")

        assert detect_language(path) == "english"

    def test_empty_filename(self, write_native_lang: Callable[[str], Path]) -> None:
        """Empty filename attribute yields the default."""
        path = write_native_lang(".xml")

        assert detect_language(path) == "english"

    def test_binary_garbage(self, tmp_path: Path) -> None:
        """Undecodable content does not raise."""
        path = tmp_path / "nativeLang.xml"
        path.write_bytes(b"\xff\xfe\x00garbage\x80\x81\n")

        assert detect_language(path) == "english"

    def test_custom_default(self, tmp_path: Path) -> None:
        """Caller-supplied default is used on failure."""
        assert detect_language(tmp_path / "absent.xml", default="german") == "german"

    def test_first_tag_wins(self, tmp_path: Path) -> None:
        """Scanning stops at the first matching line."""
        path = tmp_path / "nativeLang.xml"
        path.write_text(
            '<Native-Langue name="A" filename="french.xml">\n'
            '<Native-Langue name="B" filename="german.xml">\n',
            encoding="utf-8",
        )

        assert detect_language(path) == "french"
