"""Hypothesis property-based tests for render().

Python 3.13+.
"""

import re

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from locstrings.runtime.renderer import render
from tests.strategies import (
    plain_text,
    replacement_lists,
    token_free_values,
    token_rich_templates,
)


class TestRendererProperties:
    """Universal properties of render()."""

    @given(template=plain_text, replacements=replacement_lists)
    def test_token_free_template_unchanged(self, template: str, replacements: list[str]) -> None:
        """Templates without tokens are returned unchanged."""
        event(f"replacement_count={len(replacements)}")
        assert render(template, replacements) == template

    @given(template=st.text(max_size=60), replacements=replacement_lists)
    def test_deterministic(self, template: str, replacements: list[str]) -> None:
        """Same inputs always give the same output."""
        assert render(template, replacements) == render(template, replacements)

    @given(prefix=plain_text, suffix=plain_text, value=st.text(max_size=20))
    def test_bare_token_takes_first_value(self, prefix: str, suffix: str, value: str) -> None:
        """A single bare token is replaced by replacements[0]."""
        assert render(f"{prefix}$REPLACE_STRING{suffix}", [value]) == prefix + value + suffix

    @given(prefix=plain_text, suffix=plain_text)
    def test_bare_token_without_values_removed(self, prefix: str, suffix: str) -> None:
        """Without replacements the bare token disappears."""
        assert render(f"{prefix}$REPLACE_STRING{suffix}", []) == prefix + suffix

    @given(
        replacements=st.lists(st.text(alphabet="abc", max_size=5), min_size=1, max_size=15),
        data=st.data(),
    )
    def test_numbered_token_takes_its_value(self, replacements: list[str], data: st.DataObject) -> None:
        """$REPLACE_STRING{n} resolves to replacements[n - 1] for every valid n."""
        index = data.draw(st.integers(min_value=1, max_value=len(replacements)))
        event(f"index_digits={len(str(index))}")
        assert render(f"[$REPLACE_STRING{index}]", replacements) == f"[{replacements[index - 1]}]"

    @given(parts=st.lists(plain_text, min_size=1, max_size=6))
    def test_every_line_break_marker_replaced(self, parts: list[str]) -> None:
        """Joining with <br/> renders as joining with CRLF."""
        assert render("<br/>".join(parts), []) == "\r\n".join(parts)


@pytest.mark.fuzz
class TestRendererTokenRichFuzz:
    """Token-dense templates against token-free replacement values."""

    @given(
        template=token_rich_templates(),
        replacements=st.lists(token_free_values.filter(bool), min_size=9, max_size=14),
    )
    @settings(max_examples=2000)
    def test_only_index_zero_tokens_survive(
        self, template: str, replacements: list[str]
    ) -> None:
        """PROPERTY: With nine non-empty values only tokens followed by 0 survive."""
        result = render(template, replacements)

        assert "<br/>" not in result
        survivors = [m.end() for m in re.finditer(re.escape("$REPLACE_STRING"), result)]
        event(f"survivors={len(survivors)}")
        for end in survivors:
            assert result[end : end + 1] == "0"

    @given(template=token_rich_templates(), replacements=st.lists(token_free_values, max_size=14))
    @settings(max_examples=2000)
    def test_placeholder_survivors_come_from_template(
        self, template: str, replacements: list[str]
    ) -> None:
        """PROPERTY: Output never holds more placeholders than the template."""
        result = render(template, replacements)

        assert result.count("$REPLACE_STRING") <= template.count("$REPLACE_STRING")
        if not replacements:
            assert len(result) <= len(template.replace("<br/>", "\r\n"))
