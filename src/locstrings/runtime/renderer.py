"""Placeholder substitution for translation templates.

Expands a raw template against an ordered list of replacement values.
Three passes run strictly in order, each on the output of the previous one:

    1. Line-break pass: ``<br/>`` -> ``\\r\\n``
    2. Numbered pass: ``$REPLACE_STRING{n}`` -> ``replacements[n - 1]``,
       for n from ``len(replacements)`` down to 1
    3. Bare pass: ``$REPLACE_STRING`` -> ``replacements[0]``, or ``""`` when
       no replacements are given. An occurrence followed by a template digit
       is an unresolved numbered token and is left alone; digits inserted by
       the numbered pass do not count.

Within a pass, scanning is left to right and resumes after each inserted
value, so inserted text is never rescanned for the token being replaced
(``str.replace`` semantics). Later passes do see text inserted by earlier
ones.

Numbered tokens whose index exceeds the replacement count are left in the
output verbatim.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Sequence
from dataclasses import dataclass

from locstrings.constants import LINE_BREAK, LINE_BREAK_MARKER, PLACEHOLDER

__all__ = ["DEFAULT_SYNTAX", "PlaceholderSyntax", "render"]

# Only ASCII indices are ever generated for numbered tokens
_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class PlaceholderSyntax:
    """Tokens recognized by render().

    Attributes:
        placeholder: Bare replacement token; numbered tokens append an index
        line_break_marker: Token replaced by ``line_break``
        line_break: Text inserted for each line-break marker

    Example:
        >>> syntax = PlaceholderSyntax(placeholder="%s", line_break="\\n")
        >>> render("a%s2<br/>b%s", ["x", "y"], syntax)
        'ay\\nbx'
    """

    placeholder: str = PLACEHOLDER
    line_break_marker: str = LINE_BREAK_MARKER
    line_break: str = LINE_BREAK

    def __post_init__(self) -> None:
        """Reject empty tokens.

        Raises:
            ValueError: If placeholder or line_break_marker is empty
        """
        if not self.placeholder:
            msg = "placeholder must not be empty"
            raise ValueError(msg)
        if not self.line_break_marker:
            msg = "line_break_marker must not be empty"
            raise ValueError(msg)

    def numbered(self, index: int) -> str:
        """Return the numbered token for a 1-based index."""
        return f"{self.placeholder}{index}"


DEFAULT_SYNTAX = PlaceholderSyntax()


@functools.lru_cache(maxsize=16)
def _token_pattern(placeholder: str) -> re.Pattern[str]:
    return re.compile(re.escape(placeholder))


def _replace_tracked(
    text: str, inserted: bytes, token: str, value: str
) -> tuple[str, bytes]:
    """str.replace that also maintains a per-character "inserted" mask.

    ``inserted[i]`` is nonzero when ``text[i]`` came from a replacement value
    rather than from the template.
    """
    pieces: list[str] = []
    masks: list[bytes] = []
    value_mask = b"\x01" * len(value)
    start = 0
    pos = text.find(token)
    while pos != -1:
        pieces += (text[start:pos], value)
        masks += (inserted[start:pos], value_mask)
        start = pos + len(token)
        pos = text.find(token, start)
    pieces.append(text[start:])
    masks.append(inserted[start:])
    return "".join(pieces), b"".join(masks)


def render(
    template: str,
    replacements: Sequence[str] = (),
    syntax: PlaceholderSyntax = DEFAULT_SYNTAX,
) -> str:
    """Render a template against ordered replacement values.

    Pure and deterministic. A template without tokens is returned unchanged.

    Args:
        template: Raw template text
        replacements: Ordered replacement values. Index 0 fills both the bare
            placeholder and numbered placeholder 1.
        syntax: Token set (default: ``$REPLACE_STRING`` and ``<br/>``)

    Returns:
        Rendered text

    Example:
        >>> render("Found $REPLACE_STRING1 of $REPLACE_STRING2", ["3", "7"])
        'Found 3 of 7'
        >>> render("Line 1<br/>Line 2")
        'Line 1\\r\\nLine 2'
        >>> render("$REPLACE_STRING$REPLACE_STRING1", ["5"])
        '55'
    """
    result = template.replace(syntax.line_break_marker, syntax.line_break)
    if syntax.placeholder not in result:
        return result

    inserted = bytes(len(result))

    # Highest index first: "$REPLACE_STRING1" is a prefix of "$REPLACE_STRING10".
    for index in range(len(replacements), 0, -1):
        token = syntax.numbered(index)
        if token in result:
            result, inserted = _replace_tracked(
                result, inserted, token, replacements[index - 1]
            )

    if syntax.placeholder not in result:
        return result

    value = replacements[0] if replacements else ""

    def _substitute(match: re.Match[str]) -> str:
        # A template digit right after the token marks an unresolved numbered
        # token; digits inserted by the numbered pass do not.
        end = match.end()
        if end < len(result) and result[end] in _ASCII_DIGITS and not inserted[end]:
            return match.group(0)
        return value

    return _token_pattern(syntax.placeholder).sub(_substitute, result)
