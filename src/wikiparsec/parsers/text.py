"""Plain-text rules: ordinary characters, loose brackets and line ends."""

from __future__ import annotations

from typing import Final

from wikiparsec.parsers.links import external_link, internal_link
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    State,
    char_run,
    literal,
    map_value,
    one_char,
)

BASIC_TEXT_EXCLUDED: Final[str] = "[]{}|<>:=\n"
BRACKETS: Final[str] = "[]{}"

# Markup characters that are plain text when nothing else claims them
STRAY_SYMBOLS: Final[str] = ":=|<>"


def strip_emphasis(text: str) -> str:
    """Remove bold and italic apostrophe markup.

    Pairs are removed before triples, so a ``'''`` run loses its first two
    apostrophes and keeps the third.

    Examples:
        >>> strip_emphasis("''italic''")
        'italic'
        >>> strip_emphasis("'''bold'''")
        "'bold'"
    """
    return text.replace("''", "").replace("'''", "")


basic_text = map_value(char_run(BASIC_TEXT_EXCLUDED, "text"), strip_emphasis)


def loose_bracket(state: State) -> Ok[str] | Fail:
    """Match a single bracket that does not open a link or template.

    A bracket followed by the same bracket is refused, which also covers
    every ``[[`` and ``{{`` that could open a link or template.
    """
    bracket = state.peek()
    if not bracket or bracket not in BRACKETS:
        return Fail(state.pos, "bracket")
    if state.peek(2) == bracket * 2:
        return Fail(state.pos, "single bracket")
    if isinstance(internal_link(state), Ok) or isinstance(external_link(state), Ok):
        return Fail(state.pos, "single bracket")
    return Ok(bracket, state.advance(1))


stray_symbol = one_char(STRAY_SYMBOLS, "punctuation")
heading_symbol = one_char(STRAY_SYMBOLS.replace("=", ""), "punctuation")
newline = literal("\n")


def end_of_line(state: State) -> Ok[str] | Fail:
    """Consume one newline, or succeed without consuming at end of input."""
    if state.at_end():
        return Ok("", state)
    result = newline(state)
    if isinstance(result, Fail):
        return Fail(state.pos, "end of line")
    return result
