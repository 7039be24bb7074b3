"""Template rules for MediaWiki markup.

A template invocation ``{{name|positional|key=value}}`` parses to an ordered
mapping. Positional arguments are keyed by the decimal string of their
position, counting the template name as position 0:

    {{t|ja|例え|tr=x}}  ->  {"0": "t", "1": "ja", "2": "例え", "tr": "x"}

When a key occurs twice, the earlier occurrence wins.
"""

from __future__ import annotations

import re
from typing import Final

from wikiparsec.parsers.links import external_link, internal_link
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    Rule,
    State,
    char_run,
    furthest,
    ignored_span,
    literal,
    map_value,
    one_char,
    one_of,
    pattern,
    priority_choice,
)
from wikiparsec.parsers.text import loose_bracket
from wikiparsec.parsers.types import TemplateData

TEMPLATE_KEY_EXCLUDED: Final[str] = "|=[]{}<>"
TEMPLATE_VALUE_EXCLUDED: Final[str] = "|[]{}<"

_open = literal("{{")
_close = literal("}}")
_pipe = literal("|")
_equals = literal("=")
_key = char_run(TEMPLATE_KEY_EXCLUDED, "argument name")

# Nested templates are not recognized inside a value: their braces are
# refused by loose_bracket and the enclosing template fails.
template_value = priority_choice(
    [
        ignored_span,
        internal_link,
        external_link,
        loose_bracket,
        char_run(TEMPLATE_VALUE_EXCLUDED, "argument text"),
        one_char("<", "punctuation"),
    ]
)


def _named_key(state: State) -> Ok[str] | Fail:
    key = _key(state)
    if isinstance(key, Fail):
        return key
    equals = _equals(key.state)
    if isinstance(equals, Fail):
        return equals
    return Ok(key.value, equals.state)


def _template_args(state: State, offset: int) -> Ok[TemplateData] | Fail:
    """Parse ``|``-separated arguments up to and including the closing ``}}``.

    Args:
        state: Position of the first argument.
        offset: Position number given to the first positional argument.
    """
    pairs: list[tuple[str, str]] = []
    while True:
        named = _named_key(state)
        if isinstance(named, Ok):
            key = named.value
            value = template_value(named.state)
        else:
            key = str(offset)
            value = template_value(state)
            offset += 1
        pairs.append((key, value.value))
        state = value.state

        separator = _pipe(state)
        if isinstance(separator, Ok):
            state = separator.state
            continue
        closed = _close(state)
        if isinstance(closed, Fail):
            return furthest([separator, closed])
        break

    data: TemplateData = {}
    for key, argument in pairs:
        data.setdefault(key, argument)
    return Ok(data, closed.state)


def template(state: State) -> Ok[TemplateData] | Fail:
    """Parse ``{{...}}`` into its argument mapping, the name under key "0"."""
    opened = _open(state)
    if isinstance(opened, Fail):
        return opened
    return _template_args(opened.state, 0)


ignored_template = map_value(template, lambda _: "")

# Whitespace, newlines included, may separate a known name from its arguments
_name_padding = pattern(re.compile(r"\s*"), "whitespace")
_after_name = one_of(_pipe, _close)


def known_template(name: str) -> Rule[TemplateData]:
    """Build a rule matching only templates called ``name``.

    The name may be followed by whitespace or a newline before the first
    ``|``; key "0" always holds ``name`` itself.

    Examples:
        >>> from wikiparsec.parsers.entry import run
        >>> run(known_template("l"), "{{l|en|word}}")
        {'0': 'l', '1': 'en', '2': 'word'}
    """
    name_literal = literal(name)

    def rule(state: State) -> Ok[TemplateData] | Fail:
        opened = _open(state)
        if isinstance(opened, Fail):
            return opened
        named = name_literal(opened.state)
        if isinstance(named, Fail):
            return named
        after = _after_name(_name_padding(named.state).state)
        if isinstance(after, Fail):
            return after

        data: TemplateData = {"0": name}
        if after.value == "}}":
            return Ok(data, after.state)
        rest = _template_args(after.state, 1)
        if isinstance(rest, Fail):
            return rest
        for key, argument in rest.value.items():
            data.setdefault(key, argument)
        return Ok(data, rest.state)

    return rule
