"""List and heading rules.

A list marker is the run of ``*``, ``#``, ``:`` and ``;`` characters at the
start of a line; each character adds one level of nesting. Lines whose
marker extends the current one form a nested list:

    * fruit             BulletList([
    *# apple                Item("fruit"),
    *# pear                 OrderedList([Item("apple"), Item("pear")]),
    * vegetable             Item("vegetable"),
                        ])

Headings are delimited by equal runs of ``=`` and end at a newline.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from wikiparsec.parsers.inline import line_text
from wikiparsec.parsers.links import external_link, internal_link
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    Rule,
    State,
    furthest,
    ignored_span,
    literal,
    lookahead,
    many1,
    one_of,
    priority_choice,
    spaces,
)
from wikiparsec.parsers.template import ignored_template
from wikiparsec.parsers.text import (
    basic_text,
    end_of_line,
    heading_symbol,
    loose_bracket,
    newline,
)
from wikiparsec.parsers.types import (
    BulletList,
    IndentedList,
    Item,
    ListHeading,
    ListNode,
    OrderedList,
)

# Sublists are tried in this order
MARKER_KINDS: Final[str] = "*#:;"

_CONTAINERS: Final = {
    "*": BulletList,
    "#": OrderedList,
    ":": IndentedList,
    ";": IndentedList,
}

MAX_HEADING_LEVEL: Final[int] = 6


@lru_cache(maxsize=None)
def list_items(marker: str) -> Rule[ListNode]:
    """Build a rule reading every consecutive item under ``marker``.

    The items are wrapped in the container for the marker's last character.
    """
    marker_ahead = lookahead(literal(marker))
    container = _CONTAINERS[marker[-1]]

    def rule(state: State) -> Ok[ListNode] | Fail:
        ahead = marker_ahead(state)
        if isinstance(ahead, Fail):
            return ahead
        items = many1(list_item(marker))(state)
        if isinstance(items, Fail):
            return items
        return Ok(container(tuple(items.value)), items.state)

    return rule


@lru_cache(maxsize=None)
def list_item(marker: str) -> Rule[ListNode]:
    """Build a rule reading one deeper sublist, or one line under ``marker``."""
    marker_literal = literal(marker)
    leaf_type = ListHeading if marker.endswith(";") else Item

    def rule(state: State) -> Ok[ListNode] | Fail:
        failures: list[Fail] = []
        for kind in MARKER_KINDS:
            sublist = list_items(marker + kind)(state)
            if isinstance(sublist, Ok):
                return sublist
            failures.append(sublist)

        opened = marker_literal(state)
        if isinstance(opened, Fail):
            return furthest([*failures, opened])
        text = line_text(spaces(opened.state).state)
        ended = end_of_line(text.state)
        if isinstance(ended, Fail):
            return ended
        return Ok(leaf_type(text.value), ended.state)

    return rule


any_list = one_of(*(list_items(kind) for kind in MARKER_KINDS))


_heading_text = priority_choice(
    [
        ignored_span,
        internal_link,
        external_link,
        ignored_template,
        loose_bracket,
        basic_text,
        heading_symbol,
    ]
)


@lru_cache(maxsize=None)
def heading(level: int) -> Rule[str]:
    """Build a rule for a level-``level`` heading such as ``== Title ==``.

    The closing delimiter must match the opening one and be followed by a
    newline. The result is the title text, stripped of surrounding spaces.
    """
    delimiter = literal("=" * level)

    def rule(state: State) -> Ok[str] | Fail:
        opened = delimiter(state)
        if isinstance(opened, Fail):
            return opened
        title = _heading_text(spaces(opened.state).state)
        closed = delimiter(spaces(title.state).state)
        if isinstance(closed, Fail):
            return closed
        ended = newline(spaces(closed.state).state)
        if isinstance(ended, Fail):
            return ended
        return Ok(title.value.strip(), ended.state)

    return rule


def any_heading(state: State) -> Ok[tuple[int, str]] | Fail:
    """Parse a heading of any level, returning ``(level, title)``."""
    failures: list[Fail] = []
    for level in range(MAX_HEADING_LEVEL, 0, -1):
        result = heading(level)(state)
        if isinstance(result, Ok):
            return Ok((level, result.value), result.state)
        failures.append(result)
    return furthest(failures)
