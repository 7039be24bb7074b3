"""Link accumulator threaded through a parse run.

The accumulator is a chain of ``LinkChain`` cells, newest first, with None
as the empty chain. It is carried inside the immutable parser ``State``, so
rules that abandon an alternative also abandon any links recorded on the
way. Recording shares the existing chain instead of copying it; callers
outside the grammar see the contents as a tuple via ``links_of``.
"""

from __future__ import annotations

from wikiparsec.parsers.primitives import Ok, State
from wikiparsec.parsers.types import Accumulator, Link, LinkChain, Links


def new_accumulator() -> Accumulator:
    return None


def reset(links: Accumulator) -> Accumulator:
    """Drop every entry of ``links``."""
    return None


def record(link: Link, links: Accumulator) -> LinkChain:
    """Prepend ``link`` to the accumulator."""
    return LinkChain(link, links)


def links_of(links: Accumulator) -> Links:
    """Return the accumulator's links as a tuple, most recent first."""
    if links is None:
        return ()
    return tuple(links)


def clear_links(state: State) -> Ok[None]:
    """Rule that empties the accumulator without consuming input."""
    return Ok(None, state.with_links(reset(state.links)))


def collected_links(state: State) -> Ok[Links]:
    """Rule whose result is the accumulator's contents."""
    return Ok(links_of(state.links), state)
