"""Entry points that run a grammar rule against a complete input string.

Each run starts from a fresh link accumulator and requires the rule to
consume the whole input.

Example usage::

    from wikiparsec.parsers import block_text, extract_links, run

    run(block_text, "A [[word|term]] in text")
    # 'A term in text'

    [link.page for link in extract_links("See [[cat]] and [[dog]].")]
    # ['dog', 'cat']
"""

from __future__ import annotations

import logging
from typing import TypeVar

from wikiparsec.annotated_text import AnnotatedText
from wikiparsec.parsers.inline import block_text
from wikiparsec.parsers.lists import any_heading, any_list, heading
from wikiparsec.parsers.primitives import Fail, Ok, Rule, State
from wikiparsec.parsers.state import collected_links, links_of, new_accumulator
from wikiparsec.parsers.template import template
from wikiparsec.parsers.types import (
    Links,
    ListNode,
    ParseFailure,
    TemplateData,
    WikiParseError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_complete(rule: Rule[T], text: str) -> Ok[T] | Fail:
    """Run ``rule`` and require it to consume all of ``text``.

    When input is left over, a failure recorded by the rule beyond the
    stopping point explains it better than "end of input" does.
    """
    result = rule(State(text, 0, new_accumulator()))
    if isinstance(result, Fail) or result.state.at_end():
        return result
    stopped = result.failure
    if stopped is not None and stopped.pos > result.state.pos:
        return stopped
    return Fail(result.state.pos, "end of input")


def run(rule: Rule[T], text: str) -> T | ParseFailure:
    """Run ``rule`` over ``text`` from a fresh accumulator.

    Args:
        rule: Any grammar rule.
        text: Complete wikitext input.

    Returns:
        The rule's value, or a ParseFailure if the rule failed or left
        input unconsumed. The accumulator is discarded unless the rule's
        own value is the accumulator.
    """
    result = _run_complete(rule, text)
    if isinstance(result, Fail):
        logger.debug(f"Parse failed at offset {result.pos}: expected {result.expected}")
        return ParseFailure(result.pos, f"expected {result.expected}")
    return result.value


def parse(rule: Rule[T], text: str) -> T:
    """Like ``run``, but raise WikiParseError instead of returning a failure."""
    result = _run_complete(rule, text)
    if isinstance(result, Fail):
        raise WikiParseError(text, result.pos, result.expected)
    return result.value


def links_after(rule: Rule[object]) -> Rule[Links]:
    """Run ``rule`` and produce the accumulator instead of its value."""

    def collect(state: State) -> Ok[Links] | Fail:
        result = rule(state)
        if isinstance(result, Fail):
            return result
        collected = collected_links(result.state)
        return Ok(collected.value, collected.state, result.failure)

    return collect


def extract_links(text: str) -> Links:
    """Return every internal link in ``text``, most recent first.

    Raises:
        WikiParseError: If the text cannot be parsed as running text.
    """
    links = parse(links_after(block_text), text)
    logger.debug(f"Extracted {len(links)} links")
    return links


def parse_annotated(text: str) -> AnnotatedText:
    """Parse running text into its plain text annotated with its links.

    Annotations are in source order.
    """
    result = _run_complete(block_text, text)
    if isinstance(result, Fail):
        raise WikiParseError(text, result.pos, result.expected)
    return AnnotatedText(result.value, tuple(reversed(links_of(result.state.links))))


def parse_text(text: str) -> str:
    return parse(block_text, text)


def parse_template(text: str) -> TemplateData:
    return parse(template, text)


def parse_list(text: str) -> ListNode:
    return parse(any_list, text)


def parse_heading(text: str, level: int | None = None) -> str:
    """Return the title of a single heading line.

    Args:
        text: The heading, including its trailing newline.
        level: Required heading level; any level is accepted when None.
    """
    if level is not None:
        return parse(heading(level), text)
    _, title = parse(any_heading, text)
    return title
