"""Backtracking combinator primitives.

A rule is a plain callable taking a ``State`` and returning either ``Ok``
(a value plus the successor state) or ``Fail`` (a position plus what was
expected). States are immutable, and the link accumulator lives inside the
state, so a failed alternative never has anything to undo: the caller just
keeps using the state it tried the alternative from.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, Final, Generic, TypeAlias, TypeVar

from wikiparsec.parsers.types import Accumulator

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class State:
    """Input position and link accumulator for one parse run.

    Attributes:
        source: The complete input text.
        pos: Offset of the next unconsumed character.
        links: Link accumulator, most recent match first.
    """

    source: str
    pos: int = 0
    links: Accumulator = None

    def advance(self, count: int) -> State:
        return replace(self, pos=self.pos + count)

    def with_links(self, links: Accumulator) -> State:
        return replace(self, links=links)

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, count: int = 1) -> str:
        return self.source[self.pos : self.pos + count]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful match.

    Attributes:
        value: The value the rule produced.
        state: State after the match.
        failure: For repeating rules, why the last attempt to go further
            failed. Used to explain leftover input.
    """

    value: T
    state: State
    failure: Fail | None = None


@dataclass(frozen=True)
class Fail:
    pos: int
    expected: str


Rule: TypeAlias = Callable[[State], Ok[T] | Fail]


def furthest(failures: Iterable[Fail]) -> Fail:
    """Merge alternative failures, keeping the ones that got furthest.

    Examples:
        >>> furthest([Fail(3, "'}}'"), Fail(3, "'|'"), Fail(1, "text")])
        Fail(pos=3, expected="'}}' or '|'")
    """
    failures = list(failures)
    best = max(failure.pos for failure in failures)
    expected: list[str] = []
    for failure in failures:
        if failure.pos == best and failure.expected not in expected:
            expected.append(failure.expected)
    return Fail(best, " or ".join(expected))


def literal(text: str) -> Rule[str]:
    """Match ``text`` exactly, consuming nothing unless the whole literal matches."""

    def rule(state: State) -> Ok[str] | Fail:
        if state.source.startswith(text, state.pos):
            return Ok(text, state.advance(len(text)))
        return Fail(state.pos, repr(text))

    return rule


def pattern(regex: re.Pattern[str], expected: str) -> Rule[str]:
    """Match a compiled regular expression anchored at the current position."""

    def rule(state: State) -> Ok[str] | Fail:
        match = regex.match(state.source, state.pos)
        if match is None:
            return Fail(state.pos, expected)
        return Ok(match.group(0), state.advance(match.end() - match.start()))

    return rule


def char_run(excluded: str, expected: str) -> Rule[str]:
    """Match one or more characters not in ``excluded``."""
    return pattern(re.compile(f"[^{re.escape(excluded)}]+"), expected)


def one_char(allowed: str, expected: str) -> Rule[str]:
    """Match a single character from ``allowed``."""
    return pattern(re.compile(f"[{re.escape(allowed)}]"), expected)


def map_value(rule: Rule[T], func: Callable[[T], U]) -> Rule[U]:
    def mapped(state: State) -> Ok[U] | Fail:
        result = rule(state)
        if isinstance(result, Fail):
            return result
        return Ok(func(result.value), result.state, result.failure)

    return mapped


def one_of(*rules: Rule[Any]) -> Rule[Any]:
    """Return the result of the first alternative that succeeds."""

    def rule(state: State) -> Ok[Any] | Fail:
        failures: list[Fail] = []
        for candidate in rules:
            result = candidate(state)
            if isinstance(result, Ok):
                return result
            failures.append(result)
        return furthest(failures)

    return rule


def optional(rule: Rule[T], default: T) -> Rule[T]:
    def attempt(state: State) -> Ok[T] | Fail:
        result = rule(state)
        if isinstance(result, Fail):
            return Ok(default, state)
        return result

    return attempt


def lookahead(rule: Rule[T]) -> Rule[T]:
    """Succeed with ``rule``'s value without consuming input or recording links."""

    def peek(state: State) -> Ok[T] | Fail:
        result = rule(state)
        if isinstance(result, Fail):
            return result
        return Ok(result.value, state)

    return peek


def not_followed_by(rule: Rule[Any], expected: str) -> Rule[None]:
    def negated(state: State) -> Ok[None] | Fail:
        if isinstance(rule(state), Ok):
            return Fail(state.pos, expected)
        return Ok(None, state)

    return negated


def many1(rule: Rule[T]) -> Rule[list[T]]:
    """Match ``rule`` one or more times, stopping at a failure or an empty match."""

    def repeated(state: State) -> Ok[list[T]] | Fail:
        first = rule(state)
        if isinstance(first, Fail):
            return first
        values = [first.value]
        state = first.state
        while True:
            result = rule(state)
            if isinstance(result, Fail) or result.state.pos == state.pos:
                return Ok(values, state)
            values.append(result.value)
            state = result.state

    return repeated


def priority_choice(rules: Iterable[Rule[str]]) -> Rule[str]:
    """Repeatedly apply the first matching rule, concatenating the outputs.

    Zero repetitions is a success with the empty string, so this rule never
    fails. A rule that succeeds without consuming input counts as no match.
    The furthest failure of the final round is kept on the result.
    """
    candidates = tuple(rules)

    def rule(state: State) -> Ok[str]:
        parts: list[str] = []
        while True:
            failures: list[Fail] = []
            for candidate in candidates:
                result = candidate(state)
                if isinstance(result, Fail):
                    failures.append(result)
                elif result.state.pos > state.pos:
                    parts.append(result.value)
                    state = result.state
                    break
            else:
                stopped = furthest(failures) if failures else None
                return Ok("".join(parts), state, stopped)

    return rule


# Zero or more spaces or tabs, never a newline
spaces = pattern(re.compile(r"[ \t]*"), "whitespace")


IGNORED_SPAN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:<!--.*?-->|<[^>]*>)+",
    re.DOTALL,
)


_ignored_markup = pattern(IGNORED_SPAN_PATTERN, "comment or tag")


def ignored_span(state: State) -> Ok[str] | Fail:
    """Skip one or more HTML comments or tags, yielding the empty string."""
    result = _ignored_markup(state)
    if isinstance(result, Fail):
        return result
    return Ok("", result.state)
