"""Text annotated with the links it was built from.

An AnnotatedText pairs a string with an ordered sequence of Link records.
Concatenation joins the texts and appends the annotations, with the empty
AnnotatedText as identity. A plain ``str`` can stand in for an
AnnotatedText with no annotations:

    >>> annotate([Link("", "cat")], "cat") + " food"
    AnnotatedText(text='cat food', annotations=(Link(namespace='', page='cat', section=''),))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from functools import reduce
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wikiparsec.parsers.types import Link


@dataclass(frozen=True)
class AnnotatedText:
    """Immutable text with link annotations.

    Attributes:
        text: The plain text.
        annotations: Links in insertion order; duplicates are kept.
    """

    text: str = ""
    annotations: tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.annotations, tuple):
            object.__setattr__(self, "annotations", tuple(self.annotations))

    def __add__(self, other: AnnotatedText | str) -> AnnotatedText:
        other = _coerce(other)
        return AnnotatedText(self.text + other.text, self.annotations + other.annotations)

    def __radd__(self, other: str) -> AnnotatedText:
        return _coerce(other) + self

    def map_text(self, func: Callable[[str], str]) -> AnnotatedText:
        return replace(self, text=func(self.text))


EMPTY = AnnotatedText()


def _coerce(value: AnnotatedText | str) -> AnnotatedText:
    if isinstance(value, AnnotatedText):
        return value
    if isinstance(value, str):
        return AnnotatedText(value)
    raise TypeError(f"Cannot combine AnnotatedText with {type(value).__name__}")


def from_text(text: str) -> AnnotatedText:
    return AnnotatedText(text)


def annotate(annotations: Iterable[Link], text: str) -> AnnotatedText:
    return AnnotatedText(text, tuple(annotations))


def concat(items: Iterable[AnnotatedText | str]) -> AnnotatedText:
    """Concatenate annotated texts left to right; empty input gives EMPTY."""
    return reduce(lambda left, right: left + right, items, EMPTY)


def join(items: Iterable[AnnotatedText | str]) -> AnnotatedText:
    """Concatenate items, ending each one (the last included) with a newline."""
    return concat(_coerce(item) + "\n" for item in items)


def map_text(func: Callable[[str], str], value: AnnotatedText) -> AnnotatedText:
    """Apply ``func`` to the text only, keeping the annotations."""
    return value.map_text(func)


def get_text(value: AnnotatedText) -> str:
    return value.text


def get_annotations(value: AnnotatedText) -> tuple[Link, ...]:
    return value.annotations
