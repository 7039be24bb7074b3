"""Shared type definitions for the wikitext grammar.

This module contains the value types produced by the parser rules:
links recorded in the accumulator, template data, the list-node variants,
and the failure types surfaced at the entry points.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

TemplateData: TypeAlias = dict[str, str]
"""Ordered mapping from template argument key to argument value."""


@dataclass(frozen=True, slots=True)
class Link:
    """Represents a single internal link target.

    Attributes:
        namespace: Namespace prefix, empty for the main namespace.
        page: Target page title.
        section: Anchor within the target page, empty if none.
    """

    namespace: str
    page: str
    section: str = ""

    @classmethod
    def from_target(cls, target: str) -> Link:
        """Split a raw link target into namespace, page and section.

        The namespace is everything before the last ``:``; the remaining
        local part is split on its first ``#``.

        Examples:
            >>> Link.from_target("w:en:Word")
            Link(namespace='w:en', page='Word', section='')
            >>> Link.from_target("word#English")
            Link(namespace='', page='word', section='English')
        """
        namespace, _, local = target.rpartition(":")
        page, _, section = local.partition("#")
        return cls(namespace=namespace, page=page, section=section)


Links: TypeAlias = tuple[Link, ...]
"""Link accumulator contents, most recent match first."""


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class LinkChain:
    """One cell of the link accumulator.

    Recording a link allocates a new cell pointing at the previous chain,
    so every state shares the links recorded before it.

    Attributes:
        link: The most recently recorded link.
        rest: The chain as it was before ``link`` was recorded.
    """

    link: Link
    rest: LinkChain | None = None

    def __iter__(self) -> Iterator[Link]:
        node: LinkChain | None = self
        while node is not None:
            yield node.link
            node = node.rest

    def __repr__(self) -> str:
        return f"LinkChain({tuple(self)!r})"


Accumulator: TypeAlias = LinkChain | None
"""Link accumulator carried by the parser state; None when empty."""


# List nodes. Each case is its own frozen dataclass; ListNode is the union.


@dataclass(frozen=True, slots=True)
class Item:
    """Leaf list entry."""

    text: str


@dataclass(frozen=True, slots=True)
class ListHeading:
    """Leaf entry introduced by a ``;`` marker."""

    text: str


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[ListNode, ...]


@dataclass(frozen=True, slots=True)
class OrderedList:
    items: tuple[ListNode, ...]


@dataclass(frozen=True, slots=True)
class IndentedList:
    items: tuple[ListNode, ...]


ListNode: TypeAlias = Item | ListHeading | BulletList | OrderedList | IndentedList


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Structured failure returned by ``run``.

    Attributes:
        position: Offset into the input where parsing stopped.
        message: Human-readable description of what was expected.
    """

    position: int
    message: str


class WikiParseError(Exception):
    """Raised when wikitext does not match the requested rule."""

    def __init__(self, source: str, position: int, expected: str) -> None:
        self.position = position
        self.expected = expected
        self.line = source.count("\n", 0, position) + 1
        self.column = position - (source.rfind("\n", 0, position) + 1) + 1
        super().__init__(f"line {self.line}, column {self.column}: expected {expected}")
