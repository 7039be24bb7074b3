"""Running text: a single line, or a block spanning several lines.

Both rules try, at every step and in this order: comments and tags, internal
links, external links, templates (discarded), loose brackets, ordinary text,
then stray punctuation. ``block_text`` also accepts newlines as text.
"""

from __future__ import annotations

from wikiparsec.parsers.links import external_link, internal_link
from wikiparsec.parsers.primitives import ignored_span, priority_choice
from wikiparsec.parsers.template import ignored_template
from wikiparsec.parsers.text import basic_text, loose_bracket, newline, stray_symbol

_INLINE_RULES = [
    ignored_span,
    internal_link,
    external_link,
    ignored_template,
    loose_bracket,
    basic_text,
    stray_symbol,
]

line_text = priority_choice(_INLINE_RULES)

block_text = priority_choice([*_INLINE_RULES, newline])
