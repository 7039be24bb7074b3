"""wikiparsec - parse Wiktionary wikitext into text, links and structure."""

from wikiparsec.annotated_text import AnnotatedText
from wikiparsec.parsers import (
    Link,
    WikiParseError,
    extract_links,
    parse_annotated,
    parse_list,
    parse_template,
    parse_text,
    run,
)

__all__ = [
    "AnnotatedText",
    "Link",
    "WikiParseError",
    "extract_links",
    "parse_annotated",
    "parse_list",
    "parse_template",
    "parse_text",
    "run",
]
