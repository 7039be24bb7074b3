"""Grammar rules for MediaWiki (Wiktionary) markup.

This package turns raw wikitext into plain text while collecting the
internal links it passes, and parses templates, nested lists and headings
into structured values:

- **Primitives**: literal matching, priority choice, comment/tag skipping
- **Text and links**: basic text, loose brackets, [[internal]] and [external] links
- **Templates**: {{name|positional|key=value}} argument mappings
- **Lists and headings**: nested * # : ; lists, == Heading == titles

Example usage::

    from wikiparsec.parsers import extract_links, parse_template

    parse_template("{{t|ja|例え|tr=x}}")
    # {'0': 't', '1': 'ja', '2': '例え', 'tr': 'x'}

Public API:
    Types:
        - Link: Namespace/page/section of an internal link
        - LinkChain: Shared, newest-first cells of the link accumulator
        - Item, ListHeading, BulletList, OrderedList, IndentedList: List nodes
        - ParseFailure: Failure value returned by run
        - WikiParseError: Exception raised by parse and the parse_* helpers

    Rules:
        - line_text, block_text, internal_link, external_link, template,
          ignored_template, known_template, list_items, any_list, heading

    Functions:
        - run: Run a rule, returning its value or a ParseFailure
        - parse: Run a rule, raising WikiParseError on failure
        - extract_links: Collect the internal links of running text
        - parse_annotated: Plain text annotated with its links
"""

from wikiparsec.parsers.entry import (
    extract_links,
    links_after,
    parse,
    parse_annotated,
    parse_heading,
    parse_list,
    parse_template,
    parse_text,
    run,
)
from wikiparsec.parsers.inline import block_text, line_text
from wikiparsec.parsers.links import external_link, internal_link
from wikiparsec.parsers.lists import any_heading, any_list, heading, list_item, list_items
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    Rule,
    State,
    ignored_span,
    literal,
    priority_choice,
)
from wikiparsec.parsers.state import (
    clear_links,
    collected_links,
    links_of,
    new_accumulator,
    record,
    reset,
)
from wikiparsec.parsers.template import ignored_template, known_template, template
from wikiparsec.parsers.text import basic_text, end_of_line, loose_bracket
from wikiparsec.parsers.types import (
    Accumulator,
    BulletList,
    IndentedList,
    Item,
    Link,
    LinkChain,
    Links,
    ListHeading,
    ListNode,
    OrderedList,
    ParseFailure,
    TemplateData,
    WikiParseError,
)

__all__ = [
    "Accumulator",
    "BulletList",
    "Fail",
    "IndentedList",
    "Item",
    "Link",
    "LinkChain",
    "Links",
    "ListHeading",
    "ListNode",
    "Ok",
    "OrderedList",
    "ParseFailure",
    "Rule",
    "State",
    "TemplateData",
    "WikiParseError",
    "any_heading",
    "any_list",
    "basic_text",
    "block_text",
    "clear_links",
    "collected_links",
    "end_of_line",
    "external_link",
    "extract_links",
    "heading",
    "ignored_span",
    "ignored_template",
    "internal_link",
    "known_template",
    "line_text",
    "links_after",
    "links_of",
    "list_item",
    "list_items",
    "literal",
    "new_accumulator",
    "parse",
    "parse_annotated",
    "parse_heading",
    "parse_list",
    "parse_template",
    "parse_text",
    "priority_choice",
    "record",
    "reset",
    "run",
    "template",
]
