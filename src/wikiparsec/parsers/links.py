"""Link rules for MediaWiki markup.

- [[Target]] - Internal link, text is the page name
- [[Target|Display]] - Piped link, text is the display text
- [[Category:Name]] - Category, image and file links produce no text
- [https://url text] - External link, text is the title

Every internal link that matches is recorded in the link accumulator.
"""

from __future__ import annotations

from typing import Final

from wikiparsec.config import config
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    State,
    char_run,
    ignored_span,
    literal,
    one_of,
    priority_choice,
    spaces,
)
from wikiparsec.parsers.state import record
from wikiparsec.parsers.types import Link

# Namespaces whose links render as nothing (categories, images)
SILENT_NAMESPACES: Final[frozenset[str]] = frozenset(config.silent_namespaces)

URL_SCHEMES: Final[tuple[str, ...]] = tuple(config.url_schemes)

EXTERNAL_LINK_LABEL: Final[str] = config.external_link_label

LINK_TARGET_EXCLUDED: Final[str] = "[]{}|<>\n"
LINK_TEXT_EXCLUDED: Final[str] = "[]{}<>\n"
URL_PATH_EXCLUDED: Final[str] = "[]{}<>| "

_open_internal = literal("[[")
_close_internal = literal("]]")
_open_external = literal("[")
_close_external = literal("]")
_pipe = literal("|")
_link_target = char_run(LINK_TARGET_EXCLUDED, "link target")
_link_text = char_run(LINK_TEXT_EXCLUDED, "link text")
_url_scheme = one_of(*(literal(scheme) for scheme in URL_SCHEMES))
_url_path = char_run(URL_PATH_EXCLUDED, "URL")


def _link_label(link: Link, alt_text: str | None) -> str:
    """Choose the text an internal link renders as.

    Examples:
        >>> _link_label(Link("", "word"), None)
        'word'
        >>> _link_label(Link("Category", "English nouns"), "nouns")
        ''
    """
    if link.namespace in SILENT_NAMESPACES:
        return ""
    if alt_text:
        return alt_text
    return link.page


def internal_link(state: State) -> Ok[str] | Fail:
    """Parse ``[[target|alt text]]`` and record its Link."""
    opened = _open_internal(state)
    if isinstance(opened, Fail):
        return opened
    target = _link_target(opened.state)
    if isinstance(target, Fail):
        return target

    alt_text: str | None = None
    after = target.state
    piped = _pipe(after)
    if isinstance(piped, Ok):
        alt = _alt_text(piped.state)
        alt_text, after = alt.value, alt.state

    closed = _close_internal(after)
    if isinstance(closed, Fail):
        return closed

    link = Link.from_target(target.value)
    links = record(link, closed.state.links)
    return Ok(_link_label(link, alt_text), closed.state.with_links(links))


def external_link(state: State) -> Ok[str] | Fail:
    """Parse ``[scheme://path title]``, keeping only the title.

    The URL is discarded. A link with no title produces a fixed label.
    """
    opened = _open_external(state)
    if isinstance(opened, Fail):
        return opened
    scheme = _url_scheme(opened.state)
    if isinstance(scheme, Fail):
        return scheme
    path = _url_path(scheme.state)
    if isinstance(path, Fail):
        return path

    title = _external_title(spaces(path.state).state)
    closed = _close_external(title.state)
    if isinstance(closed, Fail):
        return closed
    return Ok(title.value or EXTERNAL_LINK_LABEL, closed.state)


_external_title = priority_choice([ignored_span, _link_text])

# Captions of image links may contain further links
_alt_text = priority_choice([ignored_span, internal_link, external_link, _link_text])
