"""Shared pytest fixtures for wikiparsec tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
MEDIAWIKI_DIR = FIXTURES_DIR / "mediawiki"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def mediawiki_dir() -> Path:
    """Return path to MediaWiki fixtures."""
    return MEDIAWIKI_DIR


@pytest.fixture
def load_fixture() -> callable:
    """Factory fixture to load MediaWiki fixture files.

    Usage:
        def test_something(load_fixture):
            content = load_fixture("links", "simple_links.txt")
    """

    def _load(category: str, name: str) -> str:
        path = MEDIAWIKI_DIR / category / name
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def simple_links(load_fixture: callable) -> str:
    """Running text with plain, piped, sectioned, interwiki and category links."""
    return load_fixture("links", "simple_links.txt")


@pytest.fixture
def translation_template(load_fixture: callable) -> str:
    """A {{t+}} translation template with named arguments."""
    return load_fixture("templates", "translation.txt")


@pytest.fixture
def definition_list(load_fixture: callable) -> str:
    """Numbered definitions with nested examples, quotations and subsenses."""
    return load_fixture("lists", "definitions.txt")


@pytest.fixture
def cat_entry(load_fixture: callable) -> str:
    """A small but complete English Wiktionary entry."""
    return load_fixture("entries", "cat.txt")
