"""Project configuration loaded from pyproject.toml."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class WikiparsecConfig(BaseModel):
    """Configuration for wikiparsec."""

    # Internal links into these namespaces render no text
    silent_namespaces: list[str] = Field(default_factory=lambda: ["Image", "Category", "File"])

    # URL prefixes recognized inside [external links]
    url_schemes: list[str] = Field(
        default_factory=lambda: [
            "http://",
            "https://",
            "ftp://",
            "news://",
            "irc://",
            "mailto:",
            "//",
        ]
    )

    # Text produced for an external link with no title
    external_link_label: str = "link"

    # CLI log file directory
    log_dir: str = "logs"


@lru_cache(maxsize=1)
def load_config() -> WikiparsecConfig:
    """Load configuration from pyproject.toml.

    Returns:
        WikiparsecConfig with settings from [tool.wikiparsec] section,
        falling back to defaults if not found.
    """
    pyproject_path = _find_pyproject()
    if pyproject_path is None:
        return WikiparsecConfig()

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    tool_config: dict[str, Any] = data.get("tool", {}).get("wikiparsec", {})
    return WikiparsecConfig(**tool_config)


def _find_pyproject() -> Path | None:
    """Find pyproject.toml by walking up from current file."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # Max 10 levels up
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


# Convenience accessor
config = load_config()
