"""CLI for inspecting how wikitext parses.

Commands:
    wikiparsec text        Print the plain text of the input
    wikiparsec links       Print the internal links as JSON lines
    wikiparsec annotated   Print text and links as one JSON object
    wikiparsec template    Print the argument mapping of a template
    wikiparsec list        Print the tree of a wikitext list

Input is read from --input, or from stdin when no file is given.

Examples:
    # Plain text of a definition line
    echo "A [[domestic]] [[cat]]" | wikiparsec text

    # Links of a whole entry, with debug logging
    wikiparsec links -i entry.wiki --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

from wikiparsec.config import config
from wikiparsec.parsers import (
    BulletList,
    IndentedList,
    Item,
    ListHeading,
    ListNode,
    OrderedList,
    WikiParseError,
    extract_links,
    parse_annotated,
    parse_list,
    parse_template,
    parse_text,
)

# =============================================================================
# LOGGING SETUP
# =============================================================================

# Module-level logger
logger = logging.getLogger("wikiparsec")


def _setup_logging(log_dir: Path | None = None, verbose: bool = False) -> Path:
    """Configure logging with file and console handlers.

    Args:
        log_dir: Directory for log files (default: config.log_dir)
        verbose: If True, set console to DEBUG level

    Returns:
        Path to the log file
    """
    if log_dir is None:
        log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"wikiparsec_{timestamp}.log"

    logger.setLevel(logging.DEBUG)

    # File handler - captures everything with full detail
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Console handler - less verbose unless --verbose flag
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info(f"Logging initialized - log file: {log_file}")
    return log_file


def _log_exception(msg: str, exc: Exception) -> None:
    """Log an exception with full traceback to file.

    Args:
        msg: Context message describing what failed
        exc: The exception that was raised
    """
    logger.error(f"{msg}: {type(exc).__name__}: {exc}")
    logger.debug(f"Traceback:\n{traceback.format_exc()}")


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="wikiparsec",
        description="Parse Wiktionary wikitext into text, links and structure",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-i",
        "--input",
        type=Path,
        default=None,
        help="Wikitext file to read (default: stdin)",
    )
    common.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help=f"Directory for log files (default: {config.log_dir})",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging on the console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("text", parents=[common], help="Print the plain text of the input")
    subparsers.add_parser("links", parents=[common], help="Print internal links as JSON lines")
    subparsers.add_parser(
        "annotated", parents=[common], help="Print text and links as one JSON object"
    )
    subparsers.add_parser(
        "template", parents=[common], help="Print the argument mapping of a template"
    )
    subparsers.add_parser("list", parents=[common], help="Print the tree of a wikitext list")
    return parser


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _list_node_to_json(node: ListNode) -> dict[str, Any]:
    """Convert a list node into JSON-ready nested dicts."""
    if isinstance(node, Item):
        return {"type": "item", "text": node.text}
    if isinstance(node, ListHeading):
        return {"type": "heading", "text": node.text}
    kinds = {BulletList: "bullet", OrderedList: "ordered", IndentedList: "indented"}
    return {
        "type": kinds[type(node)],
        "items": [_list_node_to_json(child) for child in node.items],
    }


def _render(command: str, text: str) -> str:
    """Run the parse for ``command`` and format its output."""
    if command == "text":
        return parse_text(text)
    if command == "links":
        links = reversed(extract_links(text))
        return "\n".join(json.dumps(asdict(link), ensure_ascii=False) for link in links)
    if command == "annotated":
        annotated = parse_annotated(text)
        payload = {
            "text": annotated.text,
            "annotations": [asdict(link) for link in annotated.annotations],
        }
        return json.dumps(payload, ensure_ascii=False)
    if command == "template":
        return json.dumps(parse_template(text.strip()), ensure_ascii=False)
    if command == "list":
        return json.dumps(_list_node_to_json(parse_list(text)), ensure_ascii=False)
    raise ValueError(f"Unknown command: {command}")


def _run_command(args: argparse.Namespace) -> int:
    """Run one parse command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for error, 130 for interrupt)
    """
    _setup_logging(args.log_dir, args.verbose)

    input_path: Path | None = args.input
    if input_path is not None and not input_path.exists():
        print(f"Error: Input file does not exist: {input_path}", file=sys.stderr)
        return 1

    try:
        text = _read_input(input_path)
        logger.debug(f"Read {len(text)} characters")
        output = _render(args.command, text)
    except WikiParseError as e:
        _log_exception(f"Could not parse {input_path or 'stdin'}", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    if output:
        print(output)
    return 0


def main() -> None:
    """Run the wikiparsec CLI."""
    parser = _create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)
    sys.exit(_run_command(args))


if __name__ == "__main__":
    main()
