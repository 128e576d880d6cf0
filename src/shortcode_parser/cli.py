"""Command-line debugging tool for the shortcode parser.

Parses content given on the command line, in a file or on stdin, and prints
the resulting node tree. Intended for checking how content from a CMS will
be seen by the renderer.

Examples
--------
Parse an inline string:
    $ shortcode-parser '[su_box title="Test"]Content here[/su_box]'

Parse a file and show a tree:
    $ shortcode-parser -f post.html --format tree

Repair entity-encoded content first and show counts:
    $ shortcode-parser -f post.html --decode --summary

Inspect attribute coercion:
    $ shortcode-parser --attributes 'title="Test" width=100 responsive=true disabled'

Use environment variables for defaults:
    $ export SHORTCODE_PARSER_FORMAT=tree
    $ shortcode-parser -f post.html
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional

from shortcode_parser import __version__
from shortcode_parser.ast import Node, Shortcode, ast_to_json, count_nodes
from shortcode_parser.exceptions import InputError, ParsingError
from shortcode_parser.logging_utils import configure_logging
from shortcode_parser.options import ShortcodeParserOptions
from shortcode_parser.parsers import ShortcodeParser, parse_attributes
from shortcode_parser.utils import decode_shortcode_entities

logger = logging.getLogger(__name__)

ENV_PREFIX = "SHORTCODE_PARSER_"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_PARSING_ERROR = 6


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with the SHORTCODE_PARSER_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'format', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    return os.environ.get(f"{ENV_PREFIX}{key.upper().replace('-', '_')}")


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Use environment variables as argument defaults; explicit arguments still win."""
    for action in parser._actions:
        if not action.dest or action.dest == "help":
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in ("true", "1", "yes", "on")
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logging.warning(
                    f"Invalid choice for {ENV_PREFIX}{action.dest.upper()}: {env_value}. "
                    f"Choices: {list(action.choices)}"
                )
        else:
            action.default = env_value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shortcode-parser",
        description="Parse bracket shortcodes and print the resulting node tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("content", nargs="?", help="Content to parse (reads stdin when omitted and no --file)")
    parser.add_argument("-f", "--file", help="Read content from a file")
    parser.add_argument(
        "--format", choices=["json", "tree"], default="json", help="Output format for parsed nodes (default: json)"
    )
    parser.add_argument("--attributes", action="store_true", help="Treat the input as an attribute string")
    parser.add_argument("--decode", action="store_true", help="Decode HTML entities inside shortcode tags first")
    parser.add_argument("--summary", action="store_true", help="Print node counts and parse time")
    parser.add_argument("--no-cache", action="store_true", help="Bypass the parse caches")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")
    parser.add_argument("--rich", action="store_true", help="Use rich formatting for logs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    apply_env_vars_to_parser(parser)
    return parser


def read_input(parsed_args: argparse.Namespace) -> str:
    """Return the content to parse from the positional argument, a file or stdin.

    Raises
    ------
    InputError
        If the file cannot be read

    """
    if parsed_args.file:
        path = Path(parsed_args.file)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise InputError(f"Cannot read input file: {path}", input_path=str(path), original_error=e) from e
    if parsed_args.content is not None:
        return parsed_args.content
    return sys.stdin.read()


def _build_rich_tree(nodes: list[Node], label: str):
    from rich.markup import escape
    from rich.tree import Tree

    def add(branch: Tree, node: Node) -> None:
        if isinstance(node, Shortcode):
            attrs = " ".join(f"{key}={value!r}" for key, value in node.attributes.items())
            child = branch.add(f"[bold cyan]{escape(node.name)}[/bold cyan] [dim]{escape(attrs)}[/dim]")
            for grandchild in node.children:
                add(child, grandchild)
        else:
            branch.add(f"[green]text[/green] {escape(repr(node.raw))}")

    tree = Tree(label)
    for node in nodes:
        add(tree, node)
    return tree


def print_attributes(attr_string: str) -> None:
    """Print parsed attributes with their Python types."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Attributes")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Value", style="white")
    for key, value in parse_attributes(attr_string).items():
        table.add_row(key, type(value).__name__, repr(value))
    Console().print(table)


def print_nodes(nodes: list[Node], output_format: str) -> None:
    """Print nodes as JSON or as a rich tree."""
    if output_format == "tree":
        from rich.console import Console

        Console().print(_build_rich_tree(nodes, "[bold]document[/bold]"))
    else:
        print(ast_to_json(nodes, indent=2))


def main(args: list[str] | None = None) -> int:
    """Execute the command line tool."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, parsed_args.log_file, parsed_args.trace, parsed_args.rich)

    try:
        content = read_input(parsed_args)
    except InputError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.attributes:
        print_attributes(content)
        return EXIT_SUCCESS

    if parsed_args.decode:
        content = decode_shortcode_entities(content) or ""

    options = ShortcodeParserOptions(use_cache=not parsed_args.no_cache)
    shortcode_parser = ShortcodeParser(options)

    start = time.perf_counter()
    try:
        nodes = shortcode_parser.parse(content)
    except ParsingError as e:
        logger.error("Failed to parse content: %s", e)
        return EXIT_PARSING_ERROR
    elapsed_ms = (time.perf_counter() - start) * 1000

    print_nodes(nodes, parsed_args.format)

    if parsed_args.summary:
        summary = count_nodes(nodes)
        print(f"Parse time: {elapsed_ms:.3f}ms", file=sys.stderr)
        print(f"Total shortcodes: {summary.shortcodes}", file=sys.stderr)
        print(f"Total text nodes: {summary.text}", file=sys.stderr)

    return EXIT_SUCCESS
