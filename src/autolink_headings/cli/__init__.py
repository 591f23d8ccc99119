#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for autolink-headings.

Reads a hast JSON tree, links its headings and writes the result as JSON or
HTML.

Usage Examples
--------------
Link headings in a tree file and print HTML::

    $ autolink-headings page.json --format html

Read from stdin, wrap heading text, only for h2 and h3::

    $ cat page.json | autolink-headings --behavior wrap --test h2 --test h3

Use a configuration file and show a summary table::

    $ autolink-headings page.json --config .autolink-headings.yaml --rich -o out.json

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from autolink_headings import __version__
from autolink_headings.ast import Element, heading_rank, json_to_tree, to_html, tree_to_json
from autolink_headings.cli.config import load_config_with_priority, merge_configs
from autolink_headings.constants import BEHAVIORS
from autolink_headings.exceptions import AutolinkError, FileError, ValidationError
from autolink_headings.logging_utils import configure_logging
from autolink_headings.transforms import AutolinkHeadingsTransform

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="autolink-headings",
        description="Add links from headings with ids back to themselves in a hast JSON tree.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input hast JSON file (default: stdin)")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--format", choices=["json", "html"], default="json", help="Output format (default: json)")

    options_group = parser.add_argument_group("transform options")
    options_group.add_argument("--behavior", choices=list(BEHAVIORS), help="How to create links (default: prepend)")
    options_group.add_argument(
        "--test",
        action="append",
        metavar="TAG",
        help="Only link headings with this tag name (repeatable)",
    )
    options_group.add_argument("--content-text", metavar="TEXT", help="Use TEXT as link content instead of the icon")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Path to a TOML, YAML or JSON configuration file")
    config_group.add_argument("--no-config", action="store_true", help="Ignore discovered configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log records to this file")
    logging_group.add_argument("--trace", action="store_true", help="Include timestamps and logger names in logs")

    parser.add_argument(
        "--rich",
        action="store_true",
        help="Print a summary table of linked headings and rich-formatted logs to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _cli_overrides(parsed_args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if parsed_args.behavior:
        overrides["behavior"] = parsed_args.behavior
    if parsed_args.test:
        overrides["test"] = parsed_args.test[0] if len(parsed_args.test) == 1 else parsed_args.test
    if parsed_args.content_text is not None:
        overrides["content"] = parsed_args.content_text
    return overrides


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot read input file {source}: {e}", file_path=source, original_error=e) from e


def _write_output(content: str, destination: Optional[str]) -> None:
    if not destination:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return
    try:
        Path(destination).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write output file {destination}: {e}", file_path=destination,
                        original_error=e) from e


def summarize_headings(headings: list[Element]) -> list[tuple[int, str, str]]:
    """Return ``(rank, tag name, id)`` for each linked heading."""
    return [(heading_rank(heading) or 0, heading.tag_name, str(heading.properties["id"])) for heading in headings]


def _render_summary_rich(headings: list[tuple[int, str, str]], behavior: str) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Linked headings ({behavior})")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Tag", style="magenta")
    table.add_column("Link", style="green")
    for rank, tag_name, heading_id in headings:
        table.add_row(str(rank), tag_name, f"#{heading_id}")

    console = Console(stderr=True)
    console.print(table)
    console.print(f"[bold]{len(headings)}[/bold] heading(s) linked")


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        use_rich=parsed_args.rich,
    )

    try:
        file_config = load_config_with_priority(parsed_args.config, use_discovery=not parsed_args.no_config)
        transform = AutolinkHeadingsTransform(merge_configs(file_config, _cli_overrides(parsed_args)))

        tree = json_to_tree(_read_input(parsed_args.input))
        linked = transform.link_headings(tree)

        output = to_html(tree) if parsed_args.format == "html" else tree_to_json(tree, indent=2)
        _write_output(output, parsed_args.output)
    except FileError as e:
        logger.error(e.message)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        logger.error(e.message)
        return EXIT_VALIDATION_ERROR
    except AutolinkError as e:
        logger.error(e.message)
        return EXIT_ERROR

    if parsed_args.rich:
        _render_summary_rich(summarize_headings(linked), transform.strategy.behavior)

    return EXIT_SUCCESS
