"""Main CLI entry point for yangkit.

Provides commands: options
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from yangkit.cli.options import options_command

logger = logging.getLogger("yangkit.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all yangkit commands."""
    parser = argparse.ArgumentParser(
        description="Yangkit - YANG parser options inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    options_parser = subparsers.add_parser(
        "options",
        help="Resolve parser options and show the resulting settings",
    )
    options_parser.add_argument(
        "--config",
        help=(
            "Parser options. Can be a path to a TOML/JSON file "
            "(e.g. options.toml, options.json) or an inline TOML/JSON string."
        ),
    )
    options_parser.add_argument(
        "--exclude",
        action="append",
        metavar="KEYWORD",
        help="Statement keyword to ignore while parsing (repeatable)",
    )
    options_parser.add_argument(
        "--latest-revision-only",
        action="store_true",
        help="Keep only the latest revision statement",
    )
    options_parser.add_argument(
        "--include-source",
        action="append",
        metavar="KEYWORD",
        help="Statement keyword linked to the module source (repeatable)",
    )
    options_parser.add_argument(
        "--ignore-deviate-not-supported",
        action="store_true",
        help="Retain nodes marked with 'deviate not-supported'",
    )
    options_parser.add_argument(
        "--ignore-submodule-circular-dependencies",
        action="store_true",
        help="Tolerate submodules that include themselves through a cycle",
    )
    options_parser.add_argument(
        "--store-uses",
        action="store_true",
        help="Record the originating grouping on each entry",
    )
    options_parser.add_argument(
        "--keyword",
        action="append",
        metavar="KEYWORD",
        help="Show include/link decisions for this statement keyword (repeatable)",
    )
    options_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved settings as JSON",
    )

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:])

    console = Console()
    setup_logging(verbose=args.verbose, console=Console(stderr=True))

    if args.command == "options":
        return options_command(args, console=console)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
