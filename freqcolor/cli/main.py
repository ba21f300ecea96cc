"""
freqcolor CLI — word frequency highlighter.

Commands:
    freqcolor show [path]     — Print the first lines, words colored by frequency
    freqcolor counts [path]   — Print the word frequency table

Running with no command is the same as `freqcolor show`.

Exit codes:
    0 — success, including an empty input file
    1 — the input file could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .pipeline import prepare_document, count_words
from ..config import DEFAULT_LOG_LEVEL, DEFAULT_PATH, LINE_LIMIT, LOG_LEVELS
from ..domain import FileReadError, FrequencyTable
from ..logging_setup import setup_logging
from ..render import print_colored_lines

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

# --color choice -> the color argument of the render functions
COLOR_MODES = {
    "auto": None,
    "always": True,
    "never": False,
}


def format_count_row(word: str, count: int) -> str:
    """Format one frequency table entry."""
    return f"{word}\t{count}"


def format_counts(table: FrequencyTable, top: Optional[int] = None) -> list[str]:
    """Format the table by descending count, ties alphabetical."""
    return [format_count_row(word, count) for word, count in table.most_common(top)]


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_show(args: argparse.Namespace) -> int:
    """Print the first lines with words colored by frequency tier."""
    try:
        document, table = prepare_document(args.path)
    except FileReadError as e:
        logger.error("%s", e)
        return 1

    print_colored_lines(
        document.text,
        table,
        limit=args.lines,
        color=COLOR_MODES[args.color],
    )

    return 0


def cmd_counts(args: argparse.Namespace) -> int:
    """Print the frequency table."""
    try:
        table = count_words(args.path)
    except FileReadError as e:
        logger.error("%s", e)
        return 1

    for row in format_counts(table, args.top):
        print(row)

    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="freqcolor",
        description="Print a text file's opening lines colored by word frequency",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    # No command behaves as `show` with its defaults
    parser.set_defaults(
        func=cmd_show,
        path=DEFAULT_PATH,
        lines=LINE_LIMIT,
        color="auto",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the first lines with words colored by frequency",
    )
    show_parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PATH,
        help=f"Text file to read (default: {DEFAULT_PATH})",
    )
    show_parser.add_argument(
        "--lines",
        type=_non_negative_int,
        default=LINE_LIMIT,
        help=f"Number of lines to print (default: {LINE_LIMIT})",
    )
    show_parser.add_argument(
        "--color",
        choices=list(COLOR_MODES),
        default="auto",
        help="When to emit ANSI colors (default: auto)",
    )
    show_parser.set_defaults(func=cmd_show)

    # Counts command
    counts_parser = subparsers.add_parser(
        "counts",
        help="Print the word frequency table",
    )
    counts_parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PATH,
        help=f"Text file to read (default: {DEFAULT_PATH})",
    )
    counts_parser.add_argument(
        "--top",
        type=_non_negative_int,
        default=None,
        help="Only print the N most frequent words",
    )
    counts_parser.set_defaults(func=cmd_counts)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
