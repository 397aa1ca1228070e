#!/usr/bin/env python3
"""
CLI for wordfinder - search up to five files concurrently for a word

Usage:
  wordfinder cat notes.txt                  # Lines of notes.txt containing "cat" (any case)
  wordfinder Cat a.txt b.txt c.txt          # One worker thread per file
  wordfinder --group cat a.txt b.txt        # Print each file's matches as one block
  wordfinder -v cat a.txt                   # Log worker progress to stderr
  wordfinder -- -x a.txt                    # Term starting with "-"

Each matching line is printed as "<file> - <line>", followed by a blank line
per file. Output from different files may interleave unless --group is used.
"""

import argparse
import logging
import sys
from typing import BinaryIO, Optional, Sequence

from .config import DEFAULT_LOG_LEVEL, MAX_FILES, configure_logging
from .container import Container
from .core import SearchTerm, UsageError, WordFinderError

logger = logging.getLogger(__name__)


def find_command(
    term: Optional[str],
    files: Sequence[str],
    grouped: bool,
    stream: BinaryIO,
) -> int:
    """Search files for term, writing matches to stream"""
    try:
        if term is None:
            raise UsageError()

        container = Container(stream=stream, grouped=grouped)
        summaries = container.find_word.execute(SearchTerm.from_arg(term), files)
    except WordFinderError as e:
        print(e, file=sys.stderr)
        return 1

    total = sum(s.matches for s in summaries)
    logger.info(f"{total} matching lines across {len(summaries)} files")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfinder",
        description=(
            "Print every line containing WORD (case-insensitive) "
            f"in up to {MAX_FILES} files, one thread per file"
        )
    )
    # Counts are checked by the dispatcher so both bounds report the same error
    parser.add_argument("term", nargs="?", metavar="WORD", help="Word to search for")
    parser.add_argument("files", nargs="*", metavar="FILE", help=f"Files to search (1 to {MAX_FILES})")
    parser.add_argument(
        "--group",
        action="store_true",
        help="Write each file's matches as one uninterrupted block"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log worker progress to stderr (same as --log-level INFO)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level for stderr diagnostics (default: {DEFAULT_LOG_LEVEL})"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, stream: Optional[BinaryIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or ("INFO" if args.verbose else DEFAULT_LOG_LEVEL)
    configure_logging(level)

    if stream is None:
        stream = sys.stdout.buffer

    return find_command(
        term=args.term,
        files=args.files,
        grouped=args.group,
        stream=stream
    )


if __name__ == "__main__":
    sys.exit(main())
