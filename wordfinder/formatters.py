"""
Output record formatters

Byte-level records written to stdout. Paths are printed exactly as given on
the command line, and lines exactly as read from the file.
"""
import os

SEPARATOR = b"\n"


def format_match(path: str, line: bytes) -> bytes:
    """Format one matching line.

    Example output:
        notes.txt - The cat sat
    """
    return os.fsencode(path) + b" - " + line + b"\n"


def format_separator() -> bytes:
    """Blank line written after each file and once at program start"""
    return SEPARATOR
