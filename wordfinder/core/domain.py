"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
import os
from dataclasses import dataclass, field

USAGE_MESSAGE = (
    "Too few or too many arguments. "
    "Must have one word and at least one but no more than five files."
)


class WordFinderError(Exception):
    """Base class for errors reported to the user before exiting"""


class UsageError(WordFinderError, ValueError):
    """Wrong number of arguments; raised before any worker starts"""

    def __init__(self, message: str = USAGE_MESSAGE):
        super().__init__(message)


class FileOpenError(WordFinderError, OSError):
    """An input file could not be opened; fatal for the whole run"""

    def __init__(self, path: str):
        super().__init__(f"File {path} cannot be opened.")
        self.path = path


@dataclass(frozen=True)
class SearchTerm:
    """The word being searched for, shared read-only by every worker"""
    text: bytes
    folded: bytes = field(init=False, repr=False)

    def __post_init__(self):
        # bytes.lower() only folds ASCII; other bytes compare as-is
        object.__setattr__(self, "folded", self.text.lower())

    @classmethod
    def from_arg(cls, term: str) -> "SearchTerm":
        """Build from a command-line argument, keeping its raw bytes"""
        return cls(os.fsencode(term))

    def matches(self, line: bytes) -> bool:
        return self.folded in line.lower()


@dataclass(frozen=True)
class FileTask:
    """A file path assigned to exactly one worker"""
    path: str
    handle: int


@dataclass
class ScanSummary:
    """What a worker did with its file (used for logging only)"""
    path: str
    lines_scanned: int = 0
    matches: int = 0
