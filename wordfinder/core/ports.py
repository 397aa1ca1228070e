"""
Ports - Interfaces for external dependencies

These define HOW the core reads input files and reports matches,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterator

from .domain import FileTask


class LineSource(ABC):
    """Port for reading input files line by line"""

    @abstractmethod
    def open_lines(self, path: str) -> AbstractContextManager[Iterator[bytes]]:
        """Open path and yield its lines without the trailing terminator.

        Raises FileOpenError if the file cannot be opened.
        """
        pass


class MatchSink(ABC):
    """Port for the output stream shared by all workers"""

    @abstractmethod
    def begin_run(self) -> None:
        """Emit the leading blank line before any worker starts"""
        pass

    @abstractmethod
    def emit_match(self, task: FileTask, line: bytes) -> None:
        """Report one matching line of task's file"""
        pass

    @abstractmethod
    def end_file(self, task: FileTask) -> None:
        """Emit the separator after task's file is exhausted"""
        pass

    @abstractmethod
    def discard(self, task: FileTask) -> None:
        """Drop anything still held back for an aborted task"""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush the underlying stream"""
        pass
