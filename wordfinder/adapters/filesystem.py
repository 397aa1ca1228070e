"""
Filesystem Line Source Adapter

Implements LineSource port using local files opened in binary mode.
"""
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from ..core.domain import FileOpenError
from ..core.ports import LineSource

LINE_TERMINATOR = b"\n"


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield each line without its terminator, including a final partial line"""
    for line in stream:
        if line.endswith(LINE_TERMINATOR):
            line = line[:-1]
        yield line


class FilesystemLineSource(LineSource):
    """Reads input files from disk"""

    @contextmanager
    def open_lines(self, path: str) -> Iterator[Iterator[bytes]]:
        """Open path for reading and yield an iterator over its lines"""
        try:
            f = open(path, "rb")
        except OSError as e:
            raise FileOpenError(path) from e

        with f:
            yield iter_lines(f)
