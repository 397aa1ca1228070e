"""
Stream Sink Adapter

Implements MatchSink port on top of a binary stream (normally stdout).
"""
import threading
from typing import BinaryIO

from ..core.domain import FileTask
from ..core.ports import MatchSink
from ..formatters import format_match, format_separator


class StreamSink(MatchSink):
    """Writes match records to a shared binary stream.

    Every write happens under one lock, so a record is never split. With
    grouped=True each file's records are held back and written as a single
    block when the file ends, so blocks from different files do not
    interleave. Otherwise records go out as they are found.
    """

    def __init__(self, stream: BinaryIO, grouped: bool = False):
        self.stream = stream
        self.grouped = grouped
        self._lock = threading.Lock()
        self._pending: dict[int, list[bytes]] = {}

    def _write(self, data: bytes) -> None:
        with self._lock:
            self.stream.write(data)

    def _hold(self, task: FileTask, data: bytes) -> None:
        with self._lock:
            self._pending.setdefault(task.handle, []).append(data)

    def begin_run(self) -> None:
        self._write(format_separator())

    def emit_match(self, task: FileTask, line: bytes) -> None:
        record = format_match(task.path, line)
        if self.grouped:
            self._hold(task, record)
        else:
            self._write(record)

    def end_file(self, task: FileTask) -> None:
        if not self.grouped:
            self._write(format_separator())
            return

        with self._lock:
            records = self._pending.pop(task.handle, [])
            records.append(format_separator())
            self.stream.write(b"".join(records))

    def discard(self, task: FileTask) -> None:
        with self._lock:
            self._pending.pop(task.handle, None)

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()
