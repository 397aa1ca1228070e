"""
Unit tests for wordfinder.adapters

Tests the filesystem line source and the stream sink.
"""
import io
import threading

import pytest

from wordfinder.adapters import FilesystemLineSource, StreamSink
from wordfinder.adapters.filesystem import iter_lines
from wordfinder.core.domain import FileOpenError, FileTask


class TestIterLines:
    """Test line splitting."""

    def test_strips_terminator(self):
        """Test lines come back without their newline."""
        assert list(iter_lines(io.BytesIO(b"one\ntwo\n"))) == [b"one", b"two"]

    def test_trailing_partial_line(self):
        """Test a final line with no newline is still yielded."""
        assert list(iter_lines(io.BytesIO(b"one\ntwo"))) == [b"one", b"two"]

    def test_empty_input(self):
        """Test an empty file has no lines."""
        assert list(iter_lines(io.BytesIO(b""))) == []

    def test_blank_lines_kept(self):
        """Test terminator-only lines are yielded as empty lines."""
        assert list(iter_lines(io.BytesIO(b"\n\nx\n"))) == [b"", b"", b"x"]

    def test_carriage_return_is_content(self):
        """Test only \\n terminates a line."""
        assert list(iter_lines(io.BytesIO(b"dos\r\n"))) == [b"dos\r"]

    def test_long_line(self):
        """Test lines much longer than any read chunk come back whole."""
        long_line = b"x" * 100_000 + b"cat"
        assert list(iter_lines(io.BytesIO(long_line + b"\nshort"))) == [long_line, b"short"]


class TestFilesystemLineSource:
    """Test FilesystemLineSource class."""

    def test_reads_file(self, tmp_path):
        """Test lines are read from disk as bytes."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"The cat sat\nDog ran")

        with FilesystemLineSource().open_lines(str(path)) as lines:
            assert list(lines) == [b"The cat sat", b"Dog ran"]

    def test_non_utf8_bytes_pass_through(self, tmp_path):
        """Test undecodable bytes do not break reading."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9 cat\n")

        with FilesystemLineSource().open_lines(str(path)) as lines:
            assert list(lines) == [b"caf\xe9 cat"]

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileOpenError chained from OSError."""
        path = str(tmp_path / "missing.txt")

        with pytest.raises(FileOpenError) as exc_info:
            with FilesystemLineSource().open_lines(path):
                pass

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_cannot_be_opened(self, tmp_path):
        """Test a directory is reported as an open failure."""
        with pytest.raises(FileOpenError):
            with FilesystemLineSource().open_lines(str(tmp_path)):
                pass

    def test_file_closed_after_use(self, tmp_path, monkeypatch):
        """Test the file handle is closed when the block exits."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"x\n")
        handles = []
        real_open = open

        def tracking_open(*args, **kwargs):
            f = real_open(*args, **kwargs)
            handles.append(f)
            return f

        monkeypatch.setattr("builtins.open", tracking_open)
        with FilesystemLineSource().open_lines(str(path)) as lines:
            list(lines)

        assert handles and all(f.closed for f in handles)


class TestStreamSink:
    """Test StreamSink class."""

    def test_begin_run_writes_blank_line(self):
        """Test the leading blank line."""
        stream = io.BytesIO()
        StreamSink(stream).begin_run()
        assert stream.getvalue() == b"\n"

    def test_ungrouped_writes_immediately(self):
        """Test records go out in call order when not grouped."""
        stream = io.BytesIO()
        sink = StreamSink(stream)
        a, b = FileTask("a.txt", 0), FileTask("b.txt", 1)

        sink.emit_match(a, b"cat 1")
        sink.emit_match(b, b"cat 2")
        sink.end_file(b)
        sink.emit_match(a, b"cat 3")
        sink.end_file(a)

        assert stream.getvalue() == (
            b"a.txt - cat 1\n"
            b"b.txt - cat 2\n"
            b"\n"
            b"a.txt - cat 3\n"
            b"\n"
        )

    def test_grouped_writes_whole_blocks(self):
        """Test each file's records are written together when it ends."""
        stream = io.BytesIO()
        sink = StreamSink(stream, grouped=True)
        a, b = FileTask("a.txt", 0), FileTask("b.txt", 1)

        sink.emit_match(a, b"cat 1")
        sink.emit_match(b, b"cat 2")
        assert stream.getvalue() == b""

        sink.end_file(b)
        sink.emit_match(a, b"cat 3")
        sink.end_file(a)

        assert stream.getvalue() == (
            b"b.txt - cat 2\n"
            b"\n"
            b"a.txt - cat 1\n"
            b"a.txt - cat 3\n"
            b"\n"
        )

    def test_grouped_same_path_twice(self):
        """Test two tasks for the same path keep separate blocks."""
        stream = io.BytesIO()
        sink = StreamSink(stream, grouped=True)
        first, second = FileTask("a.txt", 0), FileTask("a.txt", 1)

        sink.emit_match(first, b"one")
        sink.emit_match(second, b"two")
        sink.end_file(second)
        sink.end_file(first)

        assert stream.getvalue() == b"a.txt - two\n\na.txt - one\n\n"

    def test_discard_drops_pending(self):
        """Test an aborted task's held records are never written."""
        stream = io.BytesIO()
        sink = StreamSink(stream, grouped=True)
        task = FileTask("a.txt", 0)

        sink.emit_match(task, b"cat")
        sink.discard(task)
        sink.flush()

        assert stream.getvalue() == b""

    def test_concurrent_records_stay_whole(self):
        """Test records from many threads never split each other."""
        stream = io.BytesIO()
        sink = StreamSink(stream)
        tasks = [FileTask(f"f{i}.txt", i) for i in range(5)]

        def work(task):
            for n in range(200):
                sink.emit_match(task, b"line %d" % n)

        threads = [threading.Thread(target=work, args=(t,)) for t in tasks]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1000
        for task in tasks:
            prefix = task.path.encode() + b" - line "
            own = [line for line in lines if line.startswith(prefix)]
            assert own == [prefix + b"%d" % n for n in range(200)]
