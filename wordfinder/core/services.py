"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Sequence

from ..config import MAX_FILES, THREAD_NAME_PREFIX
from .domain import FileOpenError, FileTask, ScanSummary, SearchTerm, UsageError
from .ports import LineSource, MatchSink

logger = logging.getLogger(__name__)


class ScanFileService:
    """Use case: scan one file for a term (the per-file worker)"""

    def __init__(self, source: LineSource, sink: MatchSink):
        self.source = source
        self.sink = sink

    def execute(
        self,
        task: FileTask,
        term: SearchTerm,
        abort: Optional[threading.Event] = None
    ) -> ScanSummary:
        """
        Report every line of the task's file that contains the term.

        Lines are reported in file order, followed by one separator. If
        abort is set while scanning, the worker stops at the next line and
        writes no separator.

        Raises:
            FileOpenError: the file could not be opened
        """
        summary = ScanSummary(path=task.path)
        logger.info(f"worker {task.handle}: scanning {task.path}")

        with self.source.open_lines(task.path) as lines:
            for line in lines:
                if abort is not None and abort.is_set():
                    logger.info(
                        f"worker {task.handle}: aborted after {summary.lines_scanned} lines"
                    )
                    self.sink.discard(task)
                    return summary

                summary.lines_scanned += 1
                if term.matches(line):
                    summary.matches += 1
                    self.sink.emit_match(task, line)

        self.sink.end_file(task)
        logger.info(
            f"worker {task.handle}: {task.path} done, "
            f"{summary.matches} matches in {summary.lines_scanned} lines"
        )
        return summary


class FindWordService:
    """Use case: scan every file concurrently, one worker per file (the dispatcher)"""

    def __init__(
        self,
        scan_file: ScanFileService,
        sink: MatchSink,
        max_files: int = MAX_FILES
    ):
        self.scan_file = scan_file
        self.sink = sink
        self.max_files = max_files

    def build_tasks(self, paths: Sequence[str]) -> list[FileTask]:
        """Pair each path with its worker slot, refusing a bad file count"""
        if not 1 <= len(paths) <= self.max_files:
            raise UsageError()
        return [FileTask(path=path, handle=i) for i, path in enumerate(paths)]

    def execute(self, term: SearchTerm, paths: Sequence[str]) -> list[ScanSummary]:
        """
        Run one worker per path and wait for all of them.

        Returns summaries in completion order.

        Raises:
            UsageError: fewer than one or more than max_files paths; no
                worker is started
            FileOpenError: a worker could not open its file; the remaining
                workers are told to stop and the first failure is raised
                once they have
        """
        tasks = self.build_tasks(paths)
        self.sink.begin_run()
        abort = threading.Event()
        summaries: list[ScanSummary] = []
        failure: Optional[FileOpenError] = None

        logger.debug(f"dispatching {len(tasks)} workers")
        try:
            with ThreadPoolExecutor(
                max_workers=len(tasks),
                thread_name_prefix=THREAD_NAME_PREFIX
            ) as executor:
                futures = {
                    executor.submit(self.scan_file.execute, task, term, abort): task
                    for task in tasks
                }
                for future in as_completed(futures):
                    try:
                        summaries.append(future.result())
                    except FileOpenError as e:
                        logger.debug(f"worker {futures[future].handle} failed: {e}")
                        abort.set()
                        if failure is None:
                            failure = e
                    except Exception:
                        abort.set()
                        raise
        finally:
            self.sink.flush()

        if failure is not None:
            raise failure

        logger.debug(f"all {len(tasks)} workers finished")
        return summaries
