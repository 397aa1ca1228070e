"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import BinaryIO

from .adapters import FilesystemLineSource, StreamSink
from .config import MAX_FILES
from .core import FindWordService, ScanFileService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, stream: BinaryIO, grouped: bool = False, max_files: int = MAX_FILES):
        # Adapters (infrastructure)
        self.source = FilesystemLineSource()
        self.sink = StreamSink(stream, grouped=grouped)

        # Services (use cases)
        self.scan_file = ScanFileService(
            source=self.source,
            sink=self.sink
        )

        self.find_word = FindWordService(
            scan_file=self.scan_file,
            sink=self.sink,
            max_files=max_files
        )
