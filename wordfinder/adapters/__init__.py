"""
Adapters - Infrastructure implementations of ports

Concrete implementations of the port interfaces defined in core.
"""
from .filesystem import FilesystemLineSource
from .output import StreamSink

__all__ = ["FilesystemLineSource", "StreamSink"]
