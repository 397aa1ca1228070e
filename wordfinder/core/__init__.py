"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models and errors
- ports.py: Port interfaces (abstractions for file input and match output)
- services.py: Application services (the per-file worker and the dispatcher)
"""
from .domain import (
    FileOpenError,
    FileTask,
    ScanSummary,
    SearchTerm,
    UsageError,
    WordFinderError,
)
from .ports import LineSource, MatchSink
from .services import FindWordService, ScanFileService

__all__ = [
    # Domain models
    "SearchTerm",
    "FileTask",
    "ScanSummary",
    # Errors
    "WordFinderError",
    "UsageError",
    "FileOpenError",
    # Ports
    "LineSource",
    "MatchSink",
    # Services
    "ScanFileService",
    "FindWordService",
]
