"""
Configuration and logging setup

Module-level defaults for the CLI. There are no config files or environment
variables; everything tunable is a command-line flag.
"""
import logging
import sys
from datetime import datetime, timezone

# Configuration
MAX_FILES = 5
DEFAULT_LOG_LEVEL = "WARNING"
THREAD_NAME_PREFIX = "wordfinder"

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(threadName)s] %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include sub-second digits with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime(datefmt)
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """Send diagnostics to stderr so stdout only carries match records"""
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, stream=sys.stderr, force=True)

    # Apply custom formatter to root logger
    for handler in logging.root.handlers:
        handler.setFormatter(MillisecondFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
