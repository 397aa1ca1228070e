import logging

import pytest

from wordfinder.config import MillisecondFormatter


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging so its handler does not outlive the test's stderr."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, MillisecondFormatter):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
