"""Warning channel for recoverable walk failures.

Listing code logs through ``logging``; the CLI routes those records to the
error stream as single ``Warning: ...`` lines for the duration of a run.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

LOGGER_NAME = "folderwalk"
WARNING_FORMAT = "Warning: %(message)s"


@contextlib.contextmanager
def warnings_to_stderr(stream: TextIO | None = None) -> Iterator[logging.Handler]:
    """Attach a ``Warning:``-prefixed stream handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(WARNING_FORMAT))
    previous_level = logger.level
    previous_propagate = logger.propagate
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = False
    try:
        yield handler
    finally:
        handler.flush()
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate
