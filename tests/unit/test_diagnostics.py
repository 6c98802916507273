"""Tests for the ``Warning:`` stderr channel."""

from __future__ import annotations

import io
import logging
import unittest

from folderwalk.diagnostics import LOGGER_NAME, warnings_to_stderr


class WarningsToStderrTests(unittest.TestCase):
    def test_child_logger_warnings_are_prefixed_single_lines(self) -> None:
        stream = io.StringIO()
        with warnings_to_stderr(stream):
            logging.getLogger(f"{LOGGER_NAME}.file_tree_model.fs").warning("cannot stat %s: %s", "x", "gone")
            logging.getLogger(f"{LOGGER_NAME}.file_tree_model.fs").info("not shown")

        self.assertEqual(stream.getvalue(), "Warning: cannot stat x: gone\n")

    def test_handler_is_removed_after_the_run(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        handlers_before = list(logger.handlers)
        propagate_before = logger.propagate
        stream = io.StringIO()

        with warnings_to_stderr(stream):
            pass
        logger.warning("after run")

        self.assertEqual(stream.getvalue(), "")
        self.assertEqual(logger.handlers, handlers_before)
        self.assertEqual(logger.propagate, propagate_before)


if __name__ == "__main__":
    unittest.main()
