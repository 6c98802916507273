"""Output sink selection: ``files.txt`` inside the root, or standard output."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

OUTPUT_FILENAME = "files.txt"
OUTPUT_BUFFER_BYTES = 128 * 1024


def output_path_for(root: Path) -> Path:
    return root / OUTPUT_FILENAME


@contextlib.contextmanager
def _replacing_stream(stream: TextIO) -> Iterator[TextIO]:
    """Encode unencodable characters in ``stream`` as replacements while open.

    Surrogate-escaped file names from ``os.scandir`` would otherwise abort the
    walk under a strict encoder. The previous error policy is restored on exit.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    previous_errors = getattr(stream, "errors", None)
    if reconfigure is None or previous_errors is None:
        yield stream
        return
    reconfigure(errors="replace")
    try:
        yield stream
    finally:
        reconfigure(errors=previous_errors)


@contextlib.contextmanager
def open_sink(root: Path, to_stdout: bool) -> Iterator[tuple[TextIO, Path | None]]:
    """Yield ``(sink, self_path)`` for one run and flush it on success.

    The file sink is created (or truncated) before traversal and closed on
    exit; standard output is flushed but left open. Both replace characters
    their encoding cannot represent. ``self_path`` is the file to hide from
    the listing, or ``None`` for standard output.
    """
    if to_stdout:
        with _replacing_stream(sys.stdout) as sink:
            yield sink, None
            sink.flush()
        return

    path = output_path_for(root)
    with path.open(
        "w",
        encoding="utf-8",
        errors="replace",
        newline="\n",
        buffering=OUTPUT_BUFFER_BYTES,
    ) as handle:
        yield handle, path
        handle.flush()
