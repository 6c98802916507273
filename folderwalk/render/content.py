"""File content loading for inline rendering.

Content is accepted only when it decodes as strict UTF-8 and carries no NUL
bytes; anything else is reported to the caller as a read failure.
"""

from __future__ import annotations

from pathlib import Path

CONTENT_START_MARKER = "--- FILE CONTENT START ---"
CONTENT_END_MARKER = "--- FILE CONTENT END ---"


class BinaryContentError(ValueError):
    """Raised when a file does not look like text."""


def read_file_text(path: Path) -> str:
    """Read ``path`` as UTF-8 text.

    Raises ``OSError`` on I/O failures and ``BinaryContentError`` for content
    containing NUL bytes or invalid UTF-8. A leading BOM is dropped.
    """
    data = path.read_bytes()
    if b"\x00" in data:
        raise BinaryContentError("file appears to be binary")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise BinaryContentError("stream did not contain valid UTF-8") from exc


def content_lines(text: str) -> list[str]:
    """Split on ``\\n`` with an optional ``\\r`` before it.

    A trailing newline does not produce an extra empty line and other Unicode
    line separators are left inside the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
