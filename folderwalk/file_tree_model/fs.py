"""Single-directory listing with symlink classification and exclusions."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import DirEntryInfo, EntryKind

logger = logging.getLogger(__name__)

# Matched case-sensitively against the final path component.
EXCLUDED_NAMES: frozenset[str] = frozenset({".git", "node_modules", "target"})


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def classify_entry(path: Path, link_mode: int) -> EntryKind:
    """Classify ``path`` given its un-followed ``st_mode``.

    Symlinks are resolved with a second, following stat; failure to resolve
    yields ``SYMLINK_UNRESOLVED`` rather than an error. Non-symlinks prefer
    followed metadata and fall back to the link-level mode.
    """
    if stat.S_ISLNK(link_mode):
        try:
            target_mode = os.stat(path).st_mode
        except (OSError, ValueError):
            return EntryKind.SYMLINK_UNRESOLVED
        if stat.S_ISDIR(target_mode):
            return EntryKind.SYMLINK_TO_DIRECTORY
        return EntryKind.SYMLINK_TO_FILE

    try:
        return _kind_from_mode(os.stat(path).st_mode)
    except OSError:
        return _kind_from_mode(link_mode)


def list_directory_entries(
    directory: Path,
    self_path: Path | None = None,
    excluded_names: frozenset[str] = EXCLUDED_NAMES,
) -> list[DirEntryInfo]:
    """List immediate children of ``directory`` in scan order (unsorted).

    Unreadable directories, entries whose metadata cannot be read, and
    iteration failures are logged as warnings; whatever was read successfully
    is returned. ``self_path`` (the active output file) is never listed.
    """
    entries: list[DirEntryInfo] = []
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        logger.warning("cannot read directory %s: %s", directory, exc)
        return entries

    with scanner:
        while True:
            try:
                child = next(scanner)
            except StopIteration:
                break
            except OSError as exc:
                logger.warning("error while reading in %s: %s", directory, exc)
                break

            name = child.name
            if name in excluded_names:
                continue
            child_path = Path(child.path)
            if self_path is not None and child_path == self_path:
                continue

            try:
                link_mode = child.stat(follow_symlinks=False).st_mode
            except OSError as exc:
                logger.warning("cannot stat %s: %s", child_path, exc)
                continue

            entries.append(
                DirEntryInfo(
                    path=child_path,
                    name=name,
                    kind=classify_entry(child_path, link_mode),
                )
            )
    return entries


__all__ = [
    "EXCLUDED_NAMES",
    "classify_entry",
    "list_directory_entries",
]
