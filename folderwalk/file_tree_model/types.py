"""Domain datatypes for one listed directory child."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    """Entry type observed from link-level metadata, then followed metadata."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_TO_FILE = "symlink_to_file"
    SYMLINK_TO_DIRECTORY = "symlink_to_directory"
    # Dangling links, loops, and links whose target cannot be stat'ed.
    SYMLINK_UNRESOLVED = "symlink_unresolved"
    OTHER = "other"


@dataclass(frozen=True)
class DirEntryInfo:
    """One immediate directory child, valid only while its level renders."""

    path: Path
    name: str
    kind: EntryKind

    @property
    def is_symlink(self) -> bool:
        return self.kind in (
            EntryKind.SYMLINK_TO_FILE,
            EntryKind.SYMLINK_TO_DIRECTORY,
            EntryKind.SYMLINK_UNRESOLVED,
        )

    @property
    def is_symlink_dir(self) -> bool:
        """Whether this is a symlink whose target resolves to a directory."""
        return self.kind is EntryKind.SYMLINK_TO_DIRECTORY

    @property
    def is_dir(self) -> bool:
        """Whether this entry is a true (non-symlinked) directory."""
        return self.kind is EntryKind.DIRECTORY

    @property
    def sorts_as_directory(self) -> bool:
        return self.kind in (EntryKind.DIRECTORY, EntryKind.SYMLINK_TO_DIRECTORY)


__all__ = [
    "EntryKind",
    "DirEntryInfo",
]
