"""Directory listing primitives for the tree walker.

This package contains non-rendering helpers:
- entry datatypes classified from link-level and followed metadata
- the fixed exclusion set of noise directories
- single-directory listing with per-entry diagnostics
"""

from __future__ import annotations

from .types import DirEntryInfo, EntryKind
from .fs import EXCLUDED_NAMES, classify_entry, list_directory_entries

__all__ = [
    "DirEntryInfo",
    "EntryKind",
    "EXCLUDED_NAMES",
    "classify_entry",
    "list_directory_entries",
]
