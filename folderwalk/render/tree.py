"""Depth-first tree rendering with prefix accumulation and content inlining.

One directory level is listed, sorted, and written before the next sibling
is looked at, giving a pre-order walk. Symlinked directories are drawn as
leaves and never entered.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..file_tree_model import EXCLUDED_NAMES, DirEntryInfo, EntryKind, list_directory_entries
from .content import CONTENT_END_MARKER, CONTENT_START_MARKER, content_lines, read_file_text
from .glyphs import UNICODE_GLYPHS, GlyphSet

CONTENT_INDENT = "    "
UNREADABLE_TARGET = "<unreadable>"


@dataclass(frozen=True)
class RenderConfig:
    """Read-only settings for one run."""

    glyphs: GlyphSet = UNICODE_GLYPHS
    show_content: bool = False
    # Output file to hide from its own listing; ``None`` for stream sinks.
    self_path: Path | None = None
    excluded_names: frozenset[str] = EXCLUDED_NAMES


@dataclass(frozen=True)
class TraversalState:
    """Per-level walk state handed from a directory to its children."""

    depth: int = 0
    max_depth: int | None = None
    prefix: str = ""
    is_root: bool = True

    @property
    def is_pruned(self) -> bool:
        return self.max_depth is not None and self.depth >= self.max_depth

    @property
    def line_prefix(self) -> str:
        return "" if self.is_root else self.prefix

    def descend(self, block: str) -> TraversalState:
        return TraversalState(
            depth=self.depth + 1,
            max_depth=self.max_depth,
            prefix=block if self.is_root else self.prefix + block,
            is_root=False,
        )


@dataclass
class _LevelFrame:
    entries: list[DirEntryInfo]
    state: TraversalState
    index: int = 0


def sort_entries(entries: list[DirEntryInfo]) -> list[DirEntryInfo]:
    """Directories (and links to them) first, then case-insensitive by name.

    The sort is stable, so names equal after lower-casing keep listing order.
    """
    return sorted(entries, key=lambda entry: (not entry.sorts_as_directory, entry.name.lower()))


def display_name(entry: DirEntryInfo) -> str:
    """Return the tree label: ``name/`` for directories, ``name -> target`` for links."""
    if entry.is_symlink:
        try:
            target = os.readlink(entry.path)
        except OSError:
            target = UNREADABLE_TARGET
        return f"{entry.name} -> {target}"
    if entry.is_dir:
        return f"{entry.name}/"
    return entry.name


def root_display_name(root: Path) -> str:
    """Final path component of ``root``, or the literal path when it has none."""
    name = root.name
    if not name or name == "..":
        return str(root)
    return name


def _write_content(path: Path, prefix: str, sink: TextIO) -> None:
    indent = prefix + CONTENT_INDENT
    try:
        text = read_file_text(path)
    except (OSError, ValueError) as exc:
        sink.write(f"{indent}[Could not read file: {exc}]\n")
        return
    sink.write(f"{indent}{CONTENT_START_MARKER}\n")
    for line in content_lines(text):
        sink.write(f"{indent}{line}\n")
    sink.write(f"{indent}{CONTENT_END_MARKER}\n")


def _open_level(directory: Path, state: TraversalState, config: RenderConfig) -> _LevelFrame | None:
    if state.is_pruned:
        return None
    entries = list_directory_entries(directory, config.self_path, config.excluded_names)
    return _LevelFrame(entries=sort_entries(entries), state=state)


def render_tree(directory: Path, state: TraversalState, config: RenderConfig, sink: TextIO) -> None:
    """Write the lines for ``directory``'s children and all their descendants.

    Traversal keeps an explicit stack of open levels instead of recursing, so
    deep trees are not bounded by the interpreter recursion limit.
    """
    first = _open_level(directory, state, config)
    if first is None:
        return
    stack = [first]
    glyphs = config.glyphs
    while stack:
        frame = stack[-1]
        if frame.index >= len(frame.entries):
            stack.pop()
            continue
        entry = frame.entries[frame.index]
        is_last = frame.index == len(frame.entries) - 1
        frame.index += 1
        level = frame.state

        sink.write(f"{level.line_prefix}{glyphs.branch(is_last)}{display_name(entry)}\n")

        if config.show_content and entry.kind is EntryKind.FILE:
            _write_content(entry.path, level.prefix, sink)

        if entry.is_dir:
            child = _open_level(entry.path, level.descend(glyphs.continuation(is_last)), config)
            if child is not None:
                stack.append(child)


def write_tree(root: Path, sink: TextIO, config: RenderConfig, max_depth: int | None = None) -> None:
    """Write the root label followed by the full tree below ``root``."""
    sink.write(f"{root_display_name(root)}\n")
    render_tree(root, TraversalState(max_depth=max_depth), config, sink)
