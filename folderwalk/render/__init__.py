"""Tree rendering: glyph sets, content inlining, and the depth-first walk."""

from __future__ import annotations

from .content import BinaryContentError, content_lines, read_file_text
from .glyphs import ASCII_GLYPHS, UNICODE_GLYPHS, GlyphSet, glyphs_for
from .tree import (
    RenderConfig,
    TraversalState,
    display_name,
    render_tree,
    root_display_name,
    sort_entries,
    write_tree,
)

__all__ = [
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "GlyphSet",
    "glyphs_for",
    "BinaryContentError",
    "content_lines",
    "read_file_text",
    "RenderConfig",
    "TraversalState",
    "display_name",
    "render_tree",
    "root_display_name",
    "sort_entries",
    "write_tree",
]
