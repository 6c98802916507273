"""Branch and continuation glyph sets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphSet:
    """Four equal-width blocks used to draw one tree level."""

    tee: str
    elbow: str
    pipe: str
    space: str

    def branch(self, is_last: bool) -> str:
        return self.elbow if is_last else self.tee

    def continuation(self, is_last: bool) -> str:
        """Prefix block children inherit from a sibling at this level."""
        return self.space if is_last else self.pipe


UNICODE_GLYPHS = GlyphSet(tee="├── ", elbow="└── ", pipe="│   ", space="    ")
ASCII_GLYPHS = GlyphSet(tee="|-- ", elbow="`-- ", pipe="|   ", space="    ")


def glyphs_for(ascii_only: bool) -> GlyphSet:
    return ASCII_GLYPHS if ascii_only else UNICODE_GLYPHS
