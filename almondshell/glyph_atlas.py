"""Row-by-row layout of font glyphs inside a fixed-size atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

GlyphMetrics = tuple[int, int, int, int, int]
GlyphLoader = Callable[[str], Optional[GlyphMetrics]]


class GlyphAtlasFullError(RuntimeError):
    """Raised when the atlas has no room left for a glyph."""


@dataclass(frozen=True)
class Glyph:
    """Placement and metrics of one glyph."""

    size: tuple[int, int]
    bearing: tuple[int, int]
    advance: int
    tex_coord_start: tuple[float, float]
    tex_coord_end: tuple[float, float]


class GlyphAtlas:
    """Packs glyph bitmaps left to right in rows separated by padding.

    ``loader`` maps a character to its metrics ``(width, rows, left, top,
    advance)``, with advance in 1/64 pixel units, or None if it has none.
    """

    def __init__(
        self,
        font_size: int = 48,
        atlas_width: int = 4096,
        atlas_height: int = 4096,
        padding: int = 2,
        loader: Optional[GlyphLoader] = None,
    ) -> None:
        self.font_size = font_size
        self.atlas_width = atlas_width
        self.atlas_height = atlas_height
        self.padding = padding
        self._loader = loader
        self._x_offset = padding
        self._y_offset = padding
        self._row_height = 0
        self._glyphs: dict[str, Glyph] = {}

    def add_glyph(
        self, char: str, width: int, rows: int, left: int, top: int, advance: int
    ) -> Glyph:
        """Place a glyph bitmap of ``width`` x ``rows`` pixels and store its metrics."""
        if len(char) != 1:
            raise ValueError("a glyph is a single character")
        pad = self.padding
        if self._x_offset + width + pad > self.atlas_width:
            self._x_offset = pad
            self._y_offset += self._row_height + pad
            self._row_height = 0
            if self._y_offset + rows + pad > self.atlas_height:
                raise GlyphAtlasFullError(
                    "Texture atlas size is insufficient for all glyphs."
                )
        x, y = self._x_offset, self._y_offset
        self._row_height = max(self._row_height, rows)
        glyph = Glyph(
            size=(width, rows),
            bearing=(left, top),
            advance=advance >> 6,
            tex_coord_start=(x / self.atlas_width, y / self.atlas_height),
            tex_coord_end=((x + width) / self.atlas_width, (y + rows) / self.atlas_height),
        )
        self._glyphs[char] = glyph
        self._x_offset += width + pad
        return glyph

    def get_character(self, char: str) -> Glyph:
        """Return a glyph, loading it through the loader the first time."""
        glyph = self._glyphs.get(char)
        if glyph is not None:
            return glyph
        metrics = self._loader(char) if self._loader is not None else None
        if metrics is None:
            raise KeyError(f"Failed to load character: {char!r}")
        return self.add_glyph(char, *metrics)

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs