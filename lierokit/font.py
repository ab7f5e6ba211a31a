"""Bitmap font of 7x8 glyphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .blit import Surface

GLYPH_COUNT = 250
GLYPH_WIDTH = 7
GLYPH_HEIGHT = 8
_RECORD_SIZE = 64
FONT_FILE_SIZE = GLYPH_COUNT * _RECORD_SIZE + 1

TextLike = Union[str, bytes, bytearray]


def _text_bytes(text: TextLike) -> bytes:
    if isinstance(text, str):
        return text.encode("latin-1")
    return bytes(text)


@dataclass
class Glyph:
    """One character: 8 rows of 7 mask bytes, and its advance width."""

    data: bytes = field(default_factory=lambda: bytes(GLYPH_WIDTH * GLYPH_HEIGHT))
    width: int = 0


class Font:
    """Draws text onto a surface using a set of glyphs."""

    def __init__(self, glyphs: Sequence[Glyph] | None = None) -> None:
        self.glyphs = list(glyphs) if glyphs is not None else [Glyph() for _ in range(GLYPH_COUNT)]

    @classmethod
    def from_bytes(cls, data: bytes) -> Font:
        """Parse a font image: one leading byte, then 64-byte glyph records."""
        if len(data) < FONT_FILE_SIZE:
            raise ValueError(f"font data needs {FONT_FILE_SIZE} bytes, got {len(data)}")
        glyphs = []
        for i in range(GLYPH_COUNT):
            record = data[i * _RECORD_SIZE + 1 : (i + 1) * _RECORD_SIZE + 1]
            rows = b"".join(
                record[y * 8 : y * 8 + GLYPH_WIDTH] for y in range(GLYPH_HEIGHT)
            )
            glyphs.append(Glyph(data=bytes(rows), width=record[63]))
        return cls(glyphs)

    @classmethod
    def load(cls, path: str) -> Font:
        with open(path, "rb") as f:
            return cls.from_bytes(f.read(FONT_FILE_SIZE))

    def _draw_glyph(self, surface: Surface, glyph: Glyph, x: int, y: int, colour: int) -> None:
        for index, mask in enumerate(glyph.data):
            if mask:
                row, col = divmod(index, GLYPH_WIDTH)
                surface.set_pixel(x + col, y + row, colour)

    def draw_char(self, surface: Surface, c: int | str, x: int, y: int, colour: int) -> None:
        """Draw the glyph stored at index ``c`` (codes 2-251 only)."""
        code = ord(c) if isinstance(c, str) else c
        if 2 <= code < 252 and 0 <= x < surface.width - GLYPH_WIDTH and code < len(self.glyphs):
            self._draw_glyph(surface, self.glyphs[code], x, y, colour)

    def draw_text(self, surface: Surface, text: TextLike, x: int, y: int, colour: int) -> None:
        """Draw text; NUL and newline start a new line 8 pixels lower."""
        if not 0 <= y < surface.height - GLYPH_HEIGHT:
            return
        origin_x = x
        for code in _text_bytes(text):
            if code == 0 or code == 0x0A:
                x = origin_x
                y += GLYPH_HEIGHT
            elif 2 <= code < 252:
                glyph = self.glyphs[code - 2]
                if 0 <= x < surface.width - GLYPH_WIDTH:
                    self._draw_glyph(surface, glyph, x, y, colour)
                x += glyph.width

    def get_width(self, text: TextLike) -> int:
        return sum(self.glyphs[c - 2].width for c in _text_bytes(text) if 2 <= c < 252)