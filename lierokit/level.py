"""The level bitmap: one palette index per pixel."""

from __future__ import annotations

from .blit import ClipRect
from .filesystem import file_length, tolerant_open

LEVEL_WIDTH = 504
LEVEL_HEIGHT = 350
POWERLEVEL_MARKER = b"POWERLEVEL"


class Level:
    """A width x height grid of palette indices."""

    def __init__(self, width: int = LEVEL_WIDTH, height: int = LEVEL_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("level dimensions must be positive")
        self.width = width
        self.height = height
        self.data = bytearray(width * height)

    def _index(self, x: int, y: int) -> int:
        if not self.inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside the level")
        return x + y * self.width

    def pixel(self, x: int, y: int) -> int:
        return self.data[self._index(x, y)]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self.data[self._index(x, y)] = value & 0xFF

    def checked_pixel_wrap(self, x: int, y: int) -> int:
        """Read by linear index, wrapping across rows; 0 outside the data."""
        index = x + y * self.width
        if 0 <= index < len(self.data):
            return self.data[index]
        return 0

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def rect(self) -> ClipRect:
        return ClipRect(0, 0, self.width, self.height)

    def load(self, path: str, load_powerlevel_palette: bool = True) -> bytes | None:
        """Load a level file into a standard-size level.

        Returns the palette data that follows a POWERLEVEL marker when one is
        present and ``load_powerlevel_palette`` is set, otherwise ``None``.
        """
        self.width = LEVEL_WIDTH
        self.height = LEVEL_HEIGHT
        size = self.width * self.height
        if len(self.data) != size:
            self.data = (self.data + bytearray(size))[:size]

        with tolerant_open(path, "rb") as f:
            palette = None
            if file_length(f) > size and load_powerlevel_palette:
                f.seek(size)
                if f.read(len(POWERLEVEL_MARKER)) == POWERLEVEL_MARKER:
                    palette = f.read()
            f.seek(0)
            body = f.read(size)
        self.data[: len(body)] = body
        return palette