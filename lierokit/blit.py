"""Software blitting and line drawing onto 8-bit palettised surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

from .rand import Rand

_Combine = Callable[[int, int], Optional[int]]


@dataclass
class ClipRect:
    """Axis-aligned clip rectangle given by origin and size."""

    x: int
    y: int
    w: int
    h: int


class Surface:
    """A block of palette indices laid out row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface dimensions must be positive")
        self.width = width
        self.height = height
        self.pitch = width
        self.pixels = bytearray(width * height)
        self.clip_rect = ClipRect(0, 0, width, height)

    def _offset(self, x: int, y: int) -> int:
        offset = y * self.pitch + x
        if not 0 <= offset < len(self.pixels):
            raise IndexError(f"pixel ({x}, {y}) lies outside the surface")
        return offset

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._offset(x, y)]

    def set_pixel(self, x: int, y: int, colour: int) -> None:
        self.pixels[self._offset(x, y)] = colour & 0xFF

    def _fill(self, x: int, y: int, count: int, colour: int) -> None:
        start = self._offset(x, y)
        end = start + count
        if end > len(self.pixels):
            raise IndexError("fill runs past the end of the surface")
        self.pixels[start:end] = bytes((colour & 0xFF,)) * count


def is_inside(rect: ClipRect, x: int, y: int) -> bool:
    return 0 <= x - rect.x < rect.w and 0 <= y - rect.y < rect.h


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_points(from_x: int, from_y: int, to_x: int, to_y: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a Bresenham line, excluding the start, including the end."""
    cx, cy = from_x, from_y
    dx = to_x - from_x
    dy = to_y - from_y
    sx, sy = _sign(dx), _sign(dy)
    dx, dy = abs(dx), abs(dy)
    if dx > dy:
        c = -(dx >> 1)
        while cx != to_x:
            c += dy
            cx += sx
            if c > 0:
                cy += sy
                c -= dx
            yield cx, cy
    else:
        c = -(dy >> 1)
        while cy != to_y:
            c += dx
            cy += sy
            if c > 0:
                cx += sx
                c -= dy
            yield cx, cy


def draw_bar(surface: Surface, x: int, y: int, width: int, colour: int) -> None:
    """Fill a bar two pixels high."""
    if width > 0:
        surface._fill(x, y, width, colour)
        surface._fill(x, y + 1, width, colour)


def draw_rounded_box(surface: Surface, x: int, y: int, colour: int, height: int, width: int) -> None:
    """Fill a box whose four corner pixels are left untouched."""
    height -= 1
    surface._fill(x + 1, y, width + 1, colour)
    for i in range(1, height):
        surface._fill(x, y + i, width + 3, colour)
    surface._fill(x + 1, y + height, width + 1, colour)


def _clip(
    clip: ClipRect, x: int, y: int, width: int, height: int, pitch: int
) -> tuple[int, int, int, int, int] | None:
    src = 0
    top = y - clip.y
    if top < 0:
        src += -top * pitch
        height += top
        y = clip.y
    bottom = y + height - (clip.y + clip.h)
    if bottom > 0:
        height -= bottom
    left = x - clip.x
    if left < 0:
        src -= left
        width += left
        x = clip.x
    right = x + width - (clip.x + clip.w)
    if right > 0:
        width -= right
    if width <= 0 or height <= 0:
        return None
    return x, y, width, height, src


def _rows(
    surface: Surface, image: Sequence[int], x: int, y: int, width: int, height: int, pitch: int
) -> Iterator[tuple[int, bytes]]:
    clipped = _clip(surface.clip_rect, x, y, width, height, pitch)
    if clipped is None:
        return
    x, y, width, height, src = clipped
    dst = y * surface.pitch + x
    for _ in range(height):
        row = bytes(image[src : src + width])
        if len(row) != width:
            raise ValueError("image data is smaller than its stated size")
        if dst < 0 or dst + width > len(surface.pixels):
            raise IndexError("blit runs outside the surface")
        yield dst, row
        src += pitch
        dst += surface.pitch


def _blit(
    surface: Surface,
    image: Sequence[int],
    x: int,
    y: int,
    width: int,
    height: int,
    pitch: int,
    combine: _Combine,
) -> None:
    pixels = surface.pixels
    for dst, row in _rows(surface, image, x, y, width, height, pitch):
        for i, c in enumerate(row):
            new = combine(c, pixels[dst + i])
            if new is not None:
                pixels[dst + i] = new & 0xFF


def blit_image_no_key_colour(
    surface: Surface,
    image: Sequence[int],
    x: int,
    y: int,
    width: int,
    height: int,
    pitch: int | None = None,
) -> None:
    """Copy an image verbatim, colour 0 included."""
    if pitch is None:
        pitch = width
    for dst, row in _rows(surface, image, x, y, width, height, pitch):
        surface.pixels[dst : dst + len(row)] = row


def _opaque(c: int, dest: int) -> int | None:
    return c if c else None


def blit_image(surface: Surface, image: Sequence[int], x: int, y: int, width: int, height: int) -> None:
    """Copy an image, treating colour 0 as transparent."""
    _blit(surface, image, x, y, width, height, width, _opaque)


def _over_range(c: int, dest: int) -> int | None:
    return c if c and ((dest - 160) & 0xFF) < 8 else None


def blit_image_r(surface: Surface, image: Sequence[int], x: int, y: int, width: int, height: int) -> None:
    """Copy opaque pixels only where the destination is in colours 160-167."""
    _blit(surface, image, x, y, width, height, width, _over_range)


_FIRE_CONE_SHADES = {0: (116, 5), 1: (114, 3), 2: (112, 1)}
FIRE_CONE_SIZE = 16


def blit_fire_cone(surface: Surface, fc: int, image: Sequence[int], x: int, y: int) -> None:
    """Blit a 16x16 fire cone frame, darkened according to ``fc``."""
    shade = _FIRE_CONE_SHADES.get(fc)
    if shade is None:
        combine: _Combine = _opaque
    else:
        threshold, amount = shade

        def combine(c: int, dest: int) -> int | None:
            return c - amount if c > threshold else None

    _blit(surface, image, x, y, FIRE_CONE_SIZE, FIRE_CONE_SIZE, FIRE_CONE_SIZE, combine)


def draw_ninjarope(
    surface: Surface,
    from_x: int,
    from_y: int,
    to_x: int,
    to_y: int,
    colour_begin: int,
    colour_end: int,
) -> None:
    """Draw a rope whose colour cycles through ``[colour_begin, colour_end)``."""
    colour = colour_begin
    clip = surface.clip_rect
    for cx, cy in line_points(from_x, from_y, to_x, to_y):
        colour += 1
        if colour == colour_end:
            colour = colour_begin
        if is_inside(clip, cx, cy):
            surface.set_pixel(cx, cy, colour)


def draw_laser_sight(surface: Surface, from_x: int, from_y: int, to_x: int, to_y: int, rand: Rand) -> None:
    """Sprinkle a dotted laser line using colours 83 and 84."""
    clip = surface.clip_rect
    for cx, cy in line_points(from_x, from_y, to_x, to_y):
        if rand.below(5) == 0 and is_inside(clip, cx, cy):
            surface.set_pixel(cx, cy, rand.below(2) + 83)


def draw_line(surface: Surface, from_x: int, from_y: int, to_x: int, to_y: int, colour: int) -> None:
    clip = surface.clip_rect
    for cx, cy in line_points(from_x, from_y, to_x, to_y):
        if is_inside(clip, cx, cy):
            surface.set_pixel(cx, cy, colour)