"""Menus made of text items drawn with the bitmap font."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from .blit import Surface, draw_rounded_box
from .font import Font

SELECTED_COLOUR = 168
ITEM_HEIGHT = 8
_ENCODING = "latin-1"


@dataclass
class MenuItem:
    """A single menu entry with its normal and disabled colours."""

    colour: int
    dis_colour: int
    string: str

    def draw(
        self,
        surface: Surface,
        font: Font,
        x: int,
        y: int,
        selected: bool,
        disabled: bool,
        centered: bool,
    ) -> None:
        """Draw the item; a selected item gets a box, others a drop shadow."""
        width = font.get_width(self.string)
        if centered:
            x -= width >> 1

        if selected:
            draw_rounded_box(surface, x, y, 0, 7, width)
        else:
            font.draw_text(surface, self.string, x + 3, y + 2, 0)

        if disabled:
            colour = self.dis_colour
        elif selected:
            colour = SELECTED_COLOUR
        else:
            colour = self.colour

        font.draw_text(surface, self.string, x + 2, y + 1, colour)


@dataclass
class Menu:
    """An ordered list of items drawn one below the other."""

    centered: bool = False
    items: list[MenuItem] = field(default_factory=list)
    item_height: int = ITEM_HEIGHT

    def read_items(
        self,
        f: BinaryIO,
        length: int,
        count: int,
        colour_prefix: bool,
        colour: int = 0,
        dis_colour: int = 0,
    ) -> None:
        """Append ``count`` items stored as fixed-size Pascal records of ``length`` bytes.

        With ``colour_prefix`` each record carries its own colour in its third
        byte, which then also applies to the following records.
        """
        for _ in range(count):
            record = f.read(length)
            if len(record) != length:
                raise EOFError(f"expected {length} bytes, got {len(record)}")
            offset = 1
            text_len = record[0]
            if colour_prefix:
                colour = dis_colour = record[2]
                text_len -= 2
                offset += 2
            if text_len < 0 or offset + text_len > length:
                raise ValueError("menu item length does not fit its record")
            text = record[offset : offset + text_len].decode(_ENCODING)
            self.items.append(MenuItem(colour, dis_colour, text))

    def draw(
        self,
        surface: Surface,
        font: Font,
        x: int,
        y: int,
        disabled: bool,
        selection: int = -1,
        first_item: int = 0,
        last_item: int = -1,
    ) -> None:
        """Draw items ``first_item`` through ``last_item`` (``-1`` means the last one)."""
        if last_item == -1:
            last_item = len(self.items) - 1
        for index in range(first_item, last_item + 1):
            selected = not disabled and index == selection
            self.items[index].draw(surface, font, x, y, selected, disabled, self.centered)
            y += self.item_height