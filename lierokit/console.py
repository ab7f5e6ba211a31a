"""Text console used for start-up messages and warnings."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

DEFAULT_ATTRIBUTES = 0x07
WARNING_ATTRIBUTES = 0x4F
_CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


class Console:
    """Writes to a text stream and tracks DOS-style colour attributes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._attributes = DEFAULT_ATTRIBUTES

    def set_attributes(self, attr: int) -> None:
        self._attributes = attr & 0xFF

    def get_attributes(self) -> int:
        return self._attributes

    def write(self, text: str) -> None:
        self.stream.write(text)

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")

    def write_text_bar(self, text: str, bar_format: int) -> None:
        """Write a full-width bar; a leading NUL plus two colour bytes set its attributes."""
        if len(text) >= 3 and text[0] == "\0":
            self.set_attributes(ord(text[1]) + (ord(text[2]) << 4))
            text = text[3:]
        self.write_line(text)
        self.set_attributes(bar_format)

    def wait_for_any_key(self) -> None:
        """Block until the user presses Enter, when attached to a terminal."""
        stdin = sys.stdin
        if stdin is not None and stdin.isatty():
            stdin.readline()

    def clear(self) -> None:
        """Clear the screen when the stream is a terminal."""
        isatty = getattr(self.stream, "isatty", None)
        if isatty is not None and isatty():
            self.stream.write(_CLEAR_SEQUENCE)
            self.stream.flush()

    @contextmanager
    def local_attributes(self, attr: int) -> Iterator[None]:
        """Use ``attr`` inside the block, restoring the previous attributes after."""
        old = self.get_attributes()
        self.set_attributes(attr)
        try:
            yield
        finally:
            self.set_attributes(old)

    def write_warning(self, text: str) -> None:
        with self.local_attributes(WARNING_ATTRIBUTES):
            self.write("WARNING: ")
            self.write_line(text)