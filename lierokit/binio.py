"""Little-endian integer and Pascal-string helpers for binary game files."""

from __future__ import annotations

import struct
from typing import BinaryIO

_ENCODING = "latin-1"


def _read_exact(f: BinaryIO, size: int) -> bytes:
    data = f.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_uint8(f: BinaryIO) -> int:
    return _read_exact(f, 1)[0]


def write_uint8(f: BinaryIO, value: int) -> None:
    f.write(bytes((value & 0xFF,)))


def read_sint8(f: BinaryIO) -> int:
    return struct.unpack("<b", _read_exact(f, 1))[0]


def read_uint16(f: BinaryIO) -> int:
    return struct.unpack("<H", _read_exact(f, 2))[0]


def write_uint16(f: BinaryIO, value: int) -> None:
    f.write(struct.pack("<H", value & 0xFFFF))


def read_sint16(f: BinaryIO) -> int:
    return struct.unpack("<h", _read_exact(f, 2))[0]


def read_uint32(f: BinaryIO) -> int:
    return struct.unpack("<I", _read_exact(f, 4))[0]


def read_sint32(f: BinaryIO) -> int:
    return struct.unpack("<i", _read_exact(f, 4))[0]


def read_pascal_string(f: BinaryIO) -> str:
    """Read a length byte followed by that many characters."""
    length = read_uint8(f)
    return _read_exact(f, length).decode(_ENCODING)


def read_pascal_field(f: BinaryIO, field_len: int) -> str:
    """Read a fixed-size field whose first byte is the string length."""
    field = _read_exact(f, field_len)
    length = field[0]
    return field[1 : 1 + length].decode(_ENCODING)


def write_pascal_string(f: BinaryIO, text: str, field_len: int) -> None:
    """Write ``text`` into a fixed-size Pascal field, truncating and zero-padding."""
    raw = text.encode(_ENCODING)
    length = len(raw) if len(raw) < field_len else field_len - 1
    f.write(bytes((length,)))
    f.write(raw[:length])
    f.write(bytes(field_len - 1 - length))


def read_pascal_string_at(f: BinaryIO, location: int) -> str:
    f.seek(location)
    return read_pascal_string(f)