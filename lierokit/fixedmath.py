"""16.16 fixed-point helpers and the sine/cosine tables."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .binio import read_sint32

TABLE_SIZE = 128


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def itof(value: int) -> int:
    """Convert an integer to 16.16 fixed point (wrapping at 32 bits)."""
    return _wrap32(value << 16)


def ftoi(value: int) -> int:
    """Convert 16.16 fixed point to an integer, rounding towards minus infinity."""
    return value >> 16


def vector_length(x: int, y: int) -> int:
    return math.isqrt(x * x + y * y)


def distance_to(x1: int, y1: int, x2: int, y2: int) -> int:
    return vector_length(x1 - x2, y1 - y2)


@dataclass(frozen=True)
class TrigTables:
    """Fixed-point sine and cosine for 128 angle steps."""

    sin: tuple[int, ...]
    cos: tuple[int, ...]


def load_tables(path: str) -> TrigTables:
    """Read interleaved (cos, sin) signed 32-bit pairs from ``path``."""
    sin: list[int] = []
    cos: list[int] = []
    with open(path, "rb") as f:
        for _ in range(TABLE_SIZE):
            cos.append(read_sint32(f))
            sin.append(read_sint32(f))
    return TrigTables(sin=tuple(sin), cos=tuple(cos))