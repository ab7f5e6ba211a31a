"""Sound bank loading and bookkeeping of which sound plays on which channel."""

from __future__ import annotations

import struct
import warnings
from dataclasses import dataclass
from typing import BinaryIO

from .binio import read_uint16, read_uint32

DEFAULT_VOLUME = 128
DEFAULT_CHANNELS = 8
SAMPLE_SCALE = 30
_ENTRY_SIZE = 16
_NAME_SIZE = 8


@dataclass(frozen=True)
class Sound:
    """A mono sound: 16-bit samples scaled up from the stored 8-bit data."""

    name: bytes
    samples: tuple[int, ...]
    volume: int = DEFAULT_VOLUME

    @property
    def pcm(self) -> bytes:
        """Little-endian signed 16-bit PCM of the samples."""
        return struct.pack(f"<{len(self.samples)}h", *self.samples)


def _read_exact(f: BinaryIO, size: int) -> bytes:
    data = f.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_sounds(f: BinaryIO) -> list[Sound]:
    """Read a sound bank: a count, 16-byte directory entries, then 8-bit sample data."""
    count = read_uint16(f)
    directory = f.tell()
    sounds = []
    for index in range(count):
        f.seek(directory + index * _ENTRY_SIZE)
        name = _read_exact(f, _NAME_SIZE)
        offset = read_uint32(f)
        length = read_uint32(f)
        raw = b""
        if length > 0:
            f.seek(offset)
            raw = _read_exact(f, length)
        samples = tuple(v * SAMPLE_SCALE for v in struct.unpack(f"{length}b", raw))
        sounds.append(Sound(name=name, samples=samples))
    return sounds


class ChannelTable:
    """Assigns sounds to a fixed number of channels and tracks their ids."""

    def __init__(self, sound_count: int, channels: int = DEFAULT_CHANNELS) -> None:
        self.sound_count = sound_count
        self._channels: list[tuple[int, int] | None] = [None] * channels

    def play(self, sound: int, sound_id: int = -1) -> int | None:
        """Play on the first free channel and return it, or ``None`` if none started."""
        for channel, slot in enumerate(self._channels):
            if slot is None:
                return channel if self.play_on(channel, sound, sound_id) else None
        return None

    def play_on(self, channel: int, sound: int, sound_id: int) -> bool:
        """Start ``sound`` on ``channel``; warns and returns False for an unknown sound."""
        if not 0 <= channel < len(self._channels):
            raise IndexError(f"no channel {channel}")
        if not 0 <= sound < self.sound_count:
            warnings.warn("Attempt to play non-existent sound", RuntimeWarning, stacklevel=2)
            return False
        self._channels[channel] = (sound, sound_id)
        return True

    def stop(self, sound_id: int) -> None:
        """Halt every channel playing a sound with ``sound_id``."""
        self._channels = [
            None if slot is not None and slot[1] == sound_id else slot for slot in self._channels
        ]

    def finish(self, channel: int) -> None:
        """Mark ``channel`` as having finished playing."""
        if not 0 <= channel < len(self._channels):
            raise IndexError(f"no channel {channel}")
        self._channels[channel] = None

    def is_playing(self, sound_id: int) -> bool:
        return any(slot is not None and slot[1] == sound_id for slot in self._channels)