"""Locations of the game data files and a cache of open handles."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import IO, Callable

from .filesystem import get_home, join_path, tolerant_open

CLOSE_AFTER_MS = 5000


def _ticks() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class _CachedFile:
    handle: IO
    last_touch: int


class DataFiles:
    """Tracks the data and config roots and keeps recently used files open."""

    def __init__(self, data_root: str = "./data", clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _ticks
        self._files: dict[str, _CachedFile] = {}
        self.config_root = ""
        self.set_data_root(data_root)

    def set_data_root(self, path: str) -> None:
        self.data_root = path
        self.chr_path = join_path(path, "liero.chr")
        self.snd_path = join_path(path, "liero.snd")
        self.opt_path = join_path(path, "liero.opt")

    def set_config_root(self, use_home: bool = True) -> None:
        """Use the home config folder when available, else the data root."""
        root = get_home() if use_home else ""
        self.config_root = root or self.data_root

    def open(self, name: str) -> IO:
        """Return a cached binary handle for ``name``, opening it if needed."""
        cached = self._files.get(name)
        if cached is not None:
            cached.last_touch = self._clock()
            return cached.handle
        try:
            handle = tolerant_open(name, "rb")
        except FileNotFoundError:
            raise FileNotFoundError(f"Could not open '{name}'") from None
        self._files[name] = _CachedFile(handle, self._clock())
        return handle

    def open_snd(self) -> IO:
        return self.open(self.snd_path)

    def open_chr(self) -> IO:
        return self.open(self.chr_path)

    def process(self) -> None:
        """Close files that have not been used for a while."""
        now = self._clock()
        stale = [n for n, c in self._files.items() if now - c.last_touch > CLOSE_AFTER_MS]
        for name in stale:
            self._files.pop(name).handle.close()

    def close_all(self) -> None:
        for cached in self._files.values():
            cached.handle.close()
        self._files.clear()

    def __enter__(self) -> DataFiles:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_all()