"""Path helpers and case-tolerant file opening."""

from __future__ import annotations

import os
from typing import IO, Iterator

_SEPARATORS = "\\/"


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def change_leaf(path: str, new_leaf: str) -> str:
    """Replace the last path component with ``new_leaf``."""
    sep = _last_separator(path)
    if sep < 0:
        return new_leaf
    return path[: sep + 1] + new_leaf


def get_home() -> str:
    """Return ``$HOME/.liero``, creating it if needed, or ``""`` without HOME."""
    home = os.environ.get("HOME")
    if home is None:
        return ""
    folder = home + "/.liero"
    try:
        os.mkdir(folder, 0o755)
    except OSError:
        pass
    return folder


def get_root(path: str) -> str:
    sep = _last_separator(path)
    if sep < 0:
        return ""
    return path[:sep]


def get_basename(path: str) -> str:
    dot = path.rfind(".")
    if dot < 0:
        return path
    return path[:dot]


def get_extension(path: str) -> str:
    dot = path.rfind(".")
    if dot < 0:
        return ""
    return path[dot + 1 :]


def join_path(root: str, leaf: str) -> str:
    if root and root[-1] not in _SEPARATORS:
        return root + "/" + leaf
    return root + leaf


def file_exists(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def _name_variants(name: str) -> list[str]:
    upper = name.upper()
    lower = name.lower()
    capital = lower[:1].upper() + lower[1:]
    return [name, upper, lower, capital]


def tolerant_open(name: str, mode: str = "rb") -> IO:
    """Open ``name``, retrying in upper case, lower case and capitalised."""
    for candidate in _name_variants(name):
        try:
            return open(candidate, mode)
        except OSError:
            continue
    raise FileNotFoundError(f"Could not open '{name}'")


def file_length(f: IO) -> int:
    """Return the size of an open file without moving its position."""
    old = f.tell()
    f.seek(0, os.SEEK_END)
    length = f.tell()
    f.seek(old, os.SEEK_SET)
    return length


def iter_directory(path: str) -> Iterator[str]:
    """Iterate over the entry names of a directory, skipping ``.`` and ``..``."""
    if not path:
        raise FileNotFoundError("Directory iterator: empty path")
    names = os.listdir(path)
    return iter([n for n in names if n not in (".", "..")])