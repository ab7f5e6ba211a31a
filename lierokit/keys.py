"""Translation between DOS keyboard scan codes and SDL key symbols."""

from __future__ import annotations

from enum import IntEnum
from string import ascii_lowercase

_KEY_MEMBERS: list[tuple[str, int]] = [
    ("UNKNOWN", 0),
    ("BACKSPACE", 8),
    ("TAB", 9),
    ("RETURN", 13),
    ("PAUSE", 19),
    ("ESCAPE", 27),
    ("SPACE", 32),
    ("QUOTE", 39),
    ("COMMA", 44),
    ("MINUS", 45),
    ("PERIOD", 46),
    ("SLASH", 47),
    *[(f"DIGIT_{d}", 48 + d) for d in range(10)],
    ("SEMICOLON", 59),
    ("LESS", 60),
    ("EQUALS", 61),
    ("LEFTBRACKET", 91),
    ("BACKSLASH", 92),
    ("RIGHTBRACKET", 93),
    ("BACKQUOTE", 96),
    *[(c.upper(), ord(c)) for c in ascii_lowercase],
    ("DELETE", 127),
    *[(f"KP{d}", 256 + d) for d in range(10)],
    ("KP_PERIOD", 266),
    ("KP_DIVIDE", 267),
    ("KP_MULTIPLY", 268),
    ("KP_MINUS", 269),
    ("KP_PLUS", 270),
    ("KP_ENTER", 271),
    ("KP_EQUALS", 272),
    ("UP", 273),
    ("DOWN", 274),
    ("RIGHT", 275),
    ("LEFT", 276),
    ("INSERT", 277),
    ("HOME", 278),
    ("END", 279),
    ("PAGEUP", 280),
    ("PAGEDOWN", 281),
    *[(f"F{n}", 281 + n) for n in range(1, 16)],
    ("NUMLOCK", 300),
    ("CAPSLOCK", 301),
    ("SCROLLOCK", 302),
    ("RSHIFT", 303),
    ("LSHIFT", 304),
    ("RCTRL", 305),
    ("LCTRL", 306),
    ("RALT", 307),
    ("LALT", 308),
    ("PRINT", 316),
    ("LAST", 323),
]

Key = IntEnum("Key", _KEY_MEMBERS)
Key.__doc__ = "SDL key symbols."

SCAN_CODE_COUNT = 177
FALLBACK_SCAN_CODE = 89


def _blank(count: int) -> list:
    return [Key.UNKNOWN] * count


_DOS_TO_SDL: tuple = tuple(
    [Key.UNKNOWN, Key.ESCAPE]
    + [Key[f"DIGIT_{d}"] for d in (1, 2, 3, 4, 5, 6, 7, 8, 9, 0)]
    + [Key.MINUS, Key.EQUALS, Key.BACKSPACE, Key.TAB]
    + [Key[c] for c in "QWERTYUIOP"]
    + [Key.LEFTBRACKET, Key.RIGHTBRACKET, Key.RETURN, Key.LCTRL]
    + [Key[c] for c in "ASDFGHJKL"]
    + [Key.SEMICOLON, Key.QUOTE, Key.BACKQUOTE, Key.LSHIFT, Key.BACKSLASH]
    + [Key[c] for c in "ZXCVBNM"]
    + [Key.COMMA, Key.PERIOD, Key.SLASH, Key.RSHIFT, Key.KP_MULTIPLY]
    + [Key.LALT, Key.SPACE, Key.CAPSLOCK]
    + [Key[f"F{n}"] for n in range(1, 11)]
    + [Key.NUMLOCK, Key.SCROLLOCK]
    + [Key.KP7, Key.KP8, Key.KP9, Key.KP_MINUS, Key.KP4, Key.KP5, Key.KP6, Key.KP_PLUS]
    + [Key.KP1, Key.KP2, Key.KP3, Key.KP0, Key.KP_PERIOD]
    + _blank(2)
    + [Key.LESS, Key.F11, Key.F12]
    + _blank(27)
    + [Key.KP_ENTER, Key.RCTRL]
    + _blank(12)
    + _blank(1)
    + _blank(10)
    + [Key.KP_DIVIDE]
    + _blank(2)
    + [Key.RALT]
    + _blank(14)
    + [Key.HOME, Key.UP, Key.PAGEUP, Key.UNKNOWN, Key.LEFT, Key.UNKNOWN]
    + [Key.RIGHT, Key.UNKNOWN, Key.END, Key.DOWN, Key.PAGEDOWN, Key.INSERT, Key.DELETE]
    + _blank(5)
)

assert len(_DOS_TO_SDL) == SCAN_CODE_COUNT


def _build_sdl_to_dos() -> tuple[int, ...]:
    table = [FALLBACK_SCAN_CODE] * int(Key.LAST)
    for scan, key in enumerate(_DOS_TO_SDL):
        if key and key < Key.LAST:
            table[key] = scan
    return tuple(table)


_SDL_TO_DOS = _build_sdl_to_dos()


def dos_to_sdl_key(scan: int):
    """Return the SDL key for a DOS scan code, or ``Key.UNKNOWN``."""
    if 0 <= scan < SCAN_CODE_COUNT:
        return _DOS_TO_SDL[scan]
    return Key.UNKNOWN


def sdl_to_dos_key(key: int) -> int:
    """Return the DOS scan code for an SDL key (89 if unmapped, 0 if out of range)."""
    if 0 <= key < Key.LAST:
        return _SDL_TO_DOS[int(key)]
    return 0