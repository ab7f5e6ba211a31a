"""Game options and their binary settings file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

from .binio import read_pascal_field, read_uint8, read_uint16, write_pascal_string, write_uint8, write_uint16
from .filesystem import file_length, tolerant_open
from .rand import Rand

SETTINGS_FILE_SIZE = 155
WEAPON_COUNT = 40
CONTROL_COUNT = 7
SELECTABLE_WEAPONS = 5
WORM_ANIM_TAB = (0, 7, 0, 14)
NAME_FIELD_LEN = 21
LEVEL_FIELD_LEN = 9
_CONTROLS_OFFSET = 0x84
_SIGNATURE = b"\x05LIERO\x00\x00\x00"
_KEY_LIMIT = 177
_WEAPON_STATE_LIMIT = 3
_NAME_PATTERN = re.compile(rb"[^\r\n]+(?=[\r\n])")

_DEFAULT_WEAP_TABLE = (
    0, 0, 0, 0, 0, 1, 0, 0, 1, 1,
    0, 1, 0, 1, 1, 1, 1, 0, 0, 1,
    1, 1, 1, 1, 0, 1, 1, 1, 1, 1,
    1, 0, 1, 1, 1, 1, 1, 0, 0, 1,
)


class SettingsError(ValueError):
    """Raised when a settings file cannot be parsed."""


class GameMode(IntEnum):
    KILL_EM_ALL = 0
    GAME_OF_TAG = 1
    CTF = 2
    SIMPLE_CTF = 3


@dataclass
class WormSettings:
    """Per-player options stored in the settings file."""

    colour: int = 0
    sel_weap_x: int = 0
    health: int = 100
    controls: list[int] = field(default_factory=lambda: [0] * CONTROL_COUNT)
    controller: int = 0
    name: str = ""
    random_name: bool = False
    rgb: list[int] = field(default_factory=lambda: [0, 0, 0])
    weapons: list[int] = field(default_factory=lambda: [0] * SELECTABLE_WEAPONS)


def _default_worms() -> list[WormSettings]:
    return [
        WormSettings(
            colour=32,
            sel_weap_x=50,
            health=100,
            controls=[160, 168, 163, 165, 42, 57, 56],
            controller=0,
            name="Player",
            rgb=[26, 26, 63],
        ),
        WormSettings(
            colour=41,
            sel_weap_x=210,
            health=100,
            controls=[17, 31, 30, 32, 34, 35, 33],
            controller=1,
            name="RetroFW",
            rgb=[15, 43, 15],
        ),
    ]


def generate_name(worm_settings: WormSettings, names_path: str, rand: Rand) -> None:
    """Give the worm a random name from a line-based names file, if one is usable.

    Only lines terminated by CR or LF count; a missing file leaves the worm unchanged.
    """
    try:
        with open(names_path, "rb") as f:
            data = f.read()
    except OSError:
        return
    names = [m.group().decode("latin-1") for m in _NAME_PATTERN.finditer(data)]
    if names:
        worm_settings.name = names[rand.below(len(names))]
        worm_settings.random_name = True


@dataclass
class Settings:
    """All options that persist between sessions."""

    weap_table: list[int] = field(default_factory=lambda: list(_DEFAULT_WEAP_TABLE))
    max_bonuses: int = 4
    blood: int = 100
    time_to_lose: int = 600
    flags_to_win: int = 20
    game_mode: int = GameMode.KILL_EM_ALL
    shadow: bool = True
    load_change: bool = True
    names_on_bonuses: bool = True
    regenerate_level: bool = False
    lives: int = 15
    loading_time: int = 100
    random_level: bool = True
    level_file: str = ""
    map: bool = True
    screen_sync: bool = True
    worm_settings: list[WormSettings] = field(default_factory=_default_worms)

    def load(self, path: str, names_path: str | None = None, rand: Rand | None = None) -> None:
        """Read settings from ``path``; empty names are drawn from ``names_path``."""
        with tolerant_open(path, "rb") as f:
            if file_length(f) < SETTINGS_FILE_SIZE:
                raise SettingsError(f"settings file '{path}' is too short")

            self.max_bonuses = read_uint8(f)
            self.loading_time = read_uint16(f)
            self.lives = read_uint16(f)
            self.time_to_lose = read_uint16(f)
            self.flags_to_win = read_uint16(f)

            self.screen_sync = read_uint8(f) != 0
            self.map = read_uint8(f) != 0
            for worm in self.worm_settings:
                worm.controller = read_uint8(f) & 0x1
            self.random_level = read_uint8(f) != 0
            self.blood = read_uint16(f)
            self.game_mode = read_uint8(f)
            self.names_on_bonuses = read_uint8(f) != 0
            self.regenerate_level = read_uint8(f) != 0
            self.shadow = read_uint8(f) != 0

            self.weap_table = [min(read_uint8(f), _WEAPON_STATE_LIMIT - 1) for _ in range(WEAPON_COUNT)]

            for worm in self.worm_settings:
                worm.rgb = [read_uint8(f) & 63 for _ in range(3)]
            for worm in self.worm_settings:
                worm.weapons = [read_uint8(f) for _ in range(SELECTABLE_WEAPONS)]
            for worm in self.worm_settings:
                worm.health = read_uint16(f)
            for worm in self.worm_settings:
                worm.name = read_pascal_field(f, NAME_FIELD_LEN)

            self.load_change = read_uint8(f) != 0

            f.seek(_CONTROLS_OFFSET)
            for worm in self.worm_settings:
                worm.controls = [min(read_uint8(f), _KEY_LIMIT - 1) for _ in range(CONTROL_COUNT)]

            self.level_file = read_pascal_field(f, LEVEL_FIELD_LEN)

        for worm in self.worm_settings:
            if worm.name:
                worm.random_name = False
            elif names_path is not None:
                generate_name(worm, names_path, rand if rand is not None else Rand())

    def save(self, path: str) -> None:
        """Write settings to ``path`` in the 155-byte file format."""
        with open(path, "wb") as f:
            write_uint8(f, self.max_bonuses)
            write_uint16(f, self.loading_time)
            write_uint16(f, self.lives)
            write_uint16(f, self.time_to_lose)
            write_uint16(f, self.flags_to_win)

            write_uint8(f, int(self.screen_sync))
            write_uint8(f, int(self.map))
            for worm in self.worm_settings:
                write_uint8(f, worm.controller)
            write_uint8(f, int(self.random_level))
            write_uint16(f, self.blood)
            write_uint8(f, int(self.game_mode))
            write_uint8(f, int(self.names_on_bonuses))
            write_uint8(f, int(self.regenerate_level))
            write_uint8(f, int(self.shadow))

            f.write(bytes(v & 0xFF for v in self.weap_table[:WEAPON_COUNT]))

            for worm in self.worm_settings:
                for value in worm.rgb:
                    write_uint8(f, value)
            for worm in self.worm_settings:
                for value in worm.weapons:
                    write_uint8(f, value)
            for worm in self.worm_settings:
                write_uint16(f, worm.health)
            for worm in self.worm_settings:
                write_pascal_string(f, "" if worm.random_name else worm.name, NAME_FIELD_LEN)

            write_uint8(f, int(self.load_change))
            f.write(_SIGNATURE)

            for worm in self.worm_settings:
                for value in worm.controls:
                    write_uint8(f, value)

            write_pascal_string(f, self.level_file, LEVEL_FIELD_LEN)