"""Tunable game constants, message texts and behaviour switches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union


class Const(IntEnum):
    """Numeric game constants."""

    NR_INITIAL_LENGTH = 0
    NR_ATTACH_LENGTH = 1
    MIN_BOUNCE_UP = 2
    MIN_BOUNCE_DOWN = 3
    MIN_BOUNCE_LEFT = 4
    MIN_BOUNCE_RIGHT = 5
    WORM_GRAVITY = 6
    WALK_VEL_LEFT = 7
    MAX_VEL_LEFT = 8
    WALK_VEL_RIGHT = 9
    MAX_VEL_RIGHT = 10
    JUMP_FORCE = 11
    MAX_AIM_VEL_LEFT = 12
    AIM_ACC_LEFT = 13
    MAX_AIM_VEL_RIGHT = 14
    AIM_ACC_RIGHT = 15
    NINJAROPE_GRAVITY = 16
    NR_MIN_LENGTH = 17
    NR_MAX_LENGTH = 18
    BONUS_GRAVITY = 19
    WORM_FRIC_MULT = 20
    WORM_FRIC_DIV = 21
    WORM_MIN_SPAWN_DIST_LAST = 22
    WORM_MIN_SPAWN_DIST_ENEMY = 23
    WORM_SPAWN_RECT_X = 24
    WORM_SPAWN_RECT_Y = 25
    WORM_SPAWN_RECT_W = 26
    WORM_SPAWN_RECT_H = 27
    AIM_FRIC_MULT = 28
    AIM_FRIC_DIV = 29
    NR_THROW_VEL_X = 30
    NR_THROW_VEL_Y = 31
    NR_FORCE_SHL_X = 32
    NR_FORCE_DIV_X = 33
    NR_FORCE_SHL_Y = 34
    NR_FORCE_DIV_Y = 35
    NR_FORCE_LEN_SHL = 36
    BONUS_BOUNCE_MUL = 37
    BONUS_BOUNCE_DIV = 38
    BONUS_FLICKER_TIME = 39
    AIM_MAX_RIGHT = 40
    AIM_MIN_RIGHT = 41
    AIM_MAX_LEFT = 42
    AIM_MIN_LEFT = 43
    NR_PULL_VEL = 44
    NR_RELEASE_VEL = 45
    NR_COLOUR_BEGIN = 46
    NR_COLOUR_END = 47
    BONUS_EXPLODE_RISK = 48
    BONUS_HEALTH_VAR = 49
    BONUS_MIN_HEALTH = 50
    LASER_WEAPON = 51
    FIRST_BLOOD_COLOUR = 52
    NUM_BLOOD_COLOURS = 53
    BOBJ_GRAVITY = 54
    BONUS_DROP_CHANCE = 55
    SPLINTER_LARPA_VEL_DIV = 56
    SPLINTER_CRACKLER_VEL_DIV = 57
    FALL_DAMAGE_RIGHT = 58
    FALL_DAMAGE_LEFT = 59
    FALL_DAMAGE_DOWN = 60
    FALL_DAMAGE_UP = 61
    WORM_FLOAT_LEVEL = 62
    WORM_FLOAT_POWER = 63
    BONUS_SPAWN_RECT_X = 64
    BONUS_SPAWN_RECT_Y = 65
    BONUS_SPAWN_RECT_W = 66
    BONUS_SPAWN_RECT_H = 67
    REM_EXP_OBJECT = 68


class Text(IntEnum):
    """Message strings shown by the game."""

    INIT_SOUND = 0
    LOADING_SOUNDS = 1
    LOADING_AND_THINKING = 2
    OK = 3
    OK2 = 4
    PRESS_ANY_KEY = 5
    COMMITTED_SUICIDE_MSG = 6
    KILLED_MSG = 7
    YOURE_IT = 8
    INIT_BASE_IO = 9
    INIT_IRQ = 10
    INIT_DMA8 = 11
    INIT_DMA16 = 12
    INIT_DSP_VERSION = 13
    INIT_COLON = 14
    INIT_16BIT = 15
    INIT_AUTOINIT = 16
    INIT_XMS_SUCC = 17
    INIT_FREE_XMS = 18
    INIT_K = 19


class Hack(IntEnum):
    """Optional gameplay modifications."""

    FALL_DAMAGE = 0
    BONUS_RELOAD_ONLY = 1
    BONUS_SPAWN_RECT = 2
    BONUS_ONLY_HEALTH = 3
    BONUS_ONLY_WEAPON = 4
    BONUS_DISABLE = 5
    WORM_FLOAT = 6
    REM_EXP = 7
    SIGNED_RECOIL = 8


_DEFAULT_VALUES = (
    4000, 450, -53248, 53248, -53248, 53248, 1500, 3000, -29184, 3000,
    29184, 56064, 70000, 4000, -70000, 4000, 1000, 170, 4000, 1500,
    89, 100, 160, 160, 5, 5, 494, 340, 83, 100,
    2, 2, 2, 3, 2, 3, 4, 40, 100, 220,
    116, 64, 12, 64, 24, 24, 62, 64, 10, 51,
    10, 29, 80, 2, 1000, 1700, 3, 3, 0, 0,
    0, 0, 163, -8386178, -1410, -1410, 504, 350, 35,
)

_DEFAULT_TEXTS = {
    Text.INIT_SOUND: "Initializing sound system...",
    Text.LOADING_SOUNDS: "Loading sounds...",
    Text.INIT_BASE_IO: "BaseIO=",
    Text.INIT_IRQ: "h    IRQ",
    Text.INIT_DMA8: "    DMA8=",
    Text.INIT_DMA16: "    DMA16=",
    Text.INIT_DSP_VERSION: "DSP version ",
    Text.INIT_COLON: ":  ",
    Text.INIT_16BIT: "16-bit, ",
    Text.INIT_AUTOINIT: "Auto-initialized",
    Text.INIT_XMS_SUCC: "Extended memory succesfully initialized",
    Text.INIT_FREE_XMS: "Free XMS memory:  ",
    Text.INIT_K: "k  ",
    Text.LOADING_AND_THINKING: "Loading & thinking...",
    Text.OK: "OK",
    Text.OK2: "OK",
    Text.PRESS_ANY_KEY: "Press any key...",
    Text.COMMITTED_SUICIDE_MSG: " committed suicide",
    Text.KILLED_MSG: "Killed ",
    Text.YOURE_IT: "You're 'IT' now!",
}

Key = Union[Const, Text, Hack]


@dataclass
class Constants:
    """All constants, texts and hack switches, indexed by their enum member."""

    values: dict[Const, int] = field(default_factory=dict)
    texts: dict[Text, str] = field(default_factory=dict)
    hacks: dict[Hack, bool] = field(default_factory=dict)

    def __getitem__(self, key: Key) -> int | str | bool:
        if isinstance(key, Const):
            return self.values[key]
        if isinstance(key, Text):
            return self.texts[key]
        if isinstance(key, Hack):
            return self.hacks[key]
        raise KeyError(key)


def load_constants() -> Constants:
    """Return the built-in default constants."""
    return Constants(
        values=dict(zip(Const, _DEFAULT_VALUES)),
        texts=dict(_DEFAULT_TEXTS),
        hacks={hack: False for hack in Hack},
    )