"""Keyboard and mouse codes reported by the windowing system."""

from __future__ import annotations

import enum
import sys
from typing import Dict, Optional, Union


class Key(enum.Enum):
    """Keys the game reacts to; their codes depend on the platform."""

    ESC = "esc"
    NUM_MULT = "num_mult"
    NUM_DIV = "num_div"
    NUM_PLUS = "num_plus"
    NUM_MINUS = "num_minus"
    NUM_ENTER = "num_enter"
    NUM_0 = "num_0"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DIGIT_1 = "digit_1"
    L = "l"


class MouseButton(enum.IntEnum):
    """Mouse button numbers."""

    BUTTON = 1
    WHEEL_BUTTON = 3
    BUTTON_2 = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


_LINUX_CODES: Dict[Key, int] = {
    Key.ESC: 65307,
    Key.NUM_MULT: 65450,
    Key.NUM_DIV: 65455,
    Key.NUM_PLUS: 65451,
    Key.NUM_MINUS: 65453,
    Key.NUM_ENTER: 65421,
    Key.NUM_0: 65438,
    Key.UP: 65362,
    Key.DOWN: 65364,
    Key.LEFT: 65361,
    Key.RIGHT: 65363,
    Key.DIGIT_1: 49,
    Key.L: 108,
}

_OTHER_CODES: Dict[Key, int] = {
    Key.ESC: 53,
    Key.NUM_MULT: 67,
    Key.NUM_DIV: 75,
    Key.NUM_PLUS: 69,
    Key.NUM_MINUS: 78,
    Key.NUM_ENTER: 76,
    Key.NUM_0: 82,
    Key.UP: 126,
    Key.DOWN: 125,
    Key.LEFT: 123,
    Key.RIGHT: 124,
    Key.DIGIT_1: 18,
    Key.L: 37,
}


def key_code(key: Union[Key, str], platform: Optional[str] = None) -> int:
    """The code of ``key`` on ``platform`` (default: the running one).

    Platforms whose name starts with ``linux`` use X11 keysyms; every other
    platform uses macOS virtual key codes. ``key`` may be a :class:`Key` or
    its member name.
    """
    if isinstance(key, str):
        try:
            key = Key[key.upper()]
        except KeyError:
            raise ValueError(f"unknown key {key!r}") from None
    if platform is None:
        platform = sys.platform
    table = _LINUX_CODES if platform.startswith("linux") else _OTHER_CODES
    return table[key]