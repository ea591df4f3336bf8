"""Keypress messages and decoding of raw terminal input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Union

from .mouse import MouseMsg, parse_x10_mouse_event

__all__ = ["KeyType", "Key", "KeyMsg", "InputError", "key_type_name", "read_input"]


class InputError(ValueError):
    """Raised when terminal input cannot be decoded."""


class KeyType(IntEnum):
    """The key pressed. Printable characters are all of type RUNES."""

    CTRL_AT = 0
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    TAB = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    ENTER = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESC = 27
    CTRL_BACKSLASH = 28
    CTRL_CLOSE_BRACKET = 29
    CTRL_CARET = 30
    CTRL_UNDERSCORE = 31
    SPACE = 32
    BACKSPACE = 127

    # Aliases.
    NULL = 0
    BREAK = 3
    CTRL_I = 9
    CTRL_M = 13
    ESCAPE = 27
    CTRL_OPEN_BRACKET = 27
    CTRL_QUESTION_MARK = 127

    RUNES = -1
    UP = -2
    DOWN = -3
    RIGHT = -4
    LEFT = -5
    SHIFT_TAB = -6
    HOME = -7
    END = -8
    PGUP = -9
    PGDOWN = -10
    DELETE = -11

    def __str__(self) -> str:
        return key_type_name(self)


_KEY_NAMES = {
    0: "ctrl+@",
    1: "ctrl+a",
    2: "ctrl+b",
    3: "ctrl+c",
    4: "ctrl+d",
    5: "ctrl+e",
    6: "ctrl+f",
    7: "ctrl+g",
    8: "ctrl+h",
    9: "tab",
    10: "ctrl+j",
    11: "ctrl+k",
    12: "ctrl+l",
    13: "enter",
    14: "ctrl+n",
    15: "ctrl+o",
    16: "ctrl+p",
    17: "ctrl+q",
    18: "ctrl+r",
    19: "ctrl+s",
    20: "ctrl+t",
    21: "ctrl+u",
    22: "ctrl+v",
    23: "ctrl+w",
    24: "ctrl+x",
    25: "ctrl+y",
    26: "ctrl+z",
    27: "esc",
    28: "ctrl+\\",
    29: "ctrl+]",
    30: "ctrl+^",
    31: "ctrl+_",
    32: "space",
    127: "backspace",
    KeyType.RUNES: "runes",
    KeyType.UP: "up",
    KeyType.DOWN: "down",
    KeyType.RIGHT: "right",
    KeyType.LEFT: "left",
    KeyType.SHIFT_TAB: "shift+tab",
    KeyType.HOME: "home",
    KeyType.END: "end",
    KeyType.PGUP: "pgup",
    KeyType.PGDOWN: "pgdown",
}


def key_type_name(key_type: int) -> str:
    """Return the friendly name of a key type, or "" if it has none."""
    return _KEY_NAMES.get(int(key_type), "")


@dataclass(frozen=True)
class Key:
    """A keypress: its type, the characters typed and whether alt was held."""

    type: int = KeyType.RUNES
    runes: str = ""
    alt: bool = False

    def __str__(self) -> str:
        prefix = "alt+" if self.alt else ""
        if self.type == KeyType.RUNES:
            return prefix + self.runes
        name = _KEY_NAMES.get(int(self.type))
        if name is not None:
            return prefix + name
        return ""


@dataclass(frozen=True)
class KeyMsg(Key):
    """A keypress delivered to a program's update function."""


_SEQUENCES = {
    b"\x1b[A": KeyType.UP,
    b"\x1b[B": KeyType.DOWN,
    b"\x1b[C": KeyType.RIGHT,
    b"\x1b[D": KeyType.LEFT,
}

_HEXES = {
    "1b5b5a": Key(KeyType.SHIFT_TAB),
    "1b5b337e": Key(KeyType.DELETE),
    "1b0d": Key(KeyType.ENTER, alt=True),
    "1b7f": Key(KeyType.BACKSPACE, alt=True),
    "1b5b48": Key(KeyType.HOME),
    "1b5b377e": Key(KeyType.HOME),  # urxvt
    "1b5b313b3348": Key(KeyType.HOME, alt=True),
    "1b1b5b377e": Key(KeyType.HOME, alt=True),  # urxvt
    "1b5b46": Key(KeyType.END),
    "1b5b387e": Key(KeyType.END),  # urxvt
    "1b5b313b3346": Key(KeyType.END, alt=True),
    "1b1b5b387e": Key(KeyType.END, alt=True),  # urxvt
    "1b5b357e": Key(KeyType.PGUP),
    "1b5b353b337e": Key(KeyType.PGUP, alt=True),
    "1b1b5b357e": Key(KeyType.PGUP, alt=True),  # urxvt
    "1b5b367e": Key(KeyType.PGDOWN),
    "1b5b363b337e": Key(KeyType.PGDOWN, alt=True),
    "1b1b5b367e": Key(KeyType.PGDOWN, alt=True),  # urxvt
    "1b5b313b3341": Key(KeyType.UP, alt=True),
    "1b5b313b3342": Key(KeyType.DOWN, alt=True),
    "1b5b313b3343": Key(KeyType.RIGHT, alt=True),
    "1b5b313b3344": Key(KeyType.LEFT, alt=True),
    # PowerShell
    "1b4f41": Key(KeyType.UP),
    "1b4f42": Key(KeyType.DOWN),
    "1b4f43": Key(KeyType.RIGHT),
    "1b4f44": Key(KeyType.LEFT),
}

_READ_SIZE = 256
_REPLACEMENT = "\ufffd"


def _first_rune(data: bytes) -> str:
    for width in range(1, min(4, len(data)) + 1):
        try:
            char = data[:width].decode("utf-8")
        except UnicodeDecodeError:
            continue
        if char != _REPLACEMENT:
            return char
        break
    raise InputError("could not decode rune after removing initial escape")


def _decode_runes(data: bytes) -> str:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError("could not decode rune") from exc
    if _REPLACEMENT in text:
        raise InputError("could not decode rune")
    return text


def read_input(stream: BinaryIO) -> Union[KeyMsg, MouseMsg]:
    """Read one chunk of input and turn it into a key or mouse message.

    Raises EOFError when the stream is exhausted and InputError when the
    bytes cannot be decoded.
    """
    data = stream.read(_READ_SIZE)
    if not data:
        raise EOFError("end of input")
    data = bytes(data)

    try:
        event = parse_x10_mouse_event(data)
    except ValueError:
        pass
    else:
        return MouseMsg(x=event.x, y=event.y, type=event.type, alt=event.alt, ctrl=event.ctrl)

    seq = _SEQUENCES.get(data)
    if seq is not None:
        return KeyMsg(type=seq)

    special = _HEXES.get(data.hex())
    if special is not None:
        return KeyMsg(type=special.type, runes=special.runes, alt=special.alt)

    # A leading escape means alt was held with the following character.
    if len(data) > 1 and data[0] == 0x1B:
        return KeyMsg(type=KeyType.RUNES, runes=_first_rune(data[1:]), alt=True)

    runes = _decode_runes(data)
    if not runes:
        raise InputError("received 0 runes from input")
    if len(runes) > 1:
        # Several characters at once (e.g. from an input method editor).
        return KeyMsg(type=KeyType.RUNES, runes=runes)

    code = ord(runes)
    if (len(data) == 1 and code <= KeyType.CTRL_UNDERSCORE) or code == KeyType.BACKSPACE:
        return KeyMsg(type=KeyType(code))

    return KeyMsg(type=KeyType.RUNES, runes=runes)