"""Mouse events and decoding of X10-encoded mouse reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["MouseEventType", "MouseEvent", "MouseMsg", "parse_x10_mouse_event"]


class MouseEventType(IntEnum):
    """The kind of mouse activity that occurred."""

    UNKNOWN = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    RELEASE = 4
    WHEEL_UP = 5
    WHEEL_DOWN = 6
    MOTION = 7


_MOUSE_EVENT_NAMES = {
    MouseEventType.UNKNOWN: "unknown",
    MouseEventType.LEFT: "left",
    MouseEventType.RIGHT: "right",
    MouseEventType.MIDDLE: "middle",
    MouseEventType.RELEASE: "release",
    MouseEventType.WHEEL_UP: "wheel up",
    MouseEventType.WHEEL_DOWN: "wheel down",
    MouseEventType.MOTION: "motion",
}


@dataclass(frozen=True)
class MouseEvent:
    """A click, wheel movement, cursor movement or a combination of them."""

    x: int = 0
    y: int = 0
    type: int = MouseEventType.UNKNOWN
    alt: bool = False
    ctrl: bool = False

    def __str__(self) -> str:
        prefix = ("ctrl+" if self.ctrl else "") + ("alt+" if self.alt else "")
        return prefix + _MOUSE_EVENT_NAMES.get(self.type, "")


@dataclass(frozen=True)
class MouseMsg(MouseEvent):
    """A mouse event delivered to a program's update function."""


_BYTE_OFFSET = 32

_BIT_ALT = 0b0000_1000
_BIT_CTRL = 0b0001_0000
_BIT_MOTION = 0b0010_0000
_BIT_WHEEL = 0b0100_0000
_BITS_MASK = 0b0000_0011

_WHEEL_TYPES = {
    0b00: MouseEventType.WHEEL_UP,
    0b01: MouseEventType.WHEEL_DOWN,
}

_BUTTON_TYPES = {
    0b00: MouseEventType.LEFT,
    0b01: MouseEventType.MIDDLE,
    0b10: MouseEventType.RIGHT,
}


def parse_x10_mouse_event(buf: bytes) -> MouseEvent:
    """Decode an X10 mouse report of the form ESC [ M Cb Cx Cy.

    Raises ValueError when the bytes are not such a report.
    """
    data = bytes(buf or b"")
    if len(data) != 6 or data[:3] != b"\x1b[M":
        raise ValueError("not an X10 mouse event")

    e = (data[3] - _BYTE_OFFSET) & 0xFF
    low = e & _BITS_MASK

    if e & _BIT_WHEEL:
        event_type = _WHEEL_TYPES.get(low, MouseEventType.UNKNOWN)
    elif low == 0b11:
        event_type = MouseEventType.MOTION if e & _BIT_MOTION else MouseEventType.RELEASE
    else:
        # Clicking and dragging are not told apart.
        event_type = _BUTTON_TYPES[low]

    # (1,1) is the upper left; normalise it to (0,0).
    return MouseEvent(
        x=data[4] - _BYTE_OFFSET - 1,
        y=data[5] - _BYTE_OFFSET - 1,
        type=event_type,
        alt=bool(e & _BIT_ALT),
        ctrl=bool(e & _BIT_CTRL),
    )