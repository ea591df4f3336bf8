import pytest

from bubbletea.mouse import MouseEvent, MouseEventType, MouseMsg, parse_x10_mouse_event


def encode(b, x, y):
    return bytes([0x1B, ord("["), ord("M"), (32 + b) & 0xFF, (x + 33) & 0xFF, (y + 33) & 0xFF])


@pytest.mark.parametrize(
    "event,expected",
    [
        (MouseEvent(type=MouseEventType.UNKNOWN), "unknown"),
        (MouseEvent(type=MouseEventType.LEFT), "left"),
        (MouseEvent(type=MouseEventType.RIGHT), "right"),
        (MouseEvent(type=MouseEventType.MIDDLE), "middle"),
        (MouseEvent(type=MouseEventType.RELEASE), "release"),
        (MouseEvent(type=MouseEventType.WHEEL_UP), "wheel up"),
        (MouseEvent(type=MouseEventType.WHEEL_DOWN), "wheel down"),
        (MouseEvent(type=MouseEventType.MOTION), "motion"),
        (MouseEvent(type=MouseEventType.LEFT, alt=True), "alt+left"),
        (MouseEvent(type=MouseEventType.LEFT, ctrl=True), "ctrl+left"),
        (MouseEvent(type=MouseEventType.LEFT, alt=True, ctrl=True), "ctrl+alt+left"),
        (MouseEvent(x=100, y=200, type=MouseEventType.LEFT), "left"),
        (MouseEvent(type=-1000), ""),
    ],
)
def test_mouse_event_string(event, expected):
    assert str(event) == expected


L = MouseEventType


@pytest.mark.parametrize(
    "buf,expected",
    [
        (encode(0b0010_0000, 0, 0), MouseEvent(0, 0, L.LEFT)),
        (encode(0b0010_0000, 222, 222), MouseEvent(222, 222, L.LEFT)),
        (encode(0b0000_0000, 32, 16), MouseEvent(32, 16, L.LEFT)),
        (encode(0b0010_0000, 32, 16), MouseEvent(32, 16, L.LEFT)),
        (encode(0b0000_0001, 32, 16), MouseEvent(32, 16, L.MIDDLE)),
        (encode(0b0010_0001, 32, 16), MouseEvent(32, 16, L.MIDDLE)),
        (encode(0b0000_0010, 32, 16), MouseEvent(32, 16, L.RIGHT)),
        (encode(0b0010_0010, 32, 16), MouseEvent(32, 16, L.RIGHT)),
        (encode(0b0010_0011, 32, 16), MouseEvent(32, 16, L.MOTION)),
        (encode(0b0100_0000, 32, 16), MouseEvent(32, 16, L.WHEEL_UP)),
        (encode(0b0100_0001, 32, 16), MouseEvent(32, 16, L.WHEEL_DOWN)),
        (encode(0b0000_0011, 32, 16), MouseEvent(32, 16, L.RELEASE)),
        (encode(0b0010_1010, 32, 16), MouseEvent(32, 16, L.RIGHT, alt=True)),
        (encode(0b0011_0010, 32, 16), MouseEvent(32, 16, L.RIGHT, ctrl=True)),
        (encode(0b0011_1010, 32, 16), MouseEvent(32, 16, L.RIGHT, alt=True, ctrl=True)),
        (encode(0b0100_1001, 32, 16), MouseEvent(32, 16, L.WHEEL_DOWN, alt=True)),
        (encode(0b0101_0001, 32, 16), MouseEvent(32, 16, L.WHEEL_DOWN, ctrl=True)),
        (encode(0b0101_1001, 32, 16), MouseEvent(32, 16, L.WHEEL_DOWN, alt=True, ctrl=True)),
        (encode(0b0100_0010, 32, 16), MouseEvent(32, 16, L.UNKNOWN)),
        (encode(0b0100_1010, 32, 16), MouseEvent(32, 16, L.UNKNOWN, alt=True)),
        (encode(0b0010_0000, 250, 223), MouseEvent(-6, -33, L.LEFT)),
    ],
)
def test_parse_x10_mouse_event(buf, expected):
    assert parse_x10_mouse_event(buf) == expected


@pytest.mark.parametrize(
    "buf",
    [b"", None, b"\x1a[M@A1", b"\x1b[M@A", b"\x1b[M@A11"],
)
def test_parse_x10_mouse_event_error(buf):
    with pytest.raises(ValueError):
        parse_x10_mouse_event(buf)


def test_mouse_msg_string_matches_event():
    msg = MouseMsg(x=1, y=2, type=MouseEventType.WHEEL_DOWN, ctrl=True)
    assert str(msg) == "ctrl+wheel down"
    assert msg.x == 1 and msg.y == 2