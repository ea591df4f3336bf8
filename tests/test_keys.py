import io

import pytest

from bubbletea.keys import InputError, Key, KeyMsg, KeyType, key_type_name, read_input
from bubbletea.mouse import MouseEventType, MouseMsg


def test_key_string_alt_space():
    assert str(KeyMsg(type=KeyType.SPACE, alt=True)) == "alt+space"


def test_key_string_runes():
    assert str(KeyMsg(type=KeyType.RUNES, runes="a")) == "a"


def test_key_string_invalid():
    assert str(KeyMsg(type=99999)) == ""


def test_key_type_string_space():
    assert str(KeyType.SPACE) == "space"
    assert key_type_name(KeyType.SPACE) == "space"


def test_key_type_string_invalid():
    assert key_type_name(99999) == ""


def test_key_type_aliases_share_values():
    assert KeyType.BREAK is KeyType.CTRL_C
    assert KeyType.ESCAPE is KeyType.ESC
    assert key_type_name(KeyType.BREAK) == "ctrl+c"
    assert key_type_name(KeyType.ESCAPE) == "esc"
    assert key_type_name(KeyType.CTRL_I) == "tab"
    assert key_type_name(KeyType.CTRL_QUESTION_MARK) == "backspace"


@pytest.mark.parametrize(
    "expected,data",
    [
        ("a", b"a"),
        ("ctrl+a", bytes([1])),
        ("alt+a", b"\x1ba"),
        ("abcd", b"abcd"),
        ("up", b"\x1b[A"),
        ("shift+tab", b"\x1b[Z"),
    ],
)
def test_read_input_keys(expected, data):
    msg = read_input(io.BytesIO(data))
    assert isinstance(msg, KeyMsg)
    assert str(msg) == expected


def test_read_input_wheel_up():
    data = bytes([0x1B, ord("["), ord("M"), 32 + 0b0100_0000, 65, 49])
    msg = read_input(io.BytesIO(data))
    assert msg == MouseMsg(x=32, y=16, type=MouseEventType.WHEEL_UP)
    assert str(msg) == "wheel up"


def test_read_input_alt_rune_fields():
    assert read_input(io.BytesIO(b"\x1ba")) == KeyMsg(type=KeyType.RUNES, runes="a", alt=True)


def test_read_input_alt_multibyte_rune():
    assert read_input(io.BytesIO("\x1bé".encode())) == KeyMsg(type=KeyType.RUNES, runes="é", alt=True)


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"\t", "tab"),
        (b"\r", "enter"),
        (b"\x7f", "backspace"),
        (b"\x1b", "esc"),
        (b" ", " "),
        (b"\x1b\r", "alt+enter"),
        (b"\x1b[1;3H", "alt+home"),
        (b"\x1b[6~", "pgdown"),
        (b"\x1bOA", "up"),
    ],
)
def test_read_input_special(data, expected):
    assert str(read_input(io.BytesIO(data))) == expected


def test_read_input_delete_has_no_name():
    msg = read_input(io.BytesIO(b"\x1b[3~"))
    assert msg == KeyMsg(type=KeyType.DELETE)
    assert str(msg) == ""


def test_read_input_multiple_runes():
    msg = read_input(io.BytesIO("你好".encode()))
    assert msg == KeyMsg(type=KeyType.RUNES, runes="你好")


def test_read_input_eof():
    with pytest.raises(EOFError):
        read_input(io.BytesIO(b""))


def test_read_input_invalid_utf8():
    with pytest.raises(InputError):
        read_input(io.BytesIO(b"a\xff"))


def test_read_input_invalid_after_escape():
    with pytest.raises(InputError):
        read_input(io.BytesIO(b"\x1b\xff"))


def test_key_equality_and_default():
    assert Key(type=KeyType.ENTER) == Key(type=KeyType.ENTER, runes="", alt=False)
    assert str(Key(type=KeyType.LEFT, alt=True)) == "alt+left"