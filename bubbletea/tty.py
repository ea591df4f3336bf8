"""Terminal handling: raw mode, the controlling TTY and window size."""

from __future__ import annotations

import errno
import os
import signal
import termios
import threading
import tty
from typing import Any, BinaryIO, Callable, Tuple, Union

from .messages import WindowSizeMsg

__all__ = ["Console", "console_from_file", "open_input_tty", "get_size", "listen_for_resize"]

_POLL_INTERVAL = 0.05

FileLike = Union[int, Any]


def _fd(f: FileLike) -> int:
    return f if isinstance(f, int) else f.fileno()


class Console:
    """A terminal whose mode can be switched to raw and restored."""

    def __init__(self, file: FileLike) -> None:
        self.file = file
        self.fd = _fd(file)
        self._original = termios.tcgetattr(self.fd)

    def set_raw(self) -> None:
        """Put the terminal into raw mode."""
        tty.setraw(self.fd, termios.TCSANOW)

    def reset(self) -> None:
        """Restore the mode the terminal had when the console was created."""
        termios.tcsetattr(self.fd, termios.TCSANOW, self._original)

    def __enter__(self) -> "Console":
        self.set_raw()
        return self

    def __exit__(self, *exc_info) -> None:
        self.reset()


def console_from_file(f: FileLike) -> Console:
    """Return a Console for a file; raise OSError if it is not a terminal."""
    fd = _fd(f)
    if not os.isatty(fd):
        raise OSError(errno.ENOTTY, "provided file is not a console")
    return Console(f)


def open_input_tty() -> BinaryIO:
    """Open the controlling terminal for reading."""
    return open("/dev/tty", "rb", buffering=0)


def get_size(f: FileLike) -> Tuple[int, int]:
    """Return the (width, height) of the terminal behind a file."""
    size = os.get_terminal_size(_fd(f))
    return size.columns, size.lines


def listen_for_resize(
    output: FileLike,
    send: Callable[[Any], None],
    stop_event: threading.Event,
) -> None:
    """Send a WindowSizeMsg whenever the terminal size changes.

    Blocks until stop_event is set. An OSError while reading the size is
    passed to send and ends the listening. Does nothing on platforms
    without window-change signals.
    """
    if not hasattr(signal, "SIGWINCH"):
        return

    try:
        last = get_size(output)
    except OSError as exc:
        send(exc)
        return

    while not stop_event.wait(_POLL_INTERVAL):
        try:
            size = get_size(output)
        except OSError as exc:
            send(exc)
            return
        if size != last:
            last = size
            send(WindowSizeMsg(width=size[0], height=size[1]))