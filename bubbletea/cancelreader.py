"""Readers whose blocking reads can be cancelled without consuming data."""

from __future__ import annotations

import os
import selectors
import sys
import threading
from typing import BinaryIO, Callable, Optional, Union

__all__ = [
    "CanceledError",
    "FallbackCancelReader",
    "SelectCancelReader",
    "new_cancel_reader",
]

# Limit of the select(2) system call.
_FD_SETSIZE = 1024


class CanceledError(Exception):
    """Raised by a read that was cancelled."""

    def __init__(self, message: str = "read cancelled") -> None:
        super().__init__(message)


class _CancelFlag:
    """Thread-safe cancellation status."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cancelled = False

    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    def set_cancelled(self) -> None:
        with self._lock:
            self._cancelled = True


class _CancelReaderBase:
    def read(self, size: int = -1) -> bytes:
        raise NotImplementedError

    def cancel(self) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class FallbackCancelReader(_CancelReaderBase):
    """Wraps any reader; cancelling cannot interrupt an ongoing read.

    After cancel(), every new read raises CanceledError at once and no more
    data is consumed.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self.reader = reader
        self._flag = _CancelFlag()

    def read(self, size: int = -1) -> bytes:
        if self._flag.is_cancelled():
            raise CanceledError()
        return self.reader.read(size)

    def cancel(self) -> bool:
        """Cancel future reads; returns False as ongoing reads go on."""
        self._flag.set_cancelled()
        return False

    def close(self) -> None:
        """Nothing to release; the wrapped reader stays open."""


class SelectCancelReader(_CancelReaderBase):
    """Reader over a file descriptor whose blocking reads can be cancelled.

    Each read waits on both the file and an internal pipe; cancel() writes
    to the pipe, which wakes the waiting read.
    """

    def __init__(
        self,
        file: BinaryIO,
        selector_factory: Callable[[], selectors.BaseSelector] = selectors.DefaultSelector,
    ) -> None:
        self.file = file
        self._fd = file.fileno()
        self._flag = _CancelFlag()
        self._closed = False
        self._cancel_r, self._cancel_w = os.pipe()
        self._selector = selector_factory()
        try:
            self._selector.register(self._fd, selectors.EVENT_READ)
            self._selector.register(self._cancel_r, selectors.EVENT_READ)
        except (OSError, ValueError) as exc:
            self._selector.close()
            os.close(self._cancel_r)
            os.close(self._cancel_w)
            raise OSError(f"add reader to interest list: {exc}") from exc

    def read(self, size: int = -1) -> bytes:
        """Block until data arrives and return it; b"" at end of input."""
        if self._flag.is_cancelled():
            raise CanceledError()

        ready = {key.fd for key, _ in self._selector.select()}

        if self._cancel_r in ready:
            # Remove the signal from the pipe.
            try:
                os.read(self._cancel_r, 1)
            except OSError as exc:
                raise OSError(f"reading cancel signal: {exc}") from exc
            raise CanceledError()

        if self._fd in ready:
            return os.read(self._fd, size if size > 0 else 4096)

        raise OSError("select returned without setting a file descriptor")

    def cancel(self) -> bool:
        """Cancel ongoing and future reads; True if the signal was sent."""
        self._flag.set_cancelled()
        try:
            os.write(self._cancel_w, b"c")
        except OSError:
            return False
        return True

    def close(self) -> None:
        """Release the selector and the cancel pipe; the file stays open."""
        if self._closed:
            return
        self._closed = True
        errors = []
        try:
            self._selector.close()
        except OSError as exc:
            errors.append(f"closing selector: {exc}")
        try:
            os.close(self._cancel_w)
        except OSError as exc:
            errors.append(f"closing cancel signal writer: {exc}")
        try:
            os.close(self._cancel_r)
        except OSError as exc:
            errors.append(f"closing cancel signal reader: {exc}")
        if errors:
            raise OSError(", ".join(errors))


CancelReader = Union[FallbackCancelReader, SelectCancelReader]


def _fileno(reader) -> Optional[int]:
    fileno = getattr(reader, "fileno", None)
    if fileno is None:
        return None
    try:
        return fileno()
    except (OSError, ValueError):
        return None


def new_cancel_reader(reader) -> CancelReader:
    """Wrap a reader so that its reads can be cancelled.

    Readers backed by a file descriptor get a SelectCancelReader; anything
    else, or any reader on Windows, gets a FallbackCancelReader.
    """
    fd = _fileno(reader)
    if fd is None or sys.platform == "win32":
        return FallbackCancelReader(reader)

    factory: Callable[[], selectors.BaseSelector] = selectors.DefaultSelector
    if getattr(reader, "name", None) == "/dev/tty" and not sys.platform.startswith("linux"):
        # kqueue returns at once when polling /dev/tty, so use select instead.
        factory = selectors.SelectSelector
    if factory is selectors.SelectSelector and fd >= _FD_SETSIZE:
        return FallbackCancelReader(reader)

    return SelectCancelReader(reader, factory)