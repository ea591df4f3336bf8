"""Sending log output to a file while the terminal is occupied."""

from __future__ import annotations

import logging
from typing import IO, Optional

__all__ = ["log_to_file"]

_handler: Optional[logging.Handler] = None


def log_to_file(path, prefix: str) -> IO[str]:
    """Direct the root logger to a file, creating it if needed.

    A space is added after a non-empty prefix that does not already end in
    whitespace. The open file is returned; the caller closes it.
    """
    global _handler

    f = open(path, "a", encoding="utf-8")

    if prefix and not prefix[-1].isspace():
        prefix += " "

    handler = logging.StreamHandler(f)
    handler.setFormatter(logging.Formatter(prefix.replace("%", "%%") + "%(message)s"))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    _handler = handler

    return f