"""Convenience commands for timing and sequencing."""

from __future__ import annotations

import math
import time
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from .messages import Cmd, Msg

__all__ = ["every", "tick", "sequentially"]

Duration = Union[float, int, timedelta]


def _seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def every(duration: Duration, fn: Callable[[datetime], Msg]) -> Cmd:
    """Command that fires in sync with the system clock.

    The wait lasts until the next multiple of the duration, so it is
    usually shorter than the duration itself.
    """
    interval = _seconds(duration)

    def command() -> Msg:
        if interval > 0:
            time.sleep(interval - math.fmod(time.time(), interval))
        return fn(datetime.now())

    return command


def tick(duration: Duration, fn: Callable[[datetime], Msg]) -> Cmd:
    """Command that fires once the full duration has passed."""
    interval = _seconds(duration)

    def command() -> Msg:
        if interval > 0:
            time.sleep(interval)
        return fn(datetime.now())

    return command


def sequentially(*cmds: Cmd) -> Cmd:
    """Command that runs commands in order, returning the first non-None message."""

    def command() -> Optional[Msg]:
        for cmd in cmds:
            msg = cmd()
            if msg is not None:
                return msg
        return None

    return command