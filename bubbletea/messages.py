"""Models, commands and the built-in messages a program understands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

__all__ = [
    "Msg",
    "Cmd",
    "Model",
    "QuitMsg",
    "BatchMsg",
    "EnterAltScreenMsg",
    "ExitAltScreenMsg",
    "EnableMouseCellMotionMsg",
    "EnableMouseAllMotionMsg",
    "DisableMouseMsg",
    "HideCursorMsg",
    "WindowSizeMsg",
    "SyncScrollAreaMsg",
    "ClearScrollAreaMsg",
    "ScrollUpMsg",
    "ScrollDownMsg",
    "batch",
    "quit",
    "enter_alt_screen",
    "exit_alt_screen",
    "enable_mouse_cell_motion",
    "enable_mouse_all_motion",
    "disable_mouse",
    "hide_cursor",
    "sync_scroll_area",
    "clear_scroll_area",
    "scroll_up",
    "scroll_down",
]

Msg = Any
Cmd = Callable[[], Msg]


class Model(ABC):
    """A program's state together with its init, update and view functions."""

    @abstractmethod
    def init(self) -> Optional[Cmd]:
        """Return an optional command to run when the program starts."""

    @abstractmethod
    def update(self, msg: Msg) -> Tuple["Model", Optional[Cmd]]:
        """Handle a message, returning the new model and an optional command."""

    @abstractmethod
    def view(self) -> str:
        """Render the user interface as a string."""


@dataclass(frozen=True)
class QuitMsg:
    """Tells the program to exit."""


@dataclass(frozen=True)
class BatchMsg:
    """Asks the program to run several commands concurrently."""

    cmds: Tuple[Optional[Cmd], ...] = ()


@dataclass(frozen=True)
class EnterAltScreenMsg:
    """Tells the program to enter the alternate screen buffer."""


@dataclass(frozen=True)
class ExitAltScreenMsg:
    """Tells the program to leave the alternate screen buffer."""


@dataclass(frozen=True)
class EnableMouseCellMotionMsg:
    """Tells the program to report clicks, releases, wheel and drag events."""


@dataclass(frozen=True)
class EnableMouseAllMotionMsg:
    """Tells the program to report all mouse events, hover included."""


@dataclass(frozen=True)
class DisableMouseMsg:
    """Tells the program to stop reporting mouse events."""


@dataclass(frozen=True)
class HideCursorMsg:
    """Tells the program to hide the cursor."""


@dataclass(frozen=True)
class WindowSizeMsg:
    """Reports the terminal size, initially and on every resize."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class SyncScrollAreaMsg:
    """Repaints the whole region designated as the scrollable area."""

    lines: Tuple[str, ...] = ()
    top_boundary: int = 0
    bottom_boundary: int = 0


@dataclass(frozen=True)
class ClearScrollAreaMsg:
    """Hands the scrollable region back to the main renderer."""


@dataclass(frozen=True)
class ScrollUpMsg:
    """Inserts lines at the top of the scrollable region."""

    lines: Tuple[str, ...] = ()
    top_boundary: int = 0
    bottom_boundary: int = 0


@dataclass(frozen=True)
class ScrollDownMsg:
    """Inserts lines at the bottom of the scrollable region."""

    lines: Tuple[str, ...] = ()
    top_boundary: int = 0
    bottom_boundary: int = 0


def batch(*cmds: Optional[Cmd]) -> Optional[Cmd]:
    """Combine commands to run concurrently; None when there are none."""
    if not cmds:
        return None
    bundled = tuple(cmds)
    return lambda: BatchMsg(bundled)


def quit() -> QuitMsg:  # noqa: A001 - mirrors the command's public name
    """Command that makes the program exit."""
    return QuitMsg()


def enter_alt_screen() -> EnterAltScreenMsg:
    """Command that switches to the alternate screen buffer."""
    return EnterAltScreenMsg()


def exit_alt_screen() -> ExitAltScreenMsg:
    """Command that leaves the alternate screen buffer."""
    return ExitAltScreenMsg()


def enable_mouse_cell_motion() -> EnableMouseCellMotionMsg:
    """Command that enables cell-motion mouse reporting."""
    return EnableMouseCellMotionMsg()


def enable_mouse_all_motion() -> EnableMouseAllMotionMsg:
    """Command that enables all-motion mouse reporting."""
    return EnableMouseAllMotionMsg()


def disable_mouse() -> DisableMouseMsg:
    """Command that disables mouse reporting."""
    return DisableMouseMsg()


def hide_cursor() -> HideCursorMsg:
    """Command that hides the cursor."""
    return HideCursorMsg()


def sync_scroll_area(lines: Iterable[str], top_boundary: int, bottom_boundary: int) -> Cmd:
    """Command that paints the entire scrollable region."""
    msg = SyncScrollAreaMsg(tuple(lines), top_boundary, bottom_boundary)
    return lambda: msg


def clear_scroll_area() -> ClearScrollAreaMsg:
    """Command that releases the scrollable region."""
    return ClearScrollAreaMsg()


def scroll_up(new_lines: Iterable[str], top_boundary: int, bottom_boundary: int) -> Cmd:
    """Command that adds lines to the top of the scrollable region."""
    msg = ScrollUpMsg(tuple(new_lines), top_boundary, bottom_boundary)
    return lambda: msg


def scroll_down(new_lines: Iterable[str], top_boundary: int, bottom_boundary: int) -> Cmd:
    """Command that adds lines to the bottom of the scrollable region."""
    msg = ScrollDownMsg(tuple(new_lines), top_boundary, bottom_boundary)
    return lambda: msg