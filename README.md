# bubbletea

Building blocks for terminal user interfaces in the style of the Elm
Architecture. An application keeps its whole state in a *model*. Messages
(key presses, mouse events, window resizes, timer ticks and so on) are passed
to the model's `update` method, and the model's `view` method turns the state
into a string.

This package provides the pieces such an application is made of: the model
interface and built-in messages, decoding of raw terminal input into key and
mouse messages, timing commands, cancellable input readers, terminal raw-mode
and size handling, and logging to a file. It has no dependencies outside the
standard library and needs a POSIX system (it uses `termios`).

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Models, commands and messages

`bubbletea.messages.Model` is an abstract base class with three methods:

- `init()` returns an optional first command, or `None`.
- `update(msg)` returns a pair `(model, command)`, where the command may be
  `None`.
- `view()` returns the string to draw.

A *command* is a callable that takes no arguments and returns a message.

`bubbletea.messages` also holds the built-in messages (`QuitMsg`, `BatchMsg`,
`EnterAltScreenMsg`, `ExitAltScreenMsg`, `EnableMouseCellMotionMsg`,
`EnableMouseAllMotionMsg`, `DisableMouseMsg`, `HideCursorMsg`,
`WindowSizeMsg`, `SyncScrollAreaMsg`, `ClearScrollAreaMsg`, `ScrollUpMsg`,
`ScrollDownMsg`) and the commands that produce them: `quit`,
`enter_alt_screen`, `exit_alt_screen`, `enable_mouse_cell_motion`,
`enable_mouse_all_motion`, `disable_mouse`, `hide_cursor` and
`clear_scroll_area`. `sync_scroll_area`, `scroll_up` and `scroll_down` take
lines and two boundaries and return a command for the matching message.
`batch(*cmds)` returns a command yielding a `BatchMsg` of the given
commands, or `None` when it is given none.

```python
from bubbletea.messages import Model, quit
from bubbletea.keys import KeyMsg


class Counter(Model):
    def __init__(self):
        self.count = 0

    def init(self):
        return None

    def update(self, msg):
        if isinstance(msg, KeyMsg):
            if str(msg) in ("q", "ctrl+c"):
                return self, quit
            self.count += 1
        return self, None

    def view(self):
        return f"Keys pressed: {self.count}\nPress q to quit.\n"
```

## Timing commands

`bubbletea.commands` has:

- `tick(duration, fn)`: a command that sleeps for the whole duration, then
  returns `fn(datetime.now())`.
- `every(duration, fn)`: like `tick`, but wakes at the next multiple of the
  duration on the system clock, so the wait is usually shorter.
- `sequentially(*cmds)`: a command that runs the commands in order and
  returns the first message that is not `None`.

Durations are seconds (int or float) or a `datetime.timedelta`.

## Keyboard and mouse input

`bubbletea.keys.read_input(stream)` reads one chunk (up to 256 bytes) from a
binary stream and returns a `KeyMsg` or a `MouseMsg`. It raises `EOFError`
at end of input and `InputError` when the bytes cannot be decoded.

```python
import io
from bubbletea.keys import read_input, KeyType

msg = read_input(io.BytesIO(b"\x1b[A"))
assert msg.type == KeyType.UP and str(msg) == "up"

assert str(read_input(io.BytesIO(b"\x1ba"))) == "alt+a"
assert str(read_input(io.BytesIO(b"\x01"))) == "ctrl+a"
```

`str()` of a key gives names such as `"enter"`, `"tab"`, `"space"`,
`"backspace"`, `"ctrl+c"`, `"shift+tab"`, `"pgup"` or the typed characters
themselves, with `"alt+"` in front when alt was held. `key_type_name` gives
the name of a bare `KeyType`, or `""` for one without a name.

`bubbletea.mouse.parse_x10_mouse_event(buf)` decodes a six-byte X10 mouse
report (`ESC [ M Cb Cx Cy`) into a `MouseEvent` with zero-based `x` and `y`,
a `MouseEventType` and `alt` and `ctrl` flags; it raises `ValueError` for
anything else. `str()` of an event gives names such as `"left"`,
`"wheel up"` or `"ctrl+alt+right"`.

## Cancellable reads

`bubbletea.cancelreader.new_cancel_reader(reader)` wraps a reader so that a
blocking read can be stopped from another thread with `cancel()`:

- A reader with a file descriptor gets a `SelectCancelReader`, which waits
  on the file and an internal pipe; `cancel()` wakes the waiting read, which
  raises `CanceledError`, and returns `True` if the signal was sent.
- Any other reader, or any reader on Windows, gets a `FallbackCancelReader`:
  `cancel()` returns `False` and cannot interrupt a read already in
  progress, but every later read raises `CanceledError`.

Both can be used as context managers; `close()` releases their own
resources and leaves the wrapped file open.

## Terminal handling

`bubbletea.tty` has:

- `console_from_file(f)`: a `Console` for a terminal file or descriptor
  (raises `OSError` if it is not a terminal). `set_raw()` switches it to raw
  mode, `reset()` restores the original mode; used as a context manager it
  does both.
- `open_input_tty()`: opens `/dev/tty` for unbuffered binary reading.
- `get_size(f)`: the terminal's `(width, height)`.
- `listen_for_resize(output, send, stop_event)`: blocks until `stop_event`
  is set, checking the size every 50 ms and calling `send` with a
  `WindowSizeMsg` whenever it changes; an `OSError` is passed to `send` and
  ends the listening.

## Logging

The terminal is taken up by the interface, so log messages should go to a
file. `bubbletea.logfile.log_to_file(path, prefix)` opens the file for
appending, attaches a handler to the root `logging` logger at DEBUG level
that writes each message after the prefix (a space is added after a
non-empty prefix that does not already end in whitespace), and returns the
open file for the caller to close. Calling it again replaces the earlier
handler.

## What this package does not do

There is no event loop that runs a model: nothing here starts a program,
feeds input and command results to `update`, or acts on the built-in
messages such as `QuitMsg` or `BatchMsg`. There is no renderer either, so
nothing draws the output of `view()` to the terminal, and no ANSI escape
sequences for cursor movement, the alternate screen or mouse reporting are
written. Applications must wire these pieces together themselves.