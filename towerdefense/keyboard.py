"""Non-blocking single-key input from the terminal."""

from __future__ import annotations

import os
import select
import sys
from enum import Enum, auto
from typing import TextIO

try:
    import termios
except ImportError:
    termios = None

try:
    import msvcrt
except ImportError:
    msvcrt = None


class InputEvent(Enum):
    """Keys the game reacts to."""

    NONE = auto()
    ESCAPE = auto()
    SPACE = auto()
    KEY_A = auto()


_KEYS = {
    "\x1b": InputEvent.ESCAPE,
    " ": InputEvent.SPACE,
    "a": InputEvent.KEY_A,
    "A": InputEvent.KEY_A,
}


def event_for_key(ch: str) -> InputEvent:
    """The event a typed character stands for, NONE if it means nothing."""
    return _KEYS.get(ch, InputEvent.NONE)


class KeyReader:
    """Reads keys one at a time; as a context manager it turns off echo and line mode."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        try:
            self._fd: int | None = self._stream.fileno()
        except (AttributeError, OSError):
            self._fd = None
        self._saved: list | None = None

    def __enter__(self) -> KeyReader:
        if termios is not None and self._fd is not None and os.isatty(self._fd):
            self._saved = termios.tcgetattr(self._fd)
            mode = termios.tcgetattr(self._fd)
            mode[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(self._fd, termios.TCSANOW, mode)
        return self

    def __exit__(self, *args: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            self._saved = None

    def _read_char(self, timeout: float) -> str:
        if self._fd is None:
            return self._stream.read(1)
        if msvcrt is not None and os.isatty(self._fd):
            return msvcrt.getwch() if msvcrt.kbhit() else ""
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return ""
        return os.read(self._fd, 1).decode("latin-1")

    def read_event(self, timeout: float = 0.01) -> InputEvent:
        """Wait up to timeout seconds for a key and return its event."""
        ch = self._read_char(timeout)
        return event_for_key(ch) if ch else InputEvent.NONE