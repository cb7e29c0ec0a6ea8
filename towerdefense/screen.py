"""Positioned text output on an ANSI terminal."""

from __future__ import annotations

import sys
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def set_cursor(x: int, y: int, out: TextIO | None = None) -> None:
    """Move the cursor to zero-based column x, row y."""
    _stream(out).write(f"\033[{y + 1};{x + 1}H")


def render_text(x: int, y: int, text: str, out: TextIO | None = None) -> None:
    """Write text starting at column x, row y."""
    stream = _stream(out)
    set_cursor(x, y, stream)
    stream.write(text)
    stream.flush()


def move_cursor_to_end(out: TextIO | None = None) -> None:
    """Park the cursor far below and to the right of the game."""
    stream = _stream(out)
    stream.write("\033[999;999H")
    stream.flush()