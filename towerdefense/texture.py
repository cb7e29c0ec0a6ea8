"""Coloured symbols used to draw game elements in the terminal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Color(Enum):
    """Terminal colours available to textures."""

    RESET = auto()
    GREEN = auto()
    RED = auto()
    BLUE = auto()
    YELLOW = auto()
    LIME = auto()


_COLOR_CODES = {
    Color.RESET: "\033[0m",
    Color.GREEN: "\033[32m",
    Color.RED: "\033[31m",
    Color.BLUE: "\033[34m",
    Color.YELLOW: "\033[33m",
    Color.LIME: "\033[92m",
}


def color_code(color: Color) -> str:
    """Return the ANSI escape sequence for a colour, RESET if unknown."""
    return _COLOR_CODES.get(color, _COLOR_CODES[Color.RESET])


@dataclass(frozen=True)
class Texture:
    """A single character drawn in a colour."""

    symbol: str
    color: Color = Color.RESET

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"texture symbol must be one character, got {self.symbol!r}")

    def representation(self) -> str:
        """The symbol wrapped in its colour code and a reset."""
        return f"{color_code(self.color)}{self.symbol}{color_code(Color.RESET)}"


BLANK = Texture("*", Color.RESET)