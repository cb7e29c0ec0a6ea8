"""The grid of cells the game is drawn on."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .geometry import Vector2D
from .texture import BLANK, Texture


@dataclass
class GridCell:
    """A position on the grid and what is drawn there."""

    position: Vector2D
    texture: Texture = BLANK


class Grid:
    """A width by height field of cells, indexed by position."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._rows = [
            [GridCell(Vector2D(x, y)) for x in range(width)] for y in range(height)
        ]

    def _check(self, pos: Vector2D) -> None:
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            raise IndexError(f"{pos} is outside a {self.width}x{self.height} grid")

    def clear(self) -> None:
        """Reset every cell to the blank texture."""
        for row in self._rows:
            for cell in row:
                cell.texture = BLANK

    def draw(self, cell: GridCell) -> None:
        """Place a cell at its own position."""
        pos = cell.position
        self._check(pos)
        self._rows[pos.y][pos.x] = GridCell(pos, cell.texture)

    def cell_at(self, pos: Vector2D) -> GridCell:
        self._check(pos)
        return self._rows[pos.y][pos.x]

    def rows(self) -> list[list[GridCell]]:
        """The cells, row by row from the top."""
        return self._rows

    def render(self, out: TextIO | None = None) -> None:
        """Clear the terminal and draw the whole grid."""
        out = out if out is not None else sys.stdout
        out.write("\033[2J")
        out.write("\033[H")
        for row in self._rows:
            out.write("".join(cell.texture.representation() for cell in row))
            out.write("\n")
        out.flush()