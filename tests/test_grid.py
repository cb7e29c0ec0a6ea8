import io

import pytest

from towerdefense.geometry import Vector2D
from towerdefense.grid import Grid, GridCell
from towerdefense.texture import BLANK, Color, Texture


def test_new_grid_dimensions_and_positions():
    grid = Grid(6, 4)
    rows = grid.rows()
    assert len(rows) == 4
    assert all(len(row) == 6 for row in rows)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            assert cell.position == Vector2D(x, y)
            assert cell.texture == BLANK


def test_draw_then_cell_at():
    grid = Grid(5, 5)
    tex = Texture("@", Color.RED)
    grid.draw(GridCell(Vector2D(2, 3), tex))
    assert grid.cell_at(Vector2D(2, 3)).texture == tex
    assert grid.cell_at(Vector2D(3, 2)).texture == BLANK


def test_clear_resets_textures():
    grid = Grid(3, 3)
    grid.draw(GridCell(Vector2D(1, 1), Texture("T", Color.GREEN)))
    grid.clear()
    assert all(cell.texture == BLANK for row in grid.rows() for cell in row)
    assert grid.cell_at(Vector2D(1, 1)).position == Vector2D(1, 1)


def test_clear_does_not_alter_drawn_cell_object():
    grid = Grid(3, 3)
    cell = GridCell(Vector2D(0, 0), Texture("o", Color.BLUE))
    grid.draw(cell)
    grid.clear()
    assert cell.texture == Texture("o", Color.BLUE)


@pytest.mark.parametrize("pos", [Vector2D(-1, 0), Vector2D(0, -1), Vector2D(3, 0), Vector2D(0, 2)])
def test_out_of_bounds_raises(pos):
    grid = Grid(3, 2)
    with pytest.raises(IndexError):
        grid.cell_at(pos)
    with pytest.raises(IndexError):
        grid.draw(GridCell(pos))


def test_render_output():
    grid = Grid(4, 3)
    grid.draw(GridCell(Vector2D(0, 0), Texture("T", Color.GREEN)))
    out = io.StringIO()
    grid.render(out)
    text = out.getvalue()
    assert text.startswith("\033[2J\033[H")
    assert text.count("\n") == 3
    assert text.count(BLANK.representation()) == 4 * 3 - 1
    assert Texture("T", Color.GREEN).representation() in text