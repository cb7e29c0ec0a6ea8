import io
import re

from towerdefense.screen import move_cursor_to_end, render_text, set_cursor


def test_set_cursor_is_one_based():
    out = io.StringIO()
    set_cursor(0, 0, out)
    assert out.getvalue() == "\033[1;1H"


def test_set_cursor_row_before_column():
    out = io.StringIO()
    set_cursor(7, 2, out)
    match = re.fullmatch(r"\033\[(\d+);(\d+)H", out.getvalue())
    assert match is not None
    row, col = int(match.group(1)), int(match.group(2))
    assert row - 1 == 2
    assert col - 1 == 7


def test_render_text_positions_then_writes():
    out = io.StringIO()
    render_text(3, 4, "hi", out)
    assert out.getvalue() == "\033[5;4Hhi"


def test_move_cursor_to_end():
    out = io.StringIO()
    move_cursor_to_end(out)
    assert out.getvalue() == "\033[999;999H"