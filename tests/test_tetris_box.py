import pytest

from termtoys.screen_buffer import ScreenBuffer
from termtoys.tetris_box import BoxChar, make_rect


def test_smallest_box_uses_box_drawing_code_points():
    screen = ScreenBuffer(3, 3)
    make_rect(screen, (0, 0), (2, 2))
    assert screen.get((0, 0)) == chr(0x250C)
    assert screen.get((2, 0)) == chr(0x2510)
    assert screen.get((0, 2)) == chr(0x2514)
    assert screen.get((2, 2)) == chr(0x2518)
    assert screen.get((1, 0)) == chr(0x2500)
    assert screen.get((1, 2)) == chr(0x2500)
    assert screen.get((0, 1)) == chr(0x2502)
    assert screen.get((2, 1)) == chr(0x2502)
    assert screen.get((1, 1)) == " "


@pytest.fixture
def drawn():
    screen = ScreenBuffer(25, 12)
    make_rect(screen, (0, 1), (20, 10))
    return screen


def test_corners(drawn):
    assert drawn.get((0, 1)) == BoxChar.TOP_LEFT
    assert drawn.get((20, 1)) == BoxChar.TOP_RIGHT
    assert drawn.get((0, 10)) == BoxChar.BOTTOM_LEFT
    assert drawn.get((20, 10)) == BoxChar.BOTTOM_RIGHT


def test_edges(drawn):
    assert all(drawn.get((c, 1)) == BoxChar.HORIZONTAL for c in range(1, 20))
    assert all(drawn.get((c, 10)) == BoxChar.HORIZONTAL for c in range(1, 20))
    assert all(drawn.get((0, l)) == BoxChar.VERTICAL for l in range(2, 10))
    assert all(drawn.get((20, l)) == BoxChar.VERTICAL for l in range(2, 10))


def test_inside_and_outside_untouched(drawn):
    assert drawn.get((5, 5)) == " "
    assert drawn.get((22, 5)) == " "
    assert all(ch == " " for ch in drawn.rows[0])


def test_edges_start_from_cell_one():
    screen = ScreenBuffer(12, 8)
    make_rect(screen, (5, 3), (10, 6))
    assert screen.get((1, 3)) == BoxChar.HORIZONTAL
    assert screen.get((5, 1)) == BoxChar.VERTICAL
    assert screen.get((5, 3)) == BoxChar.TOP_LEFT


def test_rect_outside_buffer_raises():
    with pytest.raises(IndexError):
        make_rect(ScreenBuffer(10, 5), (0, 1), (20, 10))