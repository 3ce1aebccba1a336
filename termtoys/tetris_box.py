"""Box-drawing rectangles on a screen buffer."""

from __future__ import annotations

from termtoys.screen_buffer import ScreenBuffer


class BoxChar:
    """Light box-drawing characters."""

    TOP_LEFT = "\u250c"
    TOP_RIGHT = "\u2510"
    BOTTOM_LEFT = "\u2514"
    BOTTOM_RIGHT = "\u2518"
    HORIZONTAL = "\u2500"
    VERTICAL = "\u2502"


def make_rect(
    screen: ScreenBuffer, start: tuple[int, int], end: tuple[int, int]
) -> None:
    """Draw a rectangle from ``start`` to ``end``, both given as (cell, line).

    The edges are drawn from cell 1 and line 1 onward, not from ``start``.
    Raises IndexError if any part falls outside the buffer.
    """
    start_cell, start_line = start
    end_cell, end_line = end

    for cell in range(1, end_cell):
        screen.set((cell, start_line), BoxChar.HORIZONTAL)
        screen.set((cell, end_line), BoxChar.HORIZONTAL)

    for line in range(1, end_line):
        screen.set((start_cell, line), BoxChar.VERTICAL)
        screen.set((end_cell, line), BoxChar.VERTICAL)

    screen.set((start_cell, start_line), BoxChar.TOP_LEFT)
    screen.set((end_cell, start_line), BoxChar.TOP_RIGHT)
    screen.set((start_cell, end_line), BoxChar.BOTTOM_LEFT)
    screen.set((end_cell, end_line), BoxChar.BOTTOM_RIGHT)