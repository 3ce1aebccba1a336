"""A character grid that is drawn to the terminal in one pass."""

from __future__ import annotations

import os
import sys
from typing import Iterator, TextIO

Position = tuple[int, int]


class ScreenBuffer:
    """A grid of ``lines`` rows of ``cells`` characters, addressed as (cell, line)."""

    def __init__(self, cells: int, lines: int) -> None:
        self.cells = cells
        self.lines = lines
        self.rows = [[" "] * cells for _ in range(lines)]

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self.rows)

    def __contains__(self, pos: Position) -> bool:
        cell, line = pos
        return 0 <= line < self.lines and 0 <= cell < self.cells

    def get(self, pos: Position) -> str | None:
        """Return the character at ``pos``, or None when it is off the grid."""
        if pos not in self:
            return None
        cell, line = pos
        return self.rows[line][cell]

    def set(self, pos: Position, ch: str) -> None:
        """Put ``ch`` at ``pos``; raise IndexError when it is off the grid."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if pos not in self:
            raise IndexError(f"position {pos} is outside the buffer")
        cell, line = pos
        self.rows[line][cell] = ch

    def flush(self, out: TextIO | None = None) -> None:
        """Write every character to its own terminal position."""
        out = out if out is not None else sys.stdout
        for line, row in enumerate(self.rows):
            for cell, ch in enumerate(row):
                out.write(f"\x1b[{line + 1};{cell + 1}H{ch}")
        out.flush()


def terminal_buffer() -> ScreenBuffer:
    """Create a buffer as large as the current terminal."""
    size = os.get_terminal_size()
    return ScreenBuffer(size.columns, size.lines)