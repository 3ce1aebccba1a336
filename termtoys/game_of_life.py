"""Conway's Game of Life drawn full-screen in the terminal."""

from __future__ import annotations

import argparse
import os
import select
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

BLOCK_ALIVE = "\u2588\u2588"
BLOCK_DEAD = "  "

_ENTER_ALT_SCREEN = "\x1b[?1049h"
_LEAVE_ALT_SCREEN = "\x1b[?1049l"
_QUIT_KEY = "q"
_POLL_TIMEOUT = 0.001
_GLIDER_ORIGIN = (90, 50)
_FALLBACK_SIZE = 5


@dataclass
class Screen:
    """A grid of cells, ``lines`` rows of ``cells`` columns each."""

    lines: int
    cells: int
    rows: list[list[bool]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.rows:
            self.rows = [[False] * self.cells for _ in range(self.lines)]

    def __iter__(self) -> Iterator[list[bool]]:
        return iter(self.rows)

    def _check(self, line: int, cell: int) -> None:
        if not (0 <= line < len(self.rows) and 0 <= cell < len(self.rows[line])):
            raise IndexError(f"cell ({line}, {cell}) is outside the screen")

    def get(self, line: int, cell: int) -> bool:
        """Return whether the cell is alive."""
        self._check(line, cell)
        return self.rows[line][cell]

    def set(self, line: int, cell: int) -> None:
        """Bring the cell to life."""
        self._check(line, cell)
        self.rows[line][cell] = True

    def unset(self, line: int, cell: int) -> None:
        """Kill the cell."""
        self._check(line, cell)
        self.rows[line][cell] = False

    def copy(self) -> Screen:
        """Return an independent copy of the screen."""
        return Screen(self.lines, self.cells, [list(row) for row in self.rows])

    def neighbors_alive(self, line: int, cell: int) -> int:
        """Count the living cells among the up to eight neighbours."""
        count = 0
        for dl in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dl == 0 and dc == 0:
                    continue
                nl, nc = line + dl, cell + dc
                if 0 <= nl < self.lines and 0 <= nc < self.cells and self.get(nl, nc):
                    count += 1
        return count


def create_screen(size: tuple[int, int] | None) -> Screen:
    """Build an empty screen for a terminal of ``(columns, rows)``.

    Each cell takes two columns. Without a size, a small fully alive
    screen is returned.
    """
    if size is None:
        return Screen(
            _FALLBACK_SIZE,
            _FALLBACK_SIZE,
            [[True] * _FALLBACK_SIZE for _ in range(_FALLBACK_SIZE)],
        )
    columns, rows = size
    return Screen(rows, columns // 2)


def to_next_life(screen: Screen) -> Screen:
    """Return the next generation of ``screen``."""
    following = screen.copy()
    for line, row in enumerate(screen):
        for cell, alive in enumerate(row):
            count = screen.neighbors_alive(line, cell)
            if (alive and count < 2) or count > 3:
                following.unset(line, cell)
            elif not alive and count == 3:
                following.set(line, cell)
    return following


def draw_screen(screen: Screen, out: TextIO) -> None:
    """Write the screen to ``out``, one terminal row per line."""
    for line, row in enumerate(screen):
        out.write(f"\x1b[{line + 1};1H")
        out.write("".join(BLOCK_ALIVE if alive else BLOCK_DEAD for alive in row))
    out.flush()


def _terminal_size() -> tuple[int, int] | None:
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError):
        return None
    return size.columns, size.lines


@contextmanager
def _raw_terminal(out: TextIO) -> Iterator[None]:
    saved = None
    fd = None
    if termios is not None and sys.stdin.isatty():
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    out.write(_ENTER_ALT_SCREEN)
    out.flush()
    try:
        yield
    finally:
        out.write(_LEAVE_ALT_SCREEN)
        out.flush()
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _poll_key(timeout: float) -> str | None:
    if msvcrt is not None:
        deadline = time.monotonic() + timeout
        while True:
            if msvcrt.kbhit():
                return msvcrt.getwch()
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.001)
    ready, _, _ = select.select([sys.stdin], [], [], timeout)
    if ready:
        return os.read(sys.stdin.fileno(), 1).decode(errors="replace")
    return None


def main(argv: list[str] | None = None) -> int:
    """Run the simulation until ``q`` is pressed."""
    parser = argparse.ArgumentParser(
        prog="game_of_life", description="Conway's Game of Life; press q to quit."
    )
    parser.parse_args(argv)

    screen = create_screen(_terminal_size())
    line, cell = _GLIDER_ORIGIN
    screen.set(line, cell)
    screen.set(line, cell + 1)
    screen.set(line + 1, cell + 1)
    screen.set(line + 1, cell + 2)
    screen.set(line - 1, cell + 1)

    out = sys.stdout
    with _raw_terminal(out):
        while True:
            draw_screen(screen, out)
            screen = to_next_life(screen)
            if _poll_key(_POLL_TIMEOUT) == _QUIT_KEY:
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())