"""Falling katakana columns in the style of a digital rain."""

from __future__ import annotations

import argparse
import os
import random
import select
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
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

FRAME_TIME = 0.009
"""Seconds to wait for a key after each frame."""

SPEED_RANGE = (2, 10)
"""Bounds on how many frames pass before a line moves one row."""

LINE_MIN_RATIO = (1, 3)
LINE_MAX_RATIO = (4, 5)
"""Multiplier and divisor for the shortest and longest line length."""

KATAKANA_RANGE = (0x30A1, 0x30FD)

WHITE = (255, 255, 255)

_QUIT_KEY = "q"
_ENTER_ALT_SCREEN = "\x1b[?1049h"
_LEAVE_ALT_SCREEN = "\x1b[?1049l"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_RESET_STYLE = "\x1b[0m"

Color = tuple[int, int, int]


@dataclass
class Line:
    """One falling column: its glyphs with colours, speed and offset."""

    cells: list[tuple[str, Color]]
    speed: int
    pos: int = 0

    def __iter__(self) -> Iterator[tuple[str, Color]]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def speed_rng(rng: random.Random | None = None) -> int:
    """Pick a line speed within ``SPEED_RANGE``."""
    low, high = SPEED_RANGE
    return _rng(rng).randint(low, high)


def size_rng(maximum: int, rng: random.Random | None = None) -> int:
    """Pick a line length between the min and max ratios of ``maximum``."""
    start = LINE_MIN_RATIO[0] * maximum // LINE_MIN_RATIO[1]
    end = LINE_MAX_RATIO[0] * maximum // LINE_MAX_RATIO[1]
    return _rng(rng).randint(start, end)


def choose_color(index: int, size: int) -> Color:
    """Colour of glyph ``index`` in a line of ``size``: green ramp, white head."""
    if index == size - 1:
        return WHITE
    unit = max(255 // size, 2)
    return (0, min(unit * index, 255), 0)


def make_line(line_size: int, rng: random.Random | None = None) -> Line:
    """Create a random line for a terminal ``line_size`` rows tall."""
    rng = _rng(rng)
    size = size_rng(line_size, rng)
    speed = speed_rng(rng)
    low, high = KATAKANA_RANGE
    cells = [(chr(rng.randint(low, high)), choose_color(i, size)) for i in range(size)]
    return Line(cells, speed)


def update_line(line: Line, frame_count: int) -> None:
    """Move the line down one row when its speed divides ``frame_count``."""
    if frame_count % max(line.speed, 1) == 0:
        line.pos += 1


def draw_line(line: Line, column: int, rows: int, out: TextIO) -> None:
    """Write the line at ``column``, wrapping around ``rows`` terminal rows."""
    for offset, (ch, (red, green, blue)) in enumerate(line):
        row = (offset + line.pos) % rows
        out.write(
            f"\x1b[{row + 1};{column + 1}H"
            f"\x1b[38;2;{red};{green};{blue}m{ch}{_RESET_STYLE}"
        )


@contextmanager
def _raw_terminal(out: TextIO) -> Iterator[None]:
    saved = None
    fd = None
    if termios is not None and sys.stdin.isatty():
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    out.write(_ENTER_ALT_SCREEN + _HIDE_CURSOR)
    out.flush()
    try:
        yield
    finally:
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        out.write(_LEAVE_ALT_SCREEN + _SHOW_CURSOR)
        out.flush()


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
    """Run the animation until ``q`` is pressed."""
    parser = argparse.ArgumentParser(
        prog="matrix", description="Falling katakana rain; press q to quit."
    )
    parser.parse_args(argv)

    size = os.get_terminal_size(sys.stdout.fileno())
    columns, rows = size.columns, size.lines
    matrix = [make_line(rows) for _ in range(columns // 2)]
    frame_count = 0
    out = sys.stdout

    with _raw_terminal(out):
        while True:
            for index, line in enumerate(matrix):
                draw_line(line, index * 2, rows, out)
            out.flush()
            for line in matrix:
                update_line(line, frame_count)
            frame_count += 1
            if _poll_key(FRAME_TIME) == _QUIT_KEY:
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())