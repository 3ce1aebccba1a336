"""Draw a greeting and a box on a terminal-sized screen buffer."""

from __future__ import annotations

import argparse
import sys

from termtoys.screen_buffer import ScreenBuffer, terminal_buffer
from termtoys.tetris_box import make_rect

MESSAGE = (
    "hello world!\n\r\tlajsdfkjasdfl;qwueropuiqweropqwuerpkalnzdgaiopsydriqwowyuerq"
    "iopweruyqweiopryuqweryioqweuiryqwriou ehllw"
)

_MESSAGE_ORIGIN = (4, 5)


def do_something(screen: ScreenBuffer) -> None:
    """Write ``MESSAGE`` along line 5 from cell 4, cutting off any overflow."""
    start_cell, line = _MESSAGE_ORIGIN
    for offset, ch in enumerate(MESSAGE):
        pos = (start_cell + offset, line)
        if pos in screen:
            screen.set(pos, ch)


def main(argv: list[str] | None = None) -> int:
    """Fill a terminal-sized buffer and draw it."""
    parser = argparse.ArgumentParser(
        prog="tetris", description="Draw a message and a box on the terminal."
    )
    parser.parse_args(argv)

    screen = terminal_buffer()
    do_something(screen)
    make_rect(screen, (0, 1), (20, 10))
    screen.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())