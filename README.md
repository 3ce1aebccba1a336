# termtoys

This package holds three small toys for the terminal. They use only the
Python standard library. Drawing is done with ANSI escape sequences.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command accepts `-h` for help and takes no other options.

### `termtoys-life`

This command runs Conway's Game of Life in the terminal's alternate
screen.

- The board is as tall as the terminal.
- The board is half as wide as the terminal, because each cell is drawn
  two columns wide.
- The board does not wrap around, so cells on the edges have fewer
  neighbours.

The run starts from a glider-like seed at a fixed place: rows 89–91,
cells 50–52. For this reason the terminal must be at least 92 rows tall
and 106 columns wide. On a smaller terminal, or when no terminal size
can be read, the command stops with an `IndexError` before it draws
anything.

Press `q` to quit.

### `termtoys-matrix`

This command draws columns of falling katakana in the alternate screen,
with the cursor hidden.

- There is one column for every two terminal columns.
- Each column has a random length, between one third and four fifths of
  the terminal height.
- Each column has a random speed. It moves down one row every 2 to 10
  frames, and wraps around at the bottom.
- The glyphs are shaded from dark to bright green, and the last glyph of
  each column is white.

Press `q` to quit.

### `termtoys-tetris`

This command fills a screen buffer the size of the terminal and draws it
once.

- Line 5 holds a line of sample text, starting at cell 4. Any text that
  runs past the edge is cut off.
- A box made of box-drawing characters spans cells 0–20 and lines 1–10.

The terminal must be at least 21 columns wide and 11 rows tall, or the
box raises an `IndexError`.

## Using the modules

The logic is kept apart from the terminal code:

```python
import io

from termtoys.game_of_life import Screen, to_next_life, draw_screen
from termtoys.screen_buffer import ScreenBuffer
from termtoys.tetris_box import make_rect

board = Screen(5, 5)              # 5 lines of 5 cells
for cell in (1, 2, 3):
    board.set(2, cell)            # a horizontal blinker
board = to_next_life(board)       # it becomes vertical
assert board.get(1, 2) and board.get(3, 2)

buffer = ScreenBuffer(12, 6)      # 12 cells by 6 lines, addressed as (cell, line)
make_rect(buffer, (0, 0), (11, 5))
out = io.StringIO()
buffer.flush(out)
```

### `termtoys.game_of_life`

- `Screen(lines, cells)` has the methods `get`, `set`, `unset`, `copy`
  and `neighbors_alive`. Positions outside the grid raise `IndexError`.
- `create_screen(size)` builds an empty board for a `(columns, rows)`
  terminal. Given `None`, it returns a 5×5 board with every cell alive.
- `to_next_life(screen)` returns the next generation.
- `draw_screen(screen, out)` writes the board to a stream.

### `termtoys.matrix`

- `make_line(line_size, rng)` builds a `Line`, with the fields `cells`,
  `speed` and `pos`.
- `update_line(line, frame_count)` advances a line.
- `draw_line(line, column, rows, out)` writes a line to a stream.
- `choose_color(index, size)` returns an `(r, g, b)` tuple.
- `speed_rng(rng)` and `size_rng(maximum, rng)` pick a speed and a
  length. The `rng` argument is an optional `random.Random`.

### `termtoys.screen_buffer`

- `ScreenBuffer(cells, lines)` has `get(pos)`, which returns `None` when
  `pos` is off the grid.
- It has `set(pos, ch)`, which raises `IndexError` when `pos` is off the
  grid and `ValueError` when `ch` is not a single character.
- It supports `pos in buffer`.
- `flush(out)` writes to a stream, to stdout by default.
- `terminal_buffer()` builds a buffer the size of the current terminal.

### `termtoys.tetris_box`

- `BoxChar` holds the box-drawing characters.
- `make_rect(screen, start, end)` draws a rectangle. The edges are
  always drawn from cell 1 and line 1 onward, whatever `start` is.

### `termtoys.tetris`

- `do_something(screen)` writes the sample text.

## What is not here

Despite its name, `termtoys-tetris` is not a game. It has no falling
blocks, reads no keys and does not animate. It draws one fixed frame
and exits.