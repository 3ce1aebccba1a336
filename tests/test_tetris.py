import os

from termtoys.screen_buffer import ScreenBuffer
from termtoys.tetris import MESSAGE, do_something, main
from termtoys.tetris_box import BoxChar


def test_message_starts_with_greeting():
    assert MESSAGE.startswith("hello world!\n\r\t")
    assert MESSAGE.endswith(" ehllw")


def test_do_something_writes_message_on_line_five():
    screen = ScreenBuffer(len(MESSAGE) + 10, 8)
    do_something(screen)
    written = "".join(screen.get((4 + i, 5)) for i in range(len(MESSAGE)))
    assert written == MESSAGE
    assert all(screen.get((c, 5)) == " " for c in range(4))


def test_do_something_cuts_overflow():
    screen = ScreenBuffer(20, 8)
    do_something(screen)
    assert "".join(screen.rows[5][4:]) == MESSAGE[:16]
    assert all(ch == " " for ch in screen.rows[4])


def test_do_something_on_short_screen_writes_nothing():
    screen = ScreenBuffer(40, 3)
    do_something(screen)
    assert all(ch == " " for row in screen for ch in row)


def test_main_draws_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr(os, "get_terminal_size", lambda *args: os.terminal_size((30, 12)))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("\x1b[") == 30 * 12
    assert BoxChar.TOP_LEFT in out
    assert BoxChar.BOTTOM_RIGHT in out