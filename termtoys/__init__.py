"""Terminal toys: Game of Life, falling-katakana rain and a box-drawing screen buffer."""

__version__ = "0.1.0"
__all__ = ["game_of_life", "matrix", "screen_buffer", "tetris_box", "tetris"]