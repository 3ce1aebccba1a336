[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtoys"
version = "0.1.0"
description = "Small terminal toys: Conway's Game of Life, a falling-katakana rain and a box-drawing screen buffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "game-of-life", "matrix", "ansi", "box-drawing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termtoys-life = "termtoys.game_of_life:main"
termtoys-matrix = "termtoys.matrix:main"
termtoys-tetris = "termtoys.tetris:main"

[tool.hatch.build.targets.wheel]
packages = ["termtoys"]

[tool.pytest.ini_options]
addopts = "-ra"
