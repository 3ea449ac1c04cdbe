[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtetris-draw"
version = "0.1.0"
description = "Curses window layout and drawing routines for a terminal falling-block puzzle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "curses", "terminal", "game", "puzzle", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termtetris_draw"]

[tool.hatch.build.targets.sdist]
include = ["termtetris_draw", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
