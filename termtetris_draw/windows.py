"""Bordered curses windows and the layout, colours and glyphs of the game screen."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, NamedTuple


class WindowLayout(NamedTuple):
    """Outer size and position of a window, borders included."""

    height: int
    width: int
    y: int
    x: int


# Total dimensions of the game.
GAME_H = 24
GAME_W = 50

BOARD_WINDOW = WindowLayout(24, 22, 0, 14)
HOLD_WINDOW = WindowLayout(6, 14, 2, 0)
NEXT_WINDOW = WindowLayout(6, 14, 2, 36)
STATS_WINDOW = WindowLayout(16, 14, 8, 0)
HELP_WINDOW = WindowLayout(16, 14, 8, 36)
MAIN_MENU_WINDOW = WindowLayout(18, 40, 3, 5)
PAUSE_WINDOW = WindowLayout(5, 14, 9, 18)
GAME_OVER_WINDOW = WindowLayout(4, 14, 9, 18)
DEBUG_WINDOW = WindowLayout(24, 50, 0, 50)
LOGS_WINDOW = WindowLayout(20, 100, 24, 0)

# Width of the score display at the bottom of the board window.
BOARD_SCORE_W = 8

HOLD_TITLE = "HOLD"
NEXT_TITLE = "NEXT"
STATS_TITLE = "STATS"
HELP_TITLE = "HELP"
PAUSE_TITLE = "PAUSE"
GAME_OVER_TITLE = "GAME-OVER"
DEBUG_TITLE = "DEBUG"
LOGS_TITLE = "LOGS"

# Characters used for pieces and the board.
BLOCK_LEFT = "["
BLOCK_RIGHT = "]"
BOARD_SPACE = " "
BUFFER_ZONE_LINE = "_"


class ColorPair(IntEnum):
    """Curses colour pair numbers; each piece shape uses its own pair."""

    DEFAULT = 0
    CYAN = 1
    BLUE = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    MAGENTA = 6
    RED = 7


# Lock delay frame bounds for dim and standout drawing of the current piece.
LOCK_DELAY_DIM_MAX = 20
LOCK_DELAY_DIM_MIN = 5
LOCK_DELAY_STANDOUT_MAX = 4
LOCK_DELAY_STANDOUT_MIN = 0


@dataclass
class GameWindow:
    """A border window with a content sub-window one cell inside it.

    The curses windows exist only between ``open()`` and ``close()``; the
    dimensions are available at all times.
    """

    height: int
    width: int
    y: int
    x: int
    border: Any = field(default=None, init=False, repr=False, compare=False)
    content: Any = field(default=None, init=False, repr=False, compare=False)

    @property
    def content_h(self) -> int:
        return max(self.height - 2, 0)

    @property
    def content_w(self) -> int:
        return max(self.width - 2, 0)

    @property
    def content_y(self) -> int:
        return self.y + 1

    @property
    def content_x(self) -> int:
        return self.x + 1

    @property
    def is_open(self) -> bool:
        return self.border is not None

    def open(self) -> GameWindow:
        """Create the curses border and content windows."""
        if not self.is_open:
            self.border = curses.newwin(self.height, self.width, self.y, self.x)
            self.content = self.border.subwin(
                self.content_h, self.content_w, self.content_y, self.content_x
            )
        return self

    def close(self) -> None:
        """Release the curses windows; closing twice is harmless."""
        self.content = None
        self.border = None

    def __enter__(self) -> GameWindow:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _require_open(self) -> None:
        if not self.is_open:
            raise RuntimeError("window is not open")

    def refresh(self) -> None:
        """Refresh the border and then the content window."""
        self._require_open()
        self.border.refresh()
        self.content.refresh()

    def draw_border(self, color_pair: int) -> None:
        """Draw a box around the window in the given colour pair."""
        self._require_open()
        attr = curses.color_pair(int(color_pair))
        self.border.attron(attr)
        try:
            self.border.box(0, 0)
        finally:
            self.border.attroff(attr)

    def draw_title(self, title: str, color_pair: int) -> None:
        """Write ``title`` onto the top border at column 1."""
        self._require_open()
        attr = curses.color_pair(int(color_pair))
        self.border.attron(attr)
        try:
            self.border.addstr(0, 1, title)
        finally:
            self.border.attroff(attr)