import curses
from unittest import mock

import pytest

from termtetris_draw import screens
from termtetris_draw.windows import (
    BOARD_WINDOW,
    DEBUG_WINDOW,
    GAME_OVER_WINDOW,
    HELP_WINDOW,
    HOLD_WINDOW,
    LOGS_WINDOW,
    MAIN_MENU_WINDOW,
    NEXT_WINDOW,
    PAUSE_WINDOW,
    STATS_WINDOW,
    ColorPair,
    GameWindow,
)


class FakeWindow:
    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.cells = {}
        self.current = 0
        self.boxed_with = None

    def attron(self, attr):
        self.current |= attr

    def attroff(self, attr):
        self.current &= ~attr

    def box(self, *_args):
        self.boxed_with = self.current

    def addstr(self, y, x, text, attr=None):
        if not 0 <= y < self.height:
            raise curses.error("out of window")
        effective = self.current if attr is None else attr
        for offset, char in enumerate(text):
            col = x + offset
            if col >= self.width:
                raise curses.error("out of window")
            self.cells[(y, col)] = (char, effective)

    def row_text(self, y):
        return "".join(
            self.cells.get((y, x), (" ", 0))[0] for x in range(self.width)
        ).rstrip()

    def attr_at(self, y, x):
        return self.cells[(y, x)][1]


def make_window(layout):
    window = GameWindow(*layout)
    window.border = FakeWindow(window.height, window.width)
    window.content = FakeWindow(window.content_h, window.content_w)
    return window


@pytest.fixture(autouse=True)
def color_pairs():
    with mock.patch("curses.color_pair", side_effect=lambda n: n << 8):
        yield


def test_help_line_fills_width():
    line = screens.help_line("move: ", "< >", 12)
    assert len(line) == 12
    assert line.startswith("move: ")
    assert line.endswith("< >")


def test_help_line_label_longer_than_width():
    line = screens.help_line("soft drop: ", "v", 5)
    assert line.startswith("soft drop: v")


def test_main_menu_title_color_bad_row():
    with pytest.raises(ValueError):
        screens.main_menu_title_color(4, 0)


def test_main_menu_level_text():
    assert screens.main_menu_level_text(1) == "< level  1 >"
    lengths = {len(screens.main_menu_level_text(level)) for level in range(1, 16)}
    assert lengths == {len("< level  1 >")}


def test_board_window_border_only():
    window = make_window(BOARD_WINDOW)
    screens.draw_board_window(window)
    assert window.border.boxed_with == 0
    assert window.border.cells == {}


@pytest.mark.parametrize(
    "draw, layout, title",
    [
        (screens.draw_hold_window, HOLD_WINDOW, "HOLD"),
        (screens.draw_next_window, NEXT_WINDOW, "NEXT"),
    ],
)
def test_titled_windows(draw, layout, title):
    window = make_window(layout)
    draw(window)
    assert window.border.row_text(0) == " " + title
    assert window.border.boxed_with == 0


def test_stats_window_labels():
    window = make_window(STATS_WINDOW)
    screens.draw_stats_window(window)
    assert window.border.row_text(0) == " STATS"
    assert window.content.row_text(1) == "time:"
    assert window.content.row_text(3) == "lines:"
    assert window.content.row_text(5) == "level:"
    assert window.content.row_text(7) == "sps:"
    assert window.content.row_text(8) == "pps:"


def test_help_window_controls():
    window = make_window(HELP_WINDOW)
    screens.draw_help_window(window, False)
    assert window.border.row_text(0) == " HELP"
    assert window.content.row_text(1) == screens.help_line("move: ", "< >", window.content_w)
    assert window.content.row_text(11) == screens.help_line("pause: ", "esc", window.content_w)
    assert window.content.row_text(13) == ""


def test_help_window_debug_mode_adds_set_delay():
    window = make_window(HELP_WINDOW)
    screens.draw_help_window(window, True)
    row = window.content.row_text(13)
    assert row.startswith("set delay: ")
    assert row.endswith("d")


def test_main_menu_window():
    window = make_window(MAIN_MENU_WINDOW)
    screens.draw_main_menu_window(window, 3)
    content = window.content
    assert content.row_text(10).strip() == screens.main_menu_level_text(3).strip()
    assert content.row_text(12).strip() == "start: _"
    assert content.row_text(14).strip() == "quit: esc"
    assert content.row_text(0).strip() == screens.MAIN_MENU_TITLE_TERMINAL[0].strip()
    assert content.attr_at(4, 8) == int(ColorPair.RED) << 8
    assert content.attr_at(5, 14) == int(ColorPair.ORANGE) << 8
    assert content.row_text(7)[7:] == screens.MAIN_MENU_TITLE_TETRIS[3].rstrip()


def test_pause_window_cyan():
    window = make_window(PAUSE_WINDOW)
    screens.draw_pause_window(window)
    assert window.border.row_text(0) == " PAUSE"
    assert window.border.attr_at(0, 1) == int(ColorPair.CYAN) << 8
    assert window.border.boxed_with == int(ColorPair.CYAN) << 8
    assert window.content.row_text(0) == " resume:  _"
    assert window.content.row_text(1) == " restart: r"
    assert window.content.row_text(2) == " back:  esc"


def test_game_over_window_red():
    window = make_window(GAME_OVER_WINDOW)
    screens.draw_game_over_window(window)
    assert window.border.row_text(0) == " GAME-OVER"
    assert window.border.attr_at(0, 1) == int(ColorPair.RED) << 8
    assert window.content.row_text(0) == " restart: r"
    assert window.content.row_text(1) == " back:  esc"


@pytest.mark.parametrize(
    "draw, layout, title",
    [
        (screens.draw_debug_window, DEBUG_WINDOW, "DEBUG"),
        (screens.draw_logs_window, LOGS_WINDOW, "LOGS"),
    ],
)
def test_debug_windows_red(draw, layout, title):
    window = make_window(layout)
    draw(window)
    assert window.border.row_text(0) == " " + title
    assert window.border.boxed_with == int(ColorPair.RED) << 8


def test_unopened_window_raises():
    window = GameWindow(*HOLD_WINDOW)
    with pytest.raises(RuntimeError):
        screens.draw_hold_window(window)