"""Static screens: borders, titles, labels, controls and the main menu."""

from __future__ import annotations

import curses

from .windows import (
    DEBUG_TITLE,
    GAME_OVER_TITLE,
    HELP_TITLE,
    HOLD_TITLE,
    LOGS_TITLE,
    NEXT_TITLE,
    PAUSE_TITLE,
    STATS_TITLE,
    ColorPair,
    GameWindow,
)

# Labels of the stats window as (y, x, text), relative to its content.
STATS_LABELS = (
    (1, 0, "time:"),
    (5, 0, "level:"),
    (3, 0, "lines:"),
    (7, 0, "sps:"),
    (8, 0, "pps:"),
)

# Controls of the help window as (y, x, label, key).
HELP_CONTROLS = (
    (1, 0, "move: ", "< >"),
    (3, 0, "rotate: ", "z x"),
    (5, 0, "hold: ", "c"),
    (7, 0, "soft drop: ", "v"),
    (9, 0, "hard drop: ", "_"),
    (11, 0, "pause: ", "esc"),
)
HELP_SET_DELAY = (13, 0, "set delay: ", "d")

MAIN_MENU_TITLE_TERMINAL = (
    " _____              _           _ ",
    "|_   _|__ _ _ _ __ (_)_ _  __ _| |",
    "  | |/ -_) '_| '  \\| | ' \\/ _` | |",
    "  |_|\\___|_| |_|_|_|_||_\\__,_|_|",
)
MAIN_MENU_TITLE_TETRIS = (
    " _____    _       _    ",
    "|_   _|__| |_ _ _(_)___",
    "  | |/ -_)  _| '_| (_-<",
    "  |_|\\___|\\__|_| |_/__/",
)
MAIN_MENU_TITLE_TERMINAL_Y = 0
MAIN_MENU_TITLE_TERMINAL_X = 2
MAIN_MENU_TITLE_TETRIS_Y = 4
MAIN_MENU_TITLE_TETRIS_X = 7

MAIN_MENU_LEVEL_W = 8
MAIN_MENU_LEVEL_Y = 10
MAIN_MENU_LEVEL_X = 13
MAIN_MENU_START = (12, 15, "start: _")
MAIN_MENU_QUIT = (14, 15, "quit: esc")

PAUSE_LINES = (
    (0, 1, "resume:  _"),
    (1, 1, "restart: r"),
    (2, 1, "back:  esc"),
)
GAME_OVER_LINES = (
    (0, 1, "restart: r"),
    (1, 1, "back:  esc"),
)

_TITLE_COLORS = (
    ColorPair.RED,
    ColorPair.ORANGE,
    ColorPair.YELLOW,
    ColorPair.GREEN,
    ColorPair.CYAN,
    ColorPair.MAGENTA,
)

# Inclusive column bounds of each colour, one row per line of the title art.
_TITLE_COLOR_BOUNDS = (
    ((1, 5), (0, 0), (10, 10), (0, 0), (18, 18), (0, 0)),
    ((0, 6), (7, 8), (9, 12), (14, 16), (17, 19), (20, 22)),
    ((2, 4), (5, 9), (10, 13), (14, 16), (17, 18), (19, 22)),
    ((2, 4), (5, 9), (10, 12), (13, 16), (17, 18), (19, 22)),
)


def _put(window, y: int, x: int, text: str, attr: int | None = None) -> None:
    """Write text, ignoring the error curses raises for the last cell."""
    try:
        if attr is None:
            window.addstr(y, x, text)
        else:
            window.addstr(y, x, text, attr)
    except curses.error:
        pass


def help_line(label: str, key: str, width: int) -> str:
    """Left-align ``label`` and right-align ``key`` across ``width`` columns."""
    pad = width - len(label)
    if pad >= 0:
        return label + key.rjust(pad)
    return label + key.ljust(-pad)


def main_menu_title_color(row: int, column: int) -> ColorPair:
    """Colour of a character of the coloured title art."""
    if not 0 <= row < len(_TITLE_COLOR_BOUNDS):
        raise ValueError(f"title row out of range: {row}")
    for (low, high), color in zip(_TITLE_COLOR_BOUNDS[row], _TITLE_COLORS):
        if low <= column <= high:
            return color
    return _TITLE_COLORS[0]


def main_menu_level_text(start_level: int) -> str:
    """The level selector text of the main menu."""
    width = MAIN_MENU_LEVEL_W - len("level")
    return f"< level{start_level:>{width}} >"


def draw_board_window(board_window: GameWindow) -> None:
    board_window.draw_border(ColorPair.DEFAULT)


def draw_hold_window(hold_window: GameWindow) -> None:
    hold_window.draw_border(ColorPair.DEFAULT)
    hold_window.draw_title(HOLD_TITLE, ColorPair.DEFAULT)


def draw_next_window(next_window: GameWindow) -> None:
    next_window.draw_border(ColorPair.DEFAULT)
    next_window.draw_title(NEXT_TITLE, ColorPair.DEFAULT)


def draw_stats_window(stats_window: GameWindow) -> None:
    stats_window.draw_border(ColorPair.DEFAULT)
    stats_window.draw_title(STATS_TITLE, ColorPair.DEFAULT)
    for y, x, text in STATS_LABELS:
        _put(stats_window.content, y, x, text)


def draw_help_window(help_window: GameWindow, debug_mode: bool = False) -> None:
    """Draw the controls; the set-delay key appears only in debug mode."""
    help_window.draw_border(ColorPair.DEFAULT)
    help_window.draw_title(HELP_TITLE, ColorPair.DEFAULT)
    controls = HELP_CONTROLS + ((HELP_SET_DELAY,) if debug_mode else ())
    for y, x, label, key in controls:
        _put(help_window.content, y, x, help_line(label, key, help_window.content_w))


def draw_main_menu_window(main_menu_window: GameWindow, start_level: int) -> None:
    main_menu_window.draw_border(ColorPair.DEFAULT)
    content = main_menu_window.content

    for row, line in enumerate(MAIN_MENU_TITLE_TERMINAL):
        _put(
            content,
            MAIN_MENU_TITLE_TERMINAL_Y + row,
            MAIN_MENU_TITLE_TERMINAL_X,
            line,
        )

    for row, line in enumerate(MAIN_MENU_TITLE_TETRIS):
        for column, char in enumerate(line):
            attr = curses.color_pair(int(main_menu_title_color(row, column)))
            _put(
                content,
                MAIN_MENU_TITLE_TETRIS_Y + row,
                MAIN_MENU_TITLE_TETRIS_X + column,
                char,
                attr,
            )

    _put(content, MAIN_MENU_LEVEL_Y, MAIN_MENU_LEVEL_X, main_menu_level_text(start_level))
    _put(content, *MAIN_MENU_START)
    _put(content, *MAIN_MENU_QUIT)


def draw_pause_window(pause_window: GameWindow) -> None:
    pause_window.draw_border(ColorPair.CYAN)
    pause_window.draw_title(PAUSE_TITLE, ColorPair.CYAN)
    for y, x, text in PAUSE_LINES:
        _put(pause_window.content, y, x, text)


def draw_game_over_window(game_over_window: GameWindow) -> None:
    game_over_window.draw_border(ColorPair.RED)
    game_over_window.draw_title(GAME_OVER_TITLE, ColorPair.RED)
    for y, x, text in GAME_OVER_LINES:
        _put(game_over_window.content, y, x, text)


def draw_debug_window(debug_window: GameWindow) -> None:
    debug_window.draw_border(ColorPair.RED)
    debug_window.draw_title(DEBUG_TITLE, ColorPair.RED)


def draw_logs_window(logs_window: GameWindow) -> None:
    logs_window.draw_border(ColorPair.RED)
    logs_window.draw_title(LOGS_TITLE, ColorPair.RED)