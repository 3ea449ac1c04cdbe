# termtetris-draw

The drawing layer of a terminal falling-block puzzle game, built on Python's
standard `curses` module. It lays out the game's windows (board, hold, next,
stats, help, main menu, pause, game over, debug and logs) and renders a game
state into them. It has no dependencies beyond the standard library.

## Modules

### `termtetris_draw.windows`

- `GameWindow(height, width, y, x)` — a dataclass for a bordered window: an
  outer `border` window and a `content` sub-window one cell inside it. The
  properties `content_h`, `content_w` (never below 0), `content_y`,
  `content_x` and `is_open` are available at all times.
  - `open()` creates the curses windows and returns the window; opening an
    already open window does nothing.
  - `close()` drops the curses windows; closing twice is harmless.
  - The window is also a context manager: `with GameWindow(...) as w:` opens
    it and closes it afterwards.
  - `refresh()`, `draw_border(color_pair)` and `draw_title(title, color_pair)`
    need an open window and raise `RuntimeError` otherwise. The title is
    written on the top border at column 1.
- `WindowLayout(height, width, y, x)` and the layouts of every window:
  `BOARD_WINDOW`, `HOLD_WINDOW`, `NEXT_WINDOW`, `STATS_WINDOW`, `HELP_WINDOW`,
  `MAIN_MENU_WINDOW`, `PAUSE_WINDOW`, `GAME_OVER_WINDOW`, `DEBUG_WINDOW`,
  `LOGS_WINDOW`; the whole game is `GAME_H` × `GAME_W` (24 × 50).
- `ColorPair` — the curses colour pair numbers: `DEFAULT` (0), then `CYAN`,
  `BLUE`, `ORANGE`, `YELLOW`, `GREEN`, `MAGENTA`, `RED` (1 to 7). A block's
  shape number is used directly as its colour pair.
- Window titles, the block glyphs `[` `]`, the buffer-zone glyph `_`, the score
  width `BOARD_SCORE_W` (8) and the lock-delay bounds for dim and standout
  drawing.

### `termtetris_draw.screens`

Static decorations, drawn once per screen: `draw_board_window`,
`draw_hold_window`, `draw_next_window`, `draw_stats_window` (border, title and
labels), `draw_help_window(help_window, debug_mode=False)` (the controls; the
`set delay: d` line only when `debug_mode` is true), `draw_main_menu_window`
(two-part ASCII-art title, the second part coloured, plus level select, start
and quit keys), `draw_pause_window`, `draw_game_over_window`,
`draw_debug_window` and `draw_logs_window`.

Text helpers that do not touch the terminal:

- `help_line(label, key, width)` — label left-aligned, key right-aligned.
- `main_menu_title_color(row, column)` — the `ColorPair` of a character of the
  coloured title; raises `ValueError` for a row outside 0–3.
- `main_menu_level_text(start_level)` — e.g. `"< level  3 >"`.

### `termtetris_draw.render`

Per-frame drawing: `draw_board_state(board_window, game_state, buffer_zone_h)`
erases the board and draws the buffer-zone line, the locked stack, the ghost
piece (only when it is not at the current piece's row), the current piece and
the score. Each part is also available alone: `draw_buffer_zone_line`,
`draw_board_stack`, `draw_ghost_piece`, `draw_curr_piece`, `draw_score`. Then
`draw_hold_piece` (dimmed while holding is blocked, blank when nothing is
held), `draw_next_piece`, `draw_stats` and `draw_pause_stats`.

These functions only read the objects they are given. They expect:

- a game state with `board`, `curr_piece`, `ghost_piece`, `hold_piece`,
  `next_piece`, `holding_piece`, `hold_blocked`, `lock_delay_timer`, `score`,
  `lines` and `level`;
- pieces with `shape`, `y`, `x`, `n` (matrix size), `l`, `r` (rotation) and
  `M` (one matrix per rotation, filled cells equal to 1);
- statistics with `game_time_s`, `score_per_s`, `piece_per_s`, `num_single`,
  `num_double`, `num_triple` and `num_tetris`.

The protocols `GameStateLike`, `PieceLike` and `StatsLike` describe these.

Pure helpers:

- `lock_delay_attribute(lock_delay_timer)` — `curses.A_DIM` for 5–20 frames
  left, `curses.A_STANDOUT` for 0–4, otherwise 0.
- `format_game_time(game_time_s)` — `"MM:SS"`; hours are not shown.
- `format_rate(label, value)` — e.g. `"sps: 12.000"`; values between 0 and 1
  get one significant digit less.
- `format_score(score)` — zero-padded to eight digits.

## Usage

Curses must be running and colour pairs 1–7 set up by the caller before
windows are opened.

```python
import curses

from termtetris_draw import render, screens
from termtetris_draw.windows import BOARD_WINDOW, GameWindow


def run(stdscr, game_state, stats):
    with GameWindow(*BOARD_WINDOW) as board:
        screens.draw_board_window(board)
        render.draw_board_state(board, game_state, 2)
        board.refresh()
        stdscr.getch()
```

The text helpers work without a terminal:

```python
from termtetris_draw.render import format_game_time, format_score

format_score(1234)      # "00001234"
format_game_time(75)    # "01:15"
```

## What it does not do

This package only draws. It has no game rules, piece generation, input
handling or main loop, and no command to start a game. The debug and logs
windows get their border and title only; nothing here fills them with state
variables or log lines.

## Tests

The test suite uses pytest; the `test` extra installs it.