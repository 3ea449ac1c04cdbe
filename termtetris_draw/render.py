"""Drawing of the live game: board, pieces, score, hold/next previews and stats."""

from __future__ import annotations

import curses
from typing import Iterator, Protocol, Sequence

from .windows import (
    BLOCK_LEFT,
    BLOCK_RIGHT,
    BOARD_SCORE_W,
    BUFFER_ZONE_LINE,
    LOCK_DELAY_DIM_MAX,
    LOCK_DELAY_DIM_MIN,
    LOCK_DELAY_STANDOUT_MAX,
    LOCK_DELAY_STANDOUT_MIN,
    ColorPair,
    GameWindow,
)

BLOCK = BLOCK_LEFT + BLOCK_RIGHT

# Label positions relative to the stats window content, as (y, x).
STATS_TIME = (1, 0)
STATS_LINES = (3, 0)
STATS_LEVEL = (5, 0)
STATS_SPS = (7, 0)
STATS_PPS = (8, 0)

# Line-clear counts shown in the stats window while paused, as (y, x, label, attribute).
PAUSE_STATS = (
    (10, 0, "single", "num_single"),
    (11, 0, "double", "num_double"),
    (12, 0, "triple", "num_triple"),
    (13, 0, "tetris", "num_tetris"),
)


class PieceLike(Protocol):
    """A piece: shape number, centre position, matrix size, length, rotation and matrices."""

    shape: int
    y: int
    x: int
    n: int
    l: int  # noqa: E741
    r: int
    M: Sequence[Sequence[Sequence[int]]]


class GameStateLike(Protocol):
    board: Sequence[Sequence[int]]
    curr_piece: PieceLike
    ghost_piece: PieceLike
    hold_piece: PieceLike
    next_piece: PieceLike
    holding_piece: bool
    hold_blocked: bool
    lock_delay_timer: int
    score: int
    lines: int
    level: int


class StatsLike(Protocol):
    game_time_s: float
    score_per_s: float
    piece_per_s: float
    num_single: int
    num_double: int
    num_triple: int
    num_tetris: int


def _put(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write text, ignoring the error curses raises for the last cell."""
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _filled_cells(piece: PieceLike, rotation: int) -> Iterator[tuple[int, int]]:
    """Row and column of each filled cell of a piece matrix."""
    for i, row in enumerate(piece.M[rotation][: piece.n]):
        for j, cell in enumerate(row[: piece.n]):
            if cell == 1:
                yield i, j


def _draw_cells(window, piece: PieceLike, rotation: int, y_start: int, x_start: int, attr: int) -> None:
    for i, j in _filled_cells(piece, rotation):
        _put(window, y_start + i, x_start + 2 * j, BLOCK, attr)


def lock_delay_attribute(lock_delay_timer: int) -> int:
    """Attribute for the current piece as its lock delay runs out."""
    if LOCK_DELAY_DIM_MIN <= lock_delay_timer <= LOCK_DELAY_DIM_MAX:
        return curses.A_DIM
    if LOCK_DELAY_STANDOUT_MIN <= lock_delay_timer <= LOCK_DELAY_STANDOUT_MAX:
        return curses.A_STANDOUT
    return 0


def format_game_time(game_time_s: float) -> str:
    """Minutes and seconds of the game time as ``MM:SS``; hours are not shown."""
    hours = int(game_time_s / 3600)
    minutes = int((game_time_s - 3600 * hours) / 60)
    seconds = int(game_time_s - 3600 * hours - 60 * minutes)
    return f"{minutes:02d}:{seconds:02d}"


def format_rate(label: str, value: float) -> str:
    """A per-second rate; values between 0 and 1 get one significant digit less."""
    if 0 < value < 1:
        return f"{label}: {value:#.4g}"
    return f"{label}: {value:#.5g}"


def format_score(score: int) -> str:
    """The score, zero-padded to the width of the score display."""
    return f"{score:0{BOARD_SCORE_W}d}"


def draw_board_state(board_window: GameWindow, game_state: GameStateLike, buffer_zone_h: int) -> None:
    """Redraw the whole play field and the score."""
    board_window.content.erase()
    draw_buffer_zone_line(board_window, buffer_zone_h)
    draw_board_stack(board_window, game_state)
    draw_ghost_piece(board_window, game_state)
    draw_curr_piece(board_window, game_state)
    draw_score(board_window, game_state)


def draw_buffer_zone_line(board_window: GameWindow, buffer_zone_h: int) -> None:
    """Draw the line marking the height at which pieces spawn."""
    attr = curses.color_pair(int(ColorPair.RED)) | curses.A_DIM
    _put(board_window.content, buffer_zone_h - 1, 0, BUFFER_ZONE_LINE * board_window.content_w, attr)


def draw_board_stack(board_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw every locked block of the board in its shape's colour."""
    for i, row in enumerate(game_state.board):
        for j, cell in enumerate(row):
            if cell > 0:
                _put(board_window.content, i, 2 * j, BLOCK, curses.color_pair(int(cell)))


def draw_curr_piece(board_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw the piece in play, dimmed or highlighted as its lock delay runs out."""
    piece = game_state.curr_piece
    attr = curses.color_pair(int(piece.shape)) | lock_delay_attribute(game_state.lock_delay_timer)
    y_start = piece.y - piece.n // 2
    x_start = 2 * (piece.x - piece.n // 2)
    _draw_cells(board_window.content, piece, piece.r, y_start, x_start, attr)


def draw_ghost_piece(board_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw where the current piece would land, unless it is already there."""
    ghost = game_state.ghost_piece
    if ghost.y == game_state.curr_piece.y:
        return
    attr = curses.color_pair(int(ghost.shape)) | curses.A_DIM
    y_start = ghost.y - ghost.n // 2
    x_start = 2 * (ghost.x - ghost.n // 2)
    _draw_cells(board_window.content, ghost, ghost.r, y_start, x_start, attr)


def draw_score(board_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw the score centred on the bottom border of the board window."""
    _put(
        board_window.border,
        board_window.height - 1,
        board_window.width // 2 - BOARD_SCORE_W // 2,
        format_score(game_state.score),
    )


def _draw_preview(window: GameWindow, piece: PieceLike, attr: int) -> None:
    x_padding = 2 * (piece.n - piece.l)
    y_start = window.content_h // 2 - piece.n // 2
    x_start = window.content_w // 2 - piece.l - x_padding
    _draw_cells(window.content, piece, 0, y_start, x_start, attr)


def draw_hold_piece(hold_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw the held piece, dimmed while holding is blocked."""
    hold_window.content.erase()
    if not game_state.holding_piece:
        return
    piece = game_state.hold_piece
    attr = curses.color_pair(int(piece.shape))
    if game_state.hold_blocked:
        attr |= curses.A_DIM
    _draw_preview(hold_window, piece, attr)


def draw_next_piece(next_window: GameWindow, game_state: GameStateLike) -> None:
    """Draw the piece next in the queue."""
    next_window.content.erase()
    piece = game_state.next_piece
    _draw_preview(next_window, piece, curses.color_pair(int(piece.shape)))


def draw_stats(stats_window: GameWindow, game_state: GameStateLike, stats: StatsLike) -> None:
    """Draw game time, lines, level, score per second and pieces per second."""
    content = stats_window.content
    content.erase()
    _put(content, *STATS_TIME, f"time: {format_game_time(stats.game_time_s)}")
    _put(content, *STATS_LINES, f"lines: {game_state.lines}")
    _put(content, *STATS_LEVEL, f"level: {game_state.level}")
    _put(content, *STATS_SPS, format_rate("sps", stats.score_per_s) + "\n")
    _put(content, *STATS_PPS, format_rate("pps", stats.piece_per_s) + "\n")


def draw_pause_stats(stats_window: GameWindow, stats: StatsLike) -> None:
    """Draw the counts of each kind of line clear shown while paused."""
    content = stats_window.content
    blank = " " * stats_window.content_w
    for y, x, _, _ in PAUSE_STATS:
        _put(content, y, x, blank)
    for y, x, label, attribute in PAUSE_STATS:
        _put(content, y, x, f"{label}: {getattr(stats, attribute)}")