"""Five-in-a-row rule: win detection (overlines count), winning line, winner scan, draw."""

from typing import Optional

from ..Board import Board, Color, EMPTY


DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
WIN_LENGTH = 5


def _count_dir(board: Board, row: int, col: int, dr: int, dc: int, color: int, limit: int = WIN_LENGTH - 1) -> int:
    """Count contiguous stones of color from (row, col) (exclusive) along (dr, dc), at most limit."""
    count = 0
    r, c = row + dr, col + dc
    while count < limit and board.in_bounds(r, c) and board.cells[r][c] == color:
        count += 1
        r += dr
        c += dc
    return count


def check_win(board: Board, row: int, col: int, color: int) -> bool:
    """Return True if the stone of color at (row, col) completes five or more in a line."""
    for dr, dc in DIRECTIONS:
        total = 1 + _count_dir(board, row, col, dr, dc, color) + _count_dir(board, row, col, -dr, -dc, color)
        if total >= WIN_LENGTH:
            return True
    return False


def winning_line(board: Board, row: int, col: int, color: int) -> list[tuple[int, int]]:
    """
    Return the full contiguous run (ordered, at least five cells) through (row, col)
    that wins for color, or an empty list. Used by presentation layers to highlight.
    """
    for dr, dc in DIRECTIONS:
        forward = _count_dir(board, row, col, dr, dc, color, limit=board.size)
        backward = _count_dir(board, row, col, -dr, -dc, color, limit=board.size)
        if 1 + forward + backward >= WIN_LENGTH:
            start_r, start_c = row - dr * backward, col - dc * backward
            return [(start_r + dr * i, start_c + dc * i) for i in range(forward + backward + 1)]
    return []


def find_winner(board: Board) -> Optional[Color]:
    """Scan every stone for a five; return its color or None."""
    for r in range(board.size):
        for c in range(board.size):
            v = board.cells[r][c]
            if v != EMPTY and check_win(board, r, c, v):
                return Color(v)
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and find_winner(board) is None
