"""Move validation and time control for the game loop."""

import time

from ..Board import Color


def check_move(move, board, color, deadline=None, current=None):
    """
    Validate a move against time, turn, bounds and occupancy.
    Raises ValueError/TimeoutError on invalid moves.
    """
    if deadline is not None and time.time() > deadline:
        raise TimeoutError("Move exceeded allotted time")

    if current is not None and Color(color) != Color(current):
        raise ValueError(f"Not {Color(color).label}'s turn")

    try:
        row, col = move
        row, col = int(row), int(col)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed move {move!r}") from exc
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")

    return True
