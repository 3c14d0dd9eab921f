"""Run-length/blocked-end scoring for Gobang evaluation (open fours, closed threes, etc.)."""

import logging
from pathlib import Path

import yaml

from ..Board import Board, Color, EMPTY
from ..engine.rules import DIRECTIONS


LOGGER = logging.getLogger(__name__)

# (run length, blocked ends) -> score. Runs of five or more score FIVE_SCORE regardless of ends.
FIVE_SCORE = 10000
DEFAULT_SCORE_TABLE = {
    (4, 0): 1000,  # open four
    (4, 1): 500,   # closed four
    (3, 0): 200,   # open three
    (3, 1): 100,   # closed three
    (2, 0): 50,    # open two
    (2, 1): 20,    # closed two
}
# Strongest to weakest; a loaded table must keep this order.
SHAPE_ORDER = [(4, 0), (4, 1), (3, 0), (3, 1), (2, 0), (2, 1)]

EVAL_WEIGHT = 10
SCAN_STEPS = 4


class ScoreTable:
    """Scoring policy for a single run: length plus number of blocked ends."""

    def __init__(self, shapes=None, five=FIVE_SCORE):
        self.shapes = dict(DEFAULT_SCORE_TABLE if shapes is None else shapes)
        self.five = five

    def line_score(self, count: int, blocked: int) -> int:
        if count >= 5:
            return self.five
        return self.shapes.get((count, blocked), 0)

    def is_monotonic(self) -> bool:
        values = [self.five] + [self.shapes.get(shape, 0) for shape in SHAPE_ORDER]
        return all(a > b for a, b in zip(values, values[1:])) and values[-1] >= 0


DEFAULT_TABLE = ScoreTable()


def load_score_table(path="config/scores.yaml"):
    """Load the score table from YAML; fall back to defaults on missing or non-monotonic data."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from outside the package directory.
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_TABLE

    shapes = {}
    for item in data.get("shapes", []):
        length = item.get("length")
        blocked = item.get("blocked", 0)
        if length is None:
            continue
        shapes[(int(length), int(blocked))] = int(item.get("score", 0))
    table = ScoreTable(shapes or None, five=int(data.get("five", FIVE_SCORE)))
    if not table.is_monotonic():
        LOGGER.warning("Score table at %s is not monotonic; using defaults", path)
        return DEFAULT_TABLE
    return table


def _scan(board: Board, row: int, col: int, dr: int, dc: int, color: int):
    """Walk up to SCAN_STEPS cells from (row, col); return (same-color count, blocked 0/1)."""
    count = 0
    for i in range(1, SCAN_STEPS + 1):
        r, c = row + dr * i, col + dc * i
        if not board.in_bounds(r, c):
            return count, 1
        v = board.cells[r][c]
        if v == color:
            count += 1
        elif v == EMPTY:
            return count, 0
        else:
            return count, 1
    return count, 0


def stone_line_score(board: Board, row: int, col: int, dr: int, dc: int, color: int, table=None) -> int:
    """Score the run through the stone at (row, col) along one direction."""
    table = table or DEFAULT_TABLE
    fwd, fwd_blocked = _scan(board, row, col, dr, dc, color)
    back, back_blocked = _scan(board, row, col, -dr, -dc, color)
    return table.line_score(1 + fwd + back, fwd_blocked + back_blocked)


def pattern_score(board: Board, color: int, table=None) -> int:
    """Sum of run scores over every stone of color and every direction."""
    table = table or DEFAULT_TABLE
    total = 0
    for r in range(board.size):
        row = board.cells[r]
        for c in range(board.size):
            if row[c] != color:
                continue
            for dr, dc in DIRECTIONS:
                total += stone_line_score(board, r, c, dr, dc, color, table)
    return total


def evaluate_board(board: Board, color: int, table=None) -> int:
    """
    Heuristic score of the position. Positive favors `color`, negative favors the opponent.
    board: Board instance
    color: Color.BLACK or Color.WHITE
    """
    opp = Color(color).opposite()
    return EVAL_WEIGHT * pattern_score(board, color, table) - EVAL_WEIGHT * pattern_score(board, opp, table)


def _line_stones(board: Board, row: int, col: int, dr: int, dc: int, color: int):
    """Stones of color on the line through (row, col) close enough to see that cell."""
    stones = []
    for i in range(-SCAN_STEPS, SCAN_STEPS + 1):
        r, c = row + dr * i, col + dc * i
        if board.in_bounds(r, c) and board.cells[r][c] == color:
            stones.append((r, c))
    return stones


def _lines_score(board: Board, row: int, col: int, color: int, table) -> int:
    total = 0
    for dr, dc in DIRECTIONS:
        for r, c in _line_stones(board, row, col, dr, dc, color):
            total += stone_line_score(board, r, c, dr, dc, color, table)
    return total


def pattern_delta(board: Board, row: int, col: int, color: int, stone: int, table=None) -> int:
    """
    Change in pattern_score(board, color) if `stone` were placed on the empty cell (row, col).
    Only the four lines through the cell are rescored; the board is restored before returning.
    """
    table = table or DEFAULT_TABLE
    before = _lines_score(board, row, col, color, table)
    with board.trial(row, col, stone):
        after = _lines_score(board, row, col, color, table)
    return after - before
