"""Board state container: cell values, stone colors, move history, trial placement."""

from contextlib import contextmanager
from enum import IntEnum
from typing import NamedTuple, Optional


EMPTY = 0


class Color(IntEnum):
    """Stone color. Black moves first; values double as the wire encoding."""

    BLACK = 1
    WHITE = 2

    def opposite(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def label(self) -> str:
        return "Black" if self is Color.BLACK else "White"


class Move(NamedTuple):
    row: int
    col: int
    color: Color
    index: int


class Board:
    def __init__(self, size=15):
        # Store cells as 0 (empty), 1 (black), 2 (white)
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.history: list[Move] = []

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    @property
    def center(self) -> tuple[int, int]:
        mid = self.size // 2
        return (mid, mid)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def get(self, row, col):
        return self.cells[row][col]

    def place(self, row, col, color) -> bool:
        """Place a stone; return False without mutating if out of bounds or occupied."""
        if not self.in_bounds(row, col) or self.cells[row][col] != EMPTY:
            return False
        color = Color(color)
        self.cells[row][col] = color
        self.history.append(Move(row, col, color, len(self.history)))
        return True

    def remove(self, row, col) -> bool:
        """Retract the stone at (row, col). Only the most recent move can be removed."""
        last = self.last_move
        if last is None or (last.row, last.col) != (row, col):
            return False
        self.history.pop()
        self.cells[row][col] = EMPTY
        return True

    def undo(self) -> Optional[Move]:
        last = self.last_move
        if last is None:
            return None
        self.remove(last.row, last.col)
        return last

    @contextmanager
    def trial(self, row, col, color):
        """Place a stone for the duration of the block; always removed on exit."""
        if not self.place(row, col, color):
            raise ValueError(f"cannot place {Color(color).label} at ({row}, {col})")
        try:
            yield self
        finally:
            self.remove(row, col)

    def fingerprint(self) -> str:
        return "".join("".join(str(int(v)) for v in row) for row in self.cells)

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.history = self.history[:]
        return new_board

    def to_list(self) -> list[list[int]]:
        return [[int(v) for v in row] for row in self.cells]

    @classmethod
    def from_list(cls, grid, history=None):
        """
        Build a board from nested lists of 0/1/2 (the form used across process boundaries).
        Without an explicit history, stones are recorded in row-major order.
        Raises ValueError on non-square grids or unknown cell values.
        """
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise ValueError("board must be a non-empty square grid")
        board = cls(size)
        if history is None:
            history = [
                (r, c, grid[r][c])
                for r in range(size)
                for c in range(size)
                if grid[r][c] != EMPTY
            ]
        for r, c, v in history:
            if not board.in_bounds(r, c):
                raise ValueError(f"history entry ({r}, {c}) is off the board")
            if v not in (Color.BLACK, Color.WHITE):
                raise ValueError(f"invalid cell value {v!r} at ({r}, {c})")
            if grid[r][c] != v or not board.place(r, c, v):
                raise ValueError(f"history entry ({r}, {c}, {v}) does not match grid")
        if board.move_count != sum(1 for row in grid for v in row if v != EMPTY):
            raise ValueError("grid has stones missing from history")
        return board

    def __str__(self):
        symbols = {EMPTY: ".", Color.BLACK: "X", Color.WHITE: "O"}
        return "\n".join(" ".join(symbols[v] for v in row) for row in self.cells)
