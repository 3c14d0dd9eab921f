"""Shared fixtures: reproducible random positions without a five on the board."""

import random

import pytest

from Gobang_AI.Board import Board, Color
from Gobang_AI.engine import rules


def build_random_board(size, stones, seed):
    """Alternate Black/White on random empty cells, skipping any move that would win."""
    rng = random.Random(seed)
    board = Board(size=size)
    color = Color.BLACK
    empties = [(r, c) for r in range(size) for c in range(size)]
    rng.shuffle(empties)
    for row, col in empties:
        if board.move_count >= stones:
            break
        board.place(row, col, color)
        if rules.check_win(board, row, col, color):
            board.remove(row, col)
            continue
        color = color.opposite()
    return board


@pytest.fixture
def random_board():
    return build_random_board
