"""Gobang_AI package exports."""

from .Board import Board, Color, Move, EMPTY
from .Gobanggame import GobangGame, GameManager, MoveResult
from .Player import Player, HumanPlayer
from .AIPlayer import GobangAI
from .ai.difficulty import Difficulty

# Subpackages for rules, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Color",
    "Move",
    "EMPTY",
    "GobangGame",
    "GameManager",
    "MoveResult",
    "Player",
    "HumanPlayer",
    "GobangAI",
    "Difficulty",
    "ai",
    "engine",
    "utils",
]
