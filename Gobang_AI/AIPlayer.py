"""Computer opponent: difficulty-driven minimax search behind a player interface."""

import logging

from .Board import Color
from .Player import Player
from .ai import search_minimax, transposition
from .ai.difficulty import Difficulty, levels_from_settings


LOGGER = logging.getLogger(__name__)

DEADLINE_MARGIN = 0.05  # seconds kept back so the move reaches the referee in time


class GobangAI(Player):
    """
    Owns one memoization cache for the lifetime of the instance. The cache is cleared
    whenever the difficulty changes or the instance is asked to play the other color,
    and should be cleared between unrelated games with clear_cache().
    """

    def __init__(self, difficulty="medium", color=Color.WHITE, settings=None,
                 table_mode=transposition.BOUNDED, score_table=None, stats=None):
        super().__init__(color)
        self.levels = levels_from_settings(settings)
        self.table_mode = table_mode
        self.score_table = score_table
        self.stats = stats
        self.cache = {}
        self._cache_color = None
        self.set_difficulty(difficulty)

    @property
    def depth(self):
        return self.levels[self.difficulty].depth

    @property
    def candidate_limit(self):
        return self.levels[self.difficulty].candidate_limit

    def set_difficulty(self, difficulty):
        self.difficulty = Difficulty.parse(difficulty)
        self.clear_cache()

    def clear_cache(self):
        self.cache.clear()
        self._cache_color = None

    def get_best_move(self, board, color=None, deadline=None, node_limit=None):
        """Return (row, col) for color, or None if the board is full or already decided."""
        color = Color(self.color if color is None else color)
        if self._cache_color != color:
            # Cached scores are from the previous root color's perspective.
            self.cache.clear()
            self._cache_color = color

        move = search_minimax.choose_move(
            board,
            color,
            depth=self.depth,
            candidate_limit=self.candidate_limit,
            cache=self.cache,
            table_mode=self.table_mode,
            score_table=self.score_table,
            deadline=deadline,
            node_limit=node_limit,
            stats=self.stats,
        )
        LOGGER.debug("%s (%s) chose %s", color.label, self.difficulty.value, move)
        return move

    def next_move(self, board, deadline=None):
        if deadline is not None:
            deadline -= DEADLINE_MARGIN
        return self.get_best_move(board, self.color, deadline=deadline)
