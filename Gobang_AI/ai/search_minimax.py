"""Depth-limited minimax with alpha-beta pruning and a memoization cache."""

import logging
import time

from ..Board import Color
from ..engine import rules
from . import heuristic
from . import move_selector
from . import transposition


LOGGER = logging.getLogger(__name__)

WIN_SCORE = 1_000_000
INF = float("inf")


class SearchTimeout(TimeoutError):
    """Raised inside the search when the deadline or node budget is exhausted."""


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search from one color's perspective."""

    def __init__(self, color, depth, candidate_limit, cache=None, table_mode=transposition.BOUNDED,
                 score_table=None, deadline=None, node_limit=None, stats=None):
        if table_mode not in transposition.TABLE_MODES:
            raise ValueError(f"unknown table mode {table_mode!r}")
        self.color = Color(color)
        self.opponent = self.color.opposite()
        self.depth = depth
        self.candidate_limit = candidate_limit
        self.cache = {} if cache is None else cache
        self.table_mode = table_mode
        self.score_table = score_table
        self.deadline = deadline
        self.node_limit = node_limit
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.cache_hits = 0
        self.cutoffs = 0
        self.start_time = None
        self.timed_out = False

    def choose_move(self, board):
        """
        Return the best (row, col) for self.color, or None when the board is full or already won.
        Each root candidate is searched at depth - 1 with a full window; first-seen wins ties.
        """
        self.start_time = time.time()
        self.timed_out = False
        if board.is_full() or rules.find_winner(board) is not None:
            return None
        if board.move_count == 0:
            return board.center

        candidates = self.candidates(board, self.color)
        best_move = None
        best_score = -INF
        for row, col in candidates:
            try:
                with board.trial(row, col, self.color):
                    score = self.alpha_beta(board, self.depth - 1, -INF, INF, False, (row, col))
            except SearchTimeout:
                self.timed_out = True
                LOGGER.debug("Search stopped after %d nodes; keeping best root move so far", self.node_counter)
                break
            if score > best_score:
                best_score = score
                best_move = (row, col)

        if best_move is None and candidates:
            best_move = candidates[0]

        self._record_stats(best_move, best_score)
        return best_move

    def candidates(self, board, color):
        return move_selector.generate_candidates(
            board, color, limit=self.candidate_limit, table=self.score_table
        )

    def _time_ok(self):
        self.node_counter += 1
        if self.node_limit is not None and self.node_counter > self.node_limit:
            raise SearchTimeout("Search node budget exhausted")
        if self.deadline is not None and time.time() > self.deadline:
            raise SearchTimeout("Search timed out")

    def alpha_beta(self, board, depth, alpha, beta, maximizing, last_move=None):
        """Score of the position for self.color, searching `depth` more plies."""
        self._time_ok()

        key = transposition.make_key(board, depth, maximizing)
        cached = transposition.lookup(self.cache, key, alpha, beta, mode=self.table_mode)
        if cached is not None:
            self.cache_hits += 1
            return cached

        # Only the stone just played can have completed a five.
        if last_move is not None:
            row, col = last_move
            mover = board.cells[row][col]
            if rules.check_win(board, row, col, mover):
                score = WIN_SCORE if mover == self.color else -WIN_SCORE
                transposition.store(self.cache, key, score)
                return score

        if depth == 0 or board.is_full():
            score = heuristic.evaluate_board(board, self.color, self.score_table)
            transposition.store(self.cache, key, score)
            return score

        node_color = self.color if maximizing else self.opponent
        moves = self.candidates(board, node_color)
        if not moves:
            score = heuristic.evaluate_board(board, self.color, self.score_table)
            transposition.store(self.cache, key, score)
            return score

        alpha_orig = alpha
        beta_orig = beta
        best_score = -INF if maximizing else INF
        for row, col in moves:
            with board.trial(row, col, node_color):
                score = self.alpha_beta(board, depth - 1, alpha, beta, not maximizing, (row, col))

            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)

            if beta <= alpha:
                self.cutoffs += 1
                break

        transposition.store(self.cache, key, best_score, alpha_orig, beta_orig)
        return best_score

    def _record_stats(self, move, score):
        total_time = max(time.time() - self.start_time, 1e-9)
        record = {
            "color": self.color.label,
            "depth": self.depth,
            "move": move,
            "score": score,
            "nodes": self.node_counter,
            "cache_hits": self.cache_hits,
            "cutoffs": self.cutoffs,
            "cache_size": len(self.cache),
            "timed_out": self.timed_out,
            "time": total_time,
            "nps": self.node_counter / total_time,
        }
        LOGGER.debug("Search result: %s", record)
        if self.stats_list is not None:
            self.stats_list.append(record)


def choose_move(board, color, depth, candidate_limit=20, cache=None, table_mode=transposition.BOUNDED,
                score_table=None, deadline=None, node_limit=None, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=depth,
        candidate_limit=candidate_limit,
        cache=cache,
        table_mode=table_mode,
        score_table=score_table,
        deadline=deadline,
        node_limit=node_limit,
        stats=stats,
    )
    return searcher.choose_move(board)
