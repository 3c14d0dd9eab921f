"""Game state, turn management and the match loop for five-in-a-row."""

import time
from enum import Enum

from .Board import Board, Color
from .engine import referee, rules
from .utils import timer
from .utils.logger import log_event


PLAYING = "playing"
FINISHED = "finished"


class MoveResult(Enum):
    INVALID = "invalid"
    OK = "ok"
    WIN = "win"
    DRAW = "draw"


class GobangGame:
    def __init__(self, size=15, logger=log_event):
        self.size = size
        self.logger = logger
        self.init_game()

    def init_game(self):
        self.board = Board(size=self.size)
        self.current_player = Color.BLACK
        self.status = PLAYING
        self.winner = None
        self.start_time = time.time()
        self.end_time = None

    @property
    def move_history(self):
        return self.board.history

    @property
    def is_finished(self):
        return self.status == FINISHED

    def make_move(self, row, col, color) -> MoveResult:
        """Apply a confirmed move. Invalid requests leave the state untouched."""
        if self.status != PLAYING or Color(color) != self.current_player:
            return MoveResult.INVALID
        if not self.board.place(row, col, color):
            return MoveResult.INVALID

        if rules.check_win(self.board, row, col, color):
            self.status = FINISHED
            self.winner = Color(color)
            self.end_time = time.time()
            return MoveResult.WIN
        if self.board.is_full():
            self.status = FINISHED
            self.end_time = time.time()
            return MoveResult.DRAW

        self.current_player = self.current_player.opposite()
        return MoveResult.OK

    def undo_move(self) -> bool:
        last = self.board.undo()
        if last is None:
            return False
        self.current_player = last.color
        self.status = PLAYING
        self.winner = None
        self.end_time = None
        return True

    def winning_line(self):
        last = self.board.last_move
        if self.winner is None or last is None:
            return []
        return rules.winning_line(self.board, last.row, last.col, last.color)

    def get_board_state(self):
        """Deep copy of the game state as plain data."""
        return {
            "board": self.board.to_list(),
            "current_player": int(self.current_player),
            "status": self.status,
            "winner": None if self.winner is None else int(self.winner),
            "move_history": [
                {"row": m.row, "col": m.col, "player": int(m.color)} for m in self.board.history
            ],
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    def restore_from_state(self, state):
        history = [(m["row"], m["col"], m["player"]) for m in state["move_history"]]
        self.board = Board.from_list(state["board"], history=history)
        self.size = self.board.size
        self.current_player = Color(state["current_player"])
        self.status = state["status"]
        self.winner = None if state.get("winner") is None else Color(state["winner"])
        self.start_time = state.get("start_time", time.time())
        self.end_time = state.get("end_time")

    def get_game_stats(self):
        end = self.end_time if self.end_time is not None else time.time()
        return {
            "total_moves": self.board.move_count,
            "duration": end - self.start_time,
            "winner": self.winner,
            "status": self.status,
            "move_history": list(self.board.history),
        }

    def play(self, black_player, white_player, move_timeout=None, renderer=None):
        """Run a single game to the end. Returns the winning Color, or None for a draw."""
        players = {Color.BLACK: black_player, Color.WHITE: white_player}
        while not self.is_finished:
            if renderer:
                renderer(self.board, self.board.last_move, self.current_player, None)

            color = self.current_player
            player = players[color]
            deadline = timer.deadline_after(move_timeout) if move_timeout else None

            try:
                move = player.next_move(self.board, deadline=deadline)
                if move is None:
                    raise ValueError("No move returned")
                referee.check_move(move, self.board, color, deadline, current=self.current_player)
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {color.label} - {exc}")
                self.status = FINISHED
                self.winner = color.opposite()
                self.end_time = time.time()
                break

            result = self.make_move(move[0], move[1], color)
            self.logger(f"Move {self.board.move_count}: {color.label[0]} {tuple(move)}")
            if result is MoveResult.WIN:
                self.logger(f"Winner: {color.label}")
            elif result is MoveResult.DRAW:
                self.logger("Result: Draw (board full)")

        if renderer:
            renderer(self.board, self.board.last_move, self.current_player, self.winner)
        return self.winner


class GameManager:
    """Keeps the current game and the stats of finished ones. AI players get a fresh cache per game."""

    def __init__(self, size=15, logger=log_event, ai_players=()):
        self.size = size
        self.logger = logger
        self.ai_players = list(ai_players)
        self.current_game = None
        self.game_history = []

    def create_new_game(self):
        for ai in self.ai_players:
            ai.clear_cache()
        self.current_game = GobangGame(size=self.size, logger=self.logger)
        return self.current_game

    def get_current_game(self):
        if self.current_game is None:
            self.create_new_game()
        return self.current_game

    def end_current_game(self):
        if self.current_game is None:
            return None
        stats = self.current_game.get_game_stats()
        self.game_history.append(stats)
        self.current_game = None
        return stats

    def get_game_history(self):
        return self.game_history

    def clear_game_history(self):
        self.game_history = []
