"""Tests for GobangGame turn handling, end-of-game state, snapshots, and GameManager."""

import pytest

from Gobang_AI.AIPlayer import GobangAI
from Gobang_AI.Board import Color
from Gobang_AI.Gobanggame import FINISHED, PLAYING, GameManager, GobangGame, MoveResult
from Gobang_AI.Player import HumanPlayer, Player


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board, deadline=None):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def quiet_game(size=15):
    lines = []
    return GobangGame(size=size, logger=lines.append), lines


def test_turns_alternate_starting_black():
    game, _ = quiet_game()
    assert game.current_player is Color.BLACK
    assert game.make_move(7, 7, Color.WHITE) is MoveResult.INVALID
    assert game.make_move(7, 7, Color.BLACK) is MoveResult.OK
    assert game.current_player is Color.WHITE
    assert game.make_move(7, 7, Color.WHITE) is MoveResult.INVALID
    assert game.make_move(-1, 3, Color.WHITE) is MoveResult.INVALID
    assert game.make_move(7, 8, Color.WHITE) is MoveResult.OK
    assert game.board.move_count == 2


def test_win_finishes_game_and_blocks_further_moves():
    game, _ = quiet_game()
    for col in range(4):
        assert game.make_move(0, col, Color.BLACK) is MoveResult.OK
        assert game.make_move(1, col, Color.WHITE) is MoveResult.OK
    assert game.make_move(0, 4, Color.BLACK) is MoveResult.WIN
    assert game.status == FINISHED
    assert game.winner is Color.BLACK
    assert game.winning_line() == [(0, c) for c in range(5)]
    assert game.make_move(1, 4, Color.WHITE) is MoveResult.INVALID


def test_draw_on_full_board():
    game, _ = quiet_game(size=4)
    # 4x4 can never hold five in a row
    results = []
    color = Color.BLACK
    for row in range(4):
        for col in range(4):
            results.append(game.make_move(row, col, color))
            color = color.opposite()
    assert results[:-1] == [MoveResult.OK] * 15
    assert results[-1] is MoveResult.DRAW
    assert game.winner is None
    assert game.status == FINISHED


def test_undo_restores_turn_and_status():
    game, _ = quiet_game()
    for col in range(4):
        game.make_move(0, col, Color.BLACK)
        game.make_move(1, col, Color.WHITE)
    game.make_move(0, 4, Color.BLACK)
    assert game.undo_move()
    assert game.status == PLAYING
    assert game.winner is None
    assert game.current_player is Color.BLACK
    assert game.board.is_empty(0, 4)


def test_state_snapshot_round_trip():
    game, _ = quiet_game()
    game.make_move(7, 7, Color.BLACK)
    game.make_move(6, 8, Color.WHITE)
    state = game.get_board_state()
    assert state["board"][7][7] == 1 and state["board"][6][8] == 2
    assert state["current_player"] == 1
    assert state["move_history"][1] == {"row": 6, "col": 8, "player": 2}

    restored, _ = quiet_game()
    restored.restore_from_state(state)
    assert restored.board.cells == game.board.cells
    assert [m[:3] for m in restored.move_history] == [m[:3] for m in game.move_history]
    assert restored.current_player is Color.BLACK
    assert restored.make_move(8, 8, Color.BLACK) is MoveResult.OK


def test_restore_keeps_snapshot_timestamps():
    game, _ = quiet_game()
    game.make_move(7, 7, Color.BLACK)
    game.start_time -= 120
    state = game.get_board_state()
    assert state["start_time"] == game.start_time
    assert state["end_time"] is None

    restored, _ = quiet_game()
    restored.restore_from_state(state)
    assert restored.start_time == game.start_time
    assert restored.end_time is None
    assert restored.get_game_stats()["duration"] >= 120


def test_restore_rejects_off_board_history():
    game, _ = quiet_game(size=5)
    state = game.get_board_state()
    state["move_history"] = [{"row": 9, "col": 0, "player": 1}]
    with pytest.raises(ValueError):
        game.restore_from_state(state)


def test_play_reports_winner_and_renders_final_state():
    black_moves = [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    white_moves = [(1, 0), (1, 1), (1, 2), (1, 3)]
    game, lines = quiet_game(size=5)

    final = []

    def renderer(board, last_move, current_color, winner):
        if winner is not None:
            final.append((winner, last_move))

    winner = game.play(SeqPlayer(Color.BLACK, black_moves), SeqPlayer(Color.WHITE, white_moves), renderer=renderer)

    assert winner is Color.BLACK
    assert final and final[-1][0] is Color.BLACK
    assert final[-1][1][:2] == (0, 4)
    assert lines[-1] == "Winner: Black"


def test_invalid_move_disqualifies():
    game, lines = quiet_game(size=5)
    winner = game.play(SeqPlayer(Color.BLACK, [(2, 2)]), SeqPlayer(Color.WHITE, [(2, 2)]))
    assert winner is Color.BLACK
    assert lines[-1].startswith("Disqualification: White")


def test_human_input_parsing():
    game, _ = quiet_game(size=5)
    answers = iter(["2 2", "1 1", "oops"])
    human = HumanPlayer(Color.BLACK, input_fn=lambda prompt: next(answers))
    assert human.next_move(game.board) == (2, 2)
    assert human.next_move(game.board) == (1, 1)
    with pytest.raises(ValueError):
        human.next_move(game.board)


def test_ai_vs_scripted_player_finishes():
    game, _ = quiet_game(size=9)
    white_moves = [(0, 0), (0, 8), (8, 0), (8, 8), (0, 2), (0, 6), (8, 2), (8, 6)]
    winner = game.play(GobangAI("easy", color=Color.BLACK), SeqPlayer(Color.WHITE, white_moves))
    assert winner is Color.BLACK
    assert game.is_finished


def test_game_manager_records_history_and_clears_ai_cache():
    ai = GobangAI("easy")
    manager = GameManager(size=9, logger=lambda _msg: None, ai_players=[ai])
    game = manager.get_current_game()
    game.make_move(4, 4, Color.BLACK)
    ai.get_best_move(game.board, Color.WHITE)
    assert ai.cache

    stats = manager.end_current_game()
    assert stats["total_moves"] == 1
    assert manager.get_game_history() == [stats]
    assert manager.end_current_game() is None

    manager.create_new_game()
    assert not ai.cache
    manager.clear_game_history()
    assert manager.get_game_history() == []
