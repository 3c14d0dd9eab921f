"""Entry point for Gobang matches. Load config, wire players, start GobangGame."""

import yaml
from pathlib import Path

from .AIPlayer import GobangAI
from .Board import Color
from .Gobanggame import GobangGame
from .Player import HumanPlayer
from .ai import heuristic
from .utils.cli import parse_args
from .utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gobang_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_player(kind, color, difficulty, settings, table_mode, score_table):
    if kind == "human":
        return HumanPlayer(color)
    return GobangAI(
        difficulty=difficulty,
        color=color,
        settings=settings,
        table_mode=table_mode,
        score_table=score_table,
    )


def render_text(board, last_move, current_color, winner):
    print(board)
    print()


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 15)
    move_timeout = args.timeout if args.timeout is not None else settings.get("move_timeout_seconds", 0)
    difficulty = args.difficulty or settings.get("difficulty", "medium")
    table_mode = args.table_mode or settings.get("table_mode", "bounded")
    score_table = heuristic.load_score_table(resolve_project_path(args.scores))

    black_kind, white_kind = args.mode.split("-vs-")
    black = build_player(black_kind, Color.BLACK, difficulty, settings, table_mode, score_table)
    white = build_player(white_kind, Color.WHITE, difficulty, settings, table_mode, score_table)

    game = GobangGame(size=board_size, logger=log_event)
    winner = game.play(black, white, move_timeout=move_timeout, renderer=render_text)
    print(f"{winner.label} wins" if winner is not None else "Draw")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
