"""CLI options for selecting players, difficulty, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gobang (five-in-a-row) with a minimax AI")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human", "ai-vs-ai", "human-vs-human"],
        default="human-vs-ai",
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], help="AI difficulty")
    parser.add_argument("--board-size", type=int, help="Board size (default 15)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (0 disables the limit)")
    parser.add_argument(
        "--table-mode",
        choices=["bounded", "legacy"],
        default=None,
        help="Memoization mode: window-aware bounds or the window-less legacy cache",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--scores", default="config/scores.yaml", help="Path to score table YAML")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    args = parser.parse_args(argv)
    if args.board_size is not None and args.board_size < 5:
        parser.error("--board-size must be at least 5")
    return args
