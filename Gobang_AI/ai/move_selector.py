"""Candidate move generation (neighborhood filter, attack/defense ranking, top-N cut)."""

from ..Board import Board, Color, EMPTY
from . import heuristic


NEIGHBOR_RADIUS = 2
ATTACK_WEIGHT = 2.0
DEFENSE_WEIGHT = 1.5


def has_neighbor(board: Board, row: int, col: int, radius: int = NEIGHBOR_RADIUS) -> bool:
    """True if any occupied cell lies within Chebyshev distance radius of (row, col)."""
    for dr in range(-radius, radius + 1):
        for dc in range(-radius, radius + 1):
            if dr or dc:
                r, c = row + dr, col + dc
                if board.in_bounds(r, c) and board.cells[r][c] != EMPTY:
                    return True
    return False


def neighborhood(board: Board, radius: int = NEIGHBOR_RADIUS) -> list[tuple[int, int]]:
    """Empty cells near existing stones, in row-major order."""
    return [
        (r, c)
        for r in range(board.size)
        for c in range(board.size)
        if board.cells[r][c] == EMPTY and has_neighbor(board, r, c, radius)
    ]


def score_candidate(board: Board, row: int, col: int, color: int, base=None, table=None) -> float:
    """
    Attack/defense blend for an empty cell:
    2 x pattern score of color with its stone there + 1.5 x pattern score of the opponent with theirs.
    base: optional precomputed (pattern_score(color), pattern_score(opponent)).
    """
    opp = Color(color).opposite()
    if base is None:
        base = (heuristic.pattern_score(board, color, table), heuristic.pattern_score(board, opp, table))
    attack = base[0] + heuristic.pattern_delta(board, row, col, color, color, table)
    defense = base[1] + heuristic.pattern_delta(board, row, col, opp, opp, table)
    return ATTACK_WEIGHT * attack + DEFENSE_WEIGHT * defense


def generate_candidates(
    board: Board,
    color: int,
    limit: int = 20,
    radius: int = NEIGHBOR_RADIUS,
    *,
    table=None,
) -> list[tuple[int, int]]:
    """
    Generate candidate empty cells near existing stones, ranked by attack/defense score.
    - If board empty: return center only.
    - Neighborhood: Chebyshev radius 2 around any stone.
    - Stable sort, so equal scores keep row-major scan order.
    """
    if board.move_count == 0:
        return [board.center]

    cells = neighborhood(board, radius)
    if not cells:
        return []

    opp = Color(color).opposite()
    base = (heuristic.pattern_score(board, color, table), heuristic.pattern_score(board, opp, table))
    scored = [(pos, score_candidate(board, pos[0], pos[1], color, base, table)) for pos in cells]
    scored.sort(key=lambda kv: kv[1], reverse=True)
    return [pos for pos, _ in scored[:limit]]
