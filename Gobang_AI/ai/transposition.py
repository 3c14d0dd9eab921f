"""Memoization table for minimax scores, keyed by board fingerprint, depth and side."""

EXACT = "EXACT"
LOWER = "LOWER"
UPPER = "UPPER"

LEGACY = "legacy"
BOUNDED = "bounded"
TABLE_MODES = (LEGACY, BOUNDED)


def make_key(board, depth, maximizing):
    return (board.fingerprint(), depth, maximizing)


def lookup(ttable, key, alpha, beta, mode=BOUNDED):
    """
    Return a cached score usable for the (alpha, beta) window, or None.
    legacy: any stored score is reused, whatever window produced it.
    bounded: exact scores always; lower bounds only when they fail high, upper bounds only when they fail low.
    """
    entry = ttable.get(key)
    if entry is None:
        return None
    score, flag = entry
    if mode == LEGACY or flag == EXACT:
        return score
    if flag == LOWER and score >= beta:
        return score
    if flag == UPPER and score <= alpha:
        return score
    return None


def store(ttable, key, score, alpha_orig=None, beta=None):
    """Store score with its bound type relative to the window it was searched with."""
    flag = EXACT
    if alpha_orig is not None and score <= alpha_orig:
        flag = UPPER
    elif beta is not None and score >= beta:
        flag = LOWER
    ttable[key] = (score, flag)
