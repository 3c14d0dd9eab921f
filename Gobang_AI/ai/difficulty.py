"""Difficulty levels and their search settings (depth, candidate cap)."""

from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value):
        """Accept a Difficulty or its name; unknown names fall back to MEDIUM."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.MEDIUM


@dataclass(frozen=True)
class SearchSettings:
    depth: int
    candidate_limit: int


DEFAULT_LEVELS = {
    Difficulty.EASY: SearchSettings(depth=2, candidate_limit=10),
    Difficulty.MEDIUM: SearchSettings(depth=4, candidate_limit=20),
    Difficulty.HARD: SearchSettings(depth=6, candidate_limit=30),
}


def levels_from_settings(settings=None):
    """
    Build the difficulty table, overriding defaults with a `difficulty_levels` mapping, e.g.
    {"easy": {"depth": 2, "candidate_limit": 10}, ...}.
    """
    levels = dict(DEFAULT_LEVELS)
    overrides = (settings or {}).get("difficulty_levels") or {}
    for name, values in overrides.items():
        level = Difficulty.parse(name)
        base = levels[level]
        depth = int(values.get("depth", base.depth))
        limit = int(values.get("candidate_limit", base.candidate_limit))
        if depth < 1 or limit < 1:
            raise ValueError(f"difficulty {name!r} needs depth >= 1 and candidate_limit >= 1")
        levels[level] = SearchSettings(depth=depth, candidate_limit=limit)
    return levels
