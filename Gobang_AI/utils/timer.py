"""Helpers for enforcing per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline `seconds` from now; None when there is no time limit."""
    if not seconds:
        return None
    return time.time() + seconds
