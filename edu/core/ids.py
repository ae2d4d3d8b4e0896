"""Identifier generation for new records."""

from __future__ import annotations

import secrets
from typing import Iterable

TASK_ID_LIMIT = 1_000_000
USER_ID_LIMIT = 100_000


class IdSpaceExhausted(RuntimeError):
    """Raised when every identifier below the limit is already taken."""


def random_id(limit: int, taken: Iterable[int] = ()) -> int:
    """Return a random integer in ``[0, limit)`` not present in ``taken``."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    used = set(taken)
    if sum(1 for value in used if isinstance(value, int) and 0 <= value < limit) >= limit:
        raise IdSpaceExhausted(f"No free identifier below {limit}")
    while True:
        candidate = secrets.randbelow(limit)
        if candidate not in used:
            return candidate


def new_task_id(taken: Iterable[int] = ()) -> int:
    return random_id(TASK_ID_LIMIT, taken)


def new_user_id(taken: Iterable[int] = ()) -> int:
    return random_id(USER_ID_LIMIT, taken)
