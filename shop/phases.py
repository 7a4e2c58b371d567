"""Order fulfilment phases and the single-step transition rule.

Phases are the canonical status labels from ``config``.  Only PREPARING makes
a random choice: with ``PREPARATION_ISSUE_PERCENT`` chance it rolls back to
PENDING, otherwise it moves on to READY.  READY is terminal.
"""
from __future__ import annotations

import random
from typing import List, Tuple

from config import (
    PENDING,
    PHASE_MESSAGES,
    PHASE_ORDER,
    PREPARATION_DONE_MESSAGE,
    PREPARATION_ISSUE_MESSAGE,
    PREPARATION_ISSUE_PERCENT,
    PREPARING,
    READY,
    STARTED,
)


def is_terminal(phase: str) -> bool:
    return phase == READY


def preparation_has_issue(rng: random.Random) -> bool:
    """One Bernoulli trial: a uniform draw in [0, 100) below the issue percent."""
    return rng.random() * 100.0 < PREPARATION_ISSUE_PERCENT


def handle_phase(phase: str, rng: random.Random) -> Tuple[str, List[str]]:
    """Advance ``phase`` by one step.

    Returns the next phase together with the kitchen messages produced while
    handling the current one.
    """
    if phase not in PHASE_ORDER:
        raise ValueError(f"Unknown order phase: {phase!r}")

    messages = [PHASE_MESSAGES[phase]]
    if phase == STARTED:
        return PENDING, messages
    if phase == PENDING:
        return PREPARING, messages
    if phase == PREPARING:
        if preparation_has_issue(rng):
            messages.append(PREPARATION_ISSUE_MESSAGE)
            return PENDING, messages
        messages.append(PREPARATION_DONE_MESSAGE)
        return READY, messages
    return READY, messages


def advance_phase(phase: str, rng: random.Random) -> str:
    next_phase, _ = handle_phase(phase, rng)
    return next_phase
