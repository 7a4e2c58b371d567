"""Tests for the order phase transition rule."""
from __future__ import annotations

import random
import unittest

from config import (
    PENDING,
    PHASE_MESSAGES,
    PREPARATION_DONE_MESSAGE,
    PREPARATION_ISSUE_MESSAGE,
    PREPARING,
    READY,
    STARTED,
)
from shop.phases import advance_phase, handle_phase, is_terminal


class _FixedDraw:
    """Stand-in generator returning the same draw every time."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class TestTransitions(unittest.TestCase):
    def test_started_goes_to_pending(self):
        self.assertEqual(advance_phase(STARTED, _FixedDraw(0.0)), PENDING)

    def test_pending_goes_to_preparing(self):
        self.assertEqual(advance_phase(PENDING, _FixedDraw(0.0)), PREPARING)

    def test_preparing_rolls_back_on_low_draw(self):
        self.assertEqual(advance_phase(PREPARING, _FixedDraw(0.10)), PENDING)
        self.assertEqual(advance_phase(PREPARING, _FixedDraw(0.0)), PENDING)

    def test_preparing_completes_on_high_draw(self):
        self.assertEqual(advance_phase(PREPARING, _FixedDraw(0.5)), READY)
        self.assertEqual(advance_phase(PREPARING, _FixedDraw(0.999)), READY)

    def test_draw_of_exactly_twenty_completes(self):
        self.assertEqual(advance_phase(PREPARING, _FixedDraw(0.2)), READY)

    def test_ready_is_terminal(self):
        self.assertEqual(advance_phase(READY, _FixedDraw(0.0)), READY)
        self.assertTrue(is_terminal(READY))
        self.assertFalse(is_terminal(PREPARING))

    def test_only_preparing_draws(self):
        for phase in (STARTED, PENDING, READY):
            rng = _FixedDraw(0.0)
            advance_phase(phase, rng)
            self.assertEqual(rng.calls, 0, phase)
        rng = _FixedDraw(0.5)
        advance_phase(PREPARING, rng)
        self.assertEqual(rng.calls, 1)

    def test_unknown_phase_rejected(self):
        with self.assertRaises(ValueError):
            advance_phase("DELIVERED", _FixedDraw(0.0))


class TestMessages(unittest.TestCase):
    def test_rollback_messages(self):
        next_phase, messages = handle_phase(PREPARING, _FixedDraw(0.05))
        self.assertEqual(next_phase, PENDING)
        self.assertEqual(messages, [PHASE_MESSAGES[PREPARING], PREPARATION_ISSUE_MESSAGE])

    def test_completion_messages(self):
        next_phase, messages = handle_phase(PREPARING, _FixedDraw(0.9))
        self.assertEqual(next_phase, READY)
        self.assertEqual(messages, [PHASE_MESSAGES[PREPARING], PREPARATION_DONE_MESSAGE])

    def test_ready_message(self):
        _, messages = handle_phase(READY, _FixedDraw(0.0))
        self.assertEqual(messages, ["ORDER IS READY FOR PICKUP! :)"])


class TestRollbackRate(unittest.TestCase):
    def test_rollback_fraction_is_twenty_percent(self):
        rng = random.Random(2024)
        trials = 10_000
        rollbacks = sum(1 for _ in range(trials) if advance_phase(PREPARING, rng) == PENDING)
        self.assertAlmostEqual(rollbacks / trials, 0.20, delta=0.02)

    def test_same_seed_same_outcomes(self):
        rng_a = random.Random(9)
        rng_b = random.Random(9)
        outcomes = [advance_phase(PREPARING, rng_a) for _ in range(50)]
        self.assertEqual(outcomes, [advance_phase(PREPARING, rng_b) for _ in range(50)])
        self.assertEqual(set(outcomes), {PENDING, READY})


if __name__ == "__main__":
    unittest.main()
