from __future__ import annotations

import random
import unittest

from bingo.services.draw_engine import DrawEngine, DrawState
from bingo.services.events import DrawCompleted, DrawRejected, DrawStarted, RejectReason, Reset
from bingo.services.number_pool import NumberPool


class DrawEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = DrawEngine(NumberPool(seed=2024))
        self.events: list[object] = []
        self.unsubscribe = self.engine.subscribe(self.events.append)

    def _draw_once(self) -> int:
        started = self.engine.request_draw()
        self.assertIsInstance(started, DrawStarted)
        completed = self.engine.confirm_draw(started.candidates[0])
        self.assertIsInstance(completed, DrawCompleted)
        return completed.value

    def assertConsistent(self) -> None:
        pool = self.engine.pool
        history = self.engine.history
        self.assertEqual(len(pool) + len(history), 75)
        self.assertEqual(len(set(history)), len(history))
        self.assertEqual(set(history), self.engine.roster.drawn_values())
        self.assertFalse(set(history) & set(pool.available))

    def test_initial_state(self) -> None:
        self.assertIs(self.engine.state, DrawState.IDLE)
        self.assertIsNone(self.engine.current_number)
        self.assertEqual(self.engine.current_number_display, "?")
        self.assertEqual(self.engine.history, ())
        self.assertTrue(self.engine.can_draw)

    def test_first_draw_scenario(self) -> None:
        started = self.engine.request_draw()

        self.assertIsInstance(started, DrawStarted)
        self.assertEqual(len(started.candidates), 75)
        self.assertEqual(sorted(started.candidates), list(range(1, 76)))
        self.assertTrue(self.engine.is_drawing)
        self.assertFalse(self.engine.can_draw)
        self.assertEqual(len(self.engine.pool), 75)

        value = started.candidates[0]
        completed = self.engine.confirm_draw(value)

        self.assertEqual(completed, DrawCompleted(value=value, history=(value,)))
        self.assertEqual(self.engine.current_number, value)
        self.assertEqual(self.engine.current_number_display, str(value))
        self.assertIs(self.engine.state, DrawState.IDLE)
        self.assertEqual(len(self.engine.pool), 74)
        self.assertNotIn(value, self.engine.pool)
        self.assertTrue(self.engine.roster.record(value).drawn)
        self.assertEqual(self.events, [started, completed])

    def test_history_is_most_recent_first(self) -> None:
        first = self._draw_once()
        second = self._draw_once()
        third = self._draw_once()
        self.assertEqual(self.engine.history, (third, second, first))
        self.assertEqual(self.engine.current_number, third)

    def test_invariants_hold_through_random_cycles(self) -> None:
        rng = random.Random(5)
        for _ in range(40):
            started = self.engine.request_draw()
            assert isinstance(started, DrawStarted)
            self.engine.confirm_draw(rng.choice(started.candidates))
            self.assertConsistent()

    def test_request_while_drawing_is_rejected(self) -> None:
        self.engine.request_draw()
        self.events.clear()

        rejected = self.engine.request_draw()

        self.assertIsInstance(rejected, DrawRejected)
        self.assertIs(rejected.reason, RejectReason.INVALID_STATE)
        self.assertIs(self.engine.state, DrawState.DRAWING)
        self.assertEqual(self.events, [rejected])

    def test_confirm_while_idle_is_rejected_without_mutation(self) -> None:
        rejected = self.engine.confirm_draw(7)

        self.assertIsInstance(rejected, DrawRejected)
        self.assertIs(rejected.reason, RejectReason.INVALID_STATE)
        self.assertEqual(rejected.value, 7)
        self.assertEqual(len(self.engine.pool), 75)
        self.assertEqual(self.engine.history, ())
        self.assertIsNone(self.engine.current_number)
        self.assertFalse(self.engine.roster.record(7).drawn)

    def test_confirm_of_drawn_value_keeps_drawing(self) -> None:
        value = self._draw_once()
        self.engine.request_draw()

        rejected = self.engine.confirm_draw(value)

        self.assertIsInstance(rejected, DrawRejected)
        self.assertIs(rejected.reason, RejectReason.INVALID_DRAW)
        self.assertIs(self.engine.state, DrawState.DRAWING)
        self.assertEqual(self.engine.history, (value,))
        self.assertConsistent()

        # retry with a valid value completes the draw
        retry = self.engine.confirm_draw(self.engine.pool.available[0])
        self.assertIsInstance(retry, DrawCompleted)
        self.assertIs(self.engine.state, DrawState.IDLE)

    def test_confirm_rejects_values_that_are_not_ints(self) -> None:
        self.engine.request_draw()

        for value in (3.0, True):
            with self.subTest(value=value):
                rejected = self.engine.confirm_draw(value)  # type: ignore[arg-type]

                self.assertIsInstance(rejected, DrawRejected)
                self.assertIs(rejected.reason, RejectReason.INVALID_DRAW)
                self.assertEqual(len(self.engine.pool), 75)
                self.assertEqual(self.engine.history, ())
                self.assertIs(self.engine.state, DrawState.DRAWING)
                self.assertConsistent()

    def test_listener_error_reaches_caller_after_state_update(self) -> None:
        def explode(event: object) -> None:
            if isinstance(event, DrawCompleted):
                raise RuntimeError("listener failed")

        self.engine.subscribe(explode)
        started = self.engine.request_draw()
        value = started.candidates[0]

        with self.assertRaises(RuntimeError):
            self.engine.confirm_draw(value)

        self.assertEqual(self.engine.history, (value,))
        self.assertNotIn(value, self.engine.pool)
        self.assertIs(self.engine.state, DrawState.IDLE)
        self.assertConsistent()

    def test_pool_and_seed_together_are_refused(self) -> None:
        with self.assertRaises(ValueError):
            DrawEngine(NumberPool(seed=1), seed=2)

    def test_exhausting_the_pool(self) -> None:
        for _ in range(75):
            self._draw_once()

        self.assertFalse(self.engine.pool.has_available())
        self.assertFalse(self.engine.can_draw)
        self.assertConsistent()

        self.events.clear()
        rejected = self.engine.request_draw()
        self.assertIsInstance(rejected, DrawRejected)
        self.assertIs(rejected.reason, RejectReason.EXHAUSTED_POOL)
        self.assertIs(self.engine.state, DrawState.IDLE)
        self.assertEqual(self.events, [rejected])

    def test_reset_from_drawing_is_idempotent(self) -> None:
        self._draw_once()
        self._draw_once()
        self.engine.request_draw()

        first = self.engine.reset()
        observed = (
            self.engine.state,
            self.engine.history,
            self.engine.current_number,
            self.engine.pool.available,
        )
        self.engine.reset()

        self.assertIsInstance(first, Reset)
        self.assertEqual(observed, (DrawState.IDLE, (), None, tuple(range(1, 76))))
        self.assertEqual(
            (self.engine.state, self.engine.history, self.engine.current_number, self.engine.pool.available),
            observed,
        )
        self.assertEqual(self.engine.roster.drawn_values(), set())
        self.assertTrue(self.engine.can_draw)

    def test_confirm_after_reset_cancelled_draw_is_rejected(self) -> None:
        started = self.engine.request_draw()
        self.engine.reset()

        rejected = self.engine.confirm_draw(started.candidates[0])

        self.assertIsInstance(rejected, DrawRejected)
        self.assertIs(rejected.reason, RejectReason.INVALID_STATE)
        self.assertEqual(len(self.engine.pool), 75)

    def test_unsubscribe_stops_notifications(self) -> None:
        self.unsubscribe()
        self.engine.request_draw()
        self.assertEqual(self.events, [])

        # a second call is harmless
        self.unsubscribe()


if __name__ == "__main__":
    unittest.main()
