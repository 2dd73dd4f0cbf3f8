from __future__ import annotations

import unittest

from bingo.services.bingo_service import BingoService
from bingo.services.draw_engine import DrawState
from bingo.services.events import DrawCompleted, DrawStarted, LayoutChanged, Reset


class BingoServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.service = BingoService(seed=99)

    def test_construction_lays_out_for_initial_viewport(self) -> None:
        layout = self.service.layout_snapshot()
        self.assertEqual(layout.rows_per_column, 5)
        self.assertAlmostEqual(layout.cell_size, 830 / 15 - 6)
        self.assertEqual(len(layout.columns), 15)

        snapshot = self.service.snapshot()
        self.assertIs(snapshot.state, DrawState.IDLE)
        self.assertTrue(snapshot.can_draw)
        self.assertEqual(snapshot.current_number_display, "?")
        self.assertEqual(snapshot.remaining, 75)

    def test_single_listener_sees_draw_and_layout_events(self) -> None:
        events: list[object] = []
        unsubscribe = self.service.subscribe(events.append)

        started = self.service.request_draw()
        self.service.confirm_draw(started.candidates[0])
        self.service.report_size_changed(1000, 1600)

        self.assertEqual([type(e) for e in events], [DrawStarted, DrawCompleted, LayoutChanged])

        unsubscribe()
        self.service.reset()
        self.assertEqual(len(events), 3)

    def test_reset_restores_layout_after_resize(self) -> None:
        events: list[object] = []
        self.service.report_size_changed(1000, 1600)
        self.assertEqual(self.service.layout_snapshot().rows_per_column, 10)
        self.service.subscribe(events.append)

        self.service.reset()

        self.assertEqual(self.service.layout_snapshot().rows_per_column, 5)
        self.assertIsInstance(events[0], Reset)
        self.assertIsInstance(events[1], LayoutChanged)

    def test_board_snapshot_reflects_drawn_numbers(self) -> None:
        started = self.service.request_draw()
        value = started.candidates[0]
        self.service.confirm_draw(value)

        board = self.service.board_snapshot()

        self.assertEqual(len(board.numbers), 75)
        self.assertTrue(board.numbers[value - 1].drawn)
        self.assertEqual(sum(1 for n in board.numbers if n.drawn), 1)
        self.assertEqual(len(board.grouped_numbers), 8)
        self.assertEqual(len(board.columns), 5)
        self.assertEqual(len(board.dynamic_columns), 15)

        column = board.columns[(value - 1) // 15]
        self.assertTrue(column.numbers[(value - 1) % 15].drawn)

    def test_board_snapshot_is_detached_from_roster(self) -> None:
        board = self.service.board_snapshot()
        board.numbers[0].drawn = True
        self.assertFalse(self.service.engine.roster.record(1).drawn)

    def test_listener_may_call_back_into_service(self) -> None:
        seen: list[int] = []

        def on_event(event: object) -> None:
            if isinstance(event, DrawCompleted):
                seen.append(self.service.snapshot().remaining)

        self.service.subscribe(on_event)
        started = self.service.request_draw()
        self.service.confirm_draw(started.candidates[0])

        self.assertEqual(seen, [74])

    def test_current_number_area(self) -> None:
        self.assertEqual(self.service.report_current_number_area_size_changed(100, 100), 60)
        self.assertEqual(self.service.layout_snapshot().current_number_font_size, 60)


if __name__ == "__main__":
    unittest.main()
