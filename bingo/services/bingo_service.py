"""Bingo caller use-cases: the draw engine and board layout behind one facade."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from bingo.models.number import NumberGroup, NumberRecord
from bingo.services.draw_engine import DrawEngine, DrawState
from bingo.services.events import DrawCompleted, DrawRejected, DrawStarted, LayoutChanged, Listener, Reset
from bingo.services.layout_planner import INITIAL_HEIGHT, INITIAL_WIDTH, LayoutPlanner
from bingo.services.number_pool import NumberPool


@dataclass(frozen=True)
class GameSnapshot:
    state: DrawState
    is_drawing: bool
    can_draw: bool
    current_number: int | None
    current_number_display: str
    history: tuple[int, ...]
    remaining: int


@dataclass(frozen=True)
class LayoutSnapshot:
    rows_per_column: int
    cell_size: float
    font_size: float
    current_number_font_size: float
    columns: tuple[NumberGroup, ...]


@dataclass(frozen=True)
class BoardGroup:
    label: str
    numbers: tuple[NumberRecord, ...]


@dataclass(frozen=True)
class BoardSnapshot:
    numbers: tuple[NumberRecord, ...]
    grouped_numbers: tuple[BoardGroup, ...]
    columns: tuple[BoardGroup, ...]
    dynamic_columns: tuple[BoardGroup, ...]


class BingoService:
    """One game of bingo plus its responsive board layout.

    Every public call holds a re-entrant lock so request threads see the
    engine one call at a time, while listeners may still call back in.
    """

    def __init__(self, *, seed: int | None = None, engine: DrawEngine | None = None) -> None:
        self._lock = RLock()
        self._engine = engine or DrawEngine(NumberPool(seed=seed))
        self._layout = LayoutPlanner()
        self.reset()

    @property
    def engine(self) -> DrawEngine:
        return self._engine

    @property
    def layout(self) -> LayoutPlanner:
        return self._layout

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Receive draw and layout events through a single listener."""

        with self._lock:
            unsubscribe_engine = self._engine.subscribe(listener)
            unsubscribe_layout = self._layout.subscribe(listener)

        def unsubscribe() -> None:
            with self._lock:
                unsubscribe_engine()
                unsubscribe_layout()

        return unsubscribe

    def request_draw(self) -> DrawStarted | DrawRejected:
        with self._lock:
            return self._engine.request_draw()

    def confirm_draw(self, value: int) -> DrawCompleted | DrawRejected:
        with self._lock:
            return self._engine.confirm_draw(value)

    def reset(self) -> Reset:
        with self._lock:
            event = self._engine.reset()
            self._layout.update(INITIAL_WIDTH, INITIAL_HEIGHT)
            return event

    def report_size_changed(self, width: float, height: float) -> LayoutChanged | None:
        with self._lock:
            return self._layout.update(width, height)

    def report_current_number_area_size_changed(self, width: float, height: float) -> float:
        with self._lock:
            return self._layout.adjust_current_number_font_size(width, height)

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            engine = self._engine
            return GameSnapshot(
                state=engine.state,
                is_drawing=engine.is_drawing,
                can_draw=engine.can_draw,
                current_number=engine.current_number,
                current_number_display=engine.current_number_display,
                history=engine.history,
                remaining=len(engine.pool),
            )

    def layout_snapshot(self) -> LayoutSnapshot:
        with self._lock:
            layout = self._layout
            return LayoutSnapshot(
                rows_per_column=layout.rows_per_column,
                cell_size=layout.cell_size,
                font_size=layout.font_size,
                current_number_font_size=layout.current_number_font_size,
                columns=layout.columns,
            )

    def board_snapshot(self) -> BoardSnapshot:
        """Roster and every grouping, resolved to copies of the records."""

        with self._lock:
            roster = self._engine.roster
            copies = tuple(NumberRecord(value=r.value, drawn=r.drawn) for r in roster)

            def resolve(groups: tuple[NumberGroup, ...]) -> tuple[BoardGroup, ...]:
                return tuple(
                    BoardGroup(label=g.label, numbers=tuple(copies[i] for i in g.indices))
                    for g in groups
                )

            return BoardSnapshot(
                numbers=copies,
                grouped_numbers=resolve(roster.tens_groups),
                columns=resolve(roster.fifteens_columns),
                dynamic_columns=resolve(self._layout.columns),
            )
