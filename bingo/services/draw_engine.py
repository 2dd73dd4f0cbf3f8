"""Two-phase draw engine: request a draw, then confirm the chosen number.

The split lets a presentation layer run a roulette animation over the
shuffled candidates and decide when it lands, while the engine keeps the
draw-without-replacement guarantee.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from bingo.models.number import Roster
from bingo.services.events import (
    DrawCompleted,
    DrawRejected,
    DrawStarted,
    EventEmitter,
    Listener,
    RejectReason,
    Reset,
)
from bingo.services.number_pool import NumberPool

logger = logging.getLogger(__name__)


class DrawState(str, Enum):
    IDLE = "IDLE"
    DRAWING = "DRAWING"


class DrawEngine:
    """Owns draw history, the current number and the Idle/Drawing state."""

    def __init__(self, pool: NumberPool | None = None, *, seed: int | None = None) -> None:
        if pool is not None and seed is not None:
            raise ValueError("Pass either a pool or a seed, not both")
        self._pool = pool if pool is not None else NumberPool(seed=seed)
        self._events = EventEmitter()
        self._state = DrawState.IDLE
        self._history: list[int] = []
        self._current_number: int | None = None

    @property
    def pool(self) -> NumberPool:
        return self._pool

    @property
    def roster(self) -> Roster:
        return self._pool.roster

    @property
    def state(self) -> DrawState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return self._state is DrawState.DRAWING

    @property
    def current_number(self) -> int | None:
        return self._current_number

    @property
    def current_number_display(self) -> str:
        return "?" if self._current_number is None else str(self._current_number)

    @property
    def history(self) -> tuple[int, ...]:
        """Drawn values, most recent first."""

        return tuple(self._history)

    @property
    def can_draw(self) -> bool:
        return self._pool.has_available() and self._state is DrawState.IDLE

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._events.subscribe(listener)

    def request_draw(self) -> DrawStarted | DrawRejected:
        """Enter the Drawing state and publish a shuffled candidate list.

        Rejected while a draw is already in progress or when the pool is
        empty; a rejection leaves every piece of state untouched.
        """

        if self._state is DrawState.DRAWING:
            return self._reject(RejectReason.INVALID_STATE, "A draw is already in progress")
        if not self._pool.has_available():
            return self._reject(RejectReason.EXHAUSTED_POOL, "No numbers left to draw")

        self._state = DrawState.DRAWING
        event = DrawStarted(candidates=tuple(self._pool.peek_shuffled_candidates()))
        logger.info("Draw started with %d candidates", len(event.candidates))
        self._events.emit(event)
        return event

    def confirm_draw(self, value: int) -> DrawCompleted | DrawRejected:
        """Commit ``value`` as the drawn number.

        A value outside the pool keeps the engine in the Drawing state so the
        caller can retry with another value or reset.
        """

        if self._state is not DrawState.DRAWING:
            return self._reject(RejectReason.INVALID_STATE, "No draw in progress", value)
        try:
            record = self._pool.roster.record(value)
        except KeyError:
            record = None
        if record is None or not self._pool.commit(value):
            return self._reject(RejectReason.INVALID_DRAW, f"Number {value!r} is not available", value)

        record.drawn = True
        self._history.insert(0, value)
        self._current_number = value
        self._state = DrawState.IDLE

        event = DrawCompleted(value=value, history=tuple(self._history))
        logger.info("Drew %d (%d remaining)", value, len(self._pool))
        self._events.emit(event)
        return event

    def reset(self) -> Reset:
        """Start a new game from any state, cancelling an in-progress draw."""

        if self._state is DrawState.DRAWING:
            logger.info("Reset cancelled an in-progress draw")
        self._state = DrawState.IDLE
        self._history.clear()
        self._current_number = None
        self._pool.reset()

        event = Reset()
        logger.info("Game reset")
        self._events.emit(event)
        return event

    def _reject(self, reason: RejectReason, message: str, value: int | None = None) -> DrawRejected:
        logger.warning("Draw rejected (%s): %s", reason.value, message)
        event = DrawRejected(reason=reason, message=message, value=value)
        self._events.emit(event)
        return event
