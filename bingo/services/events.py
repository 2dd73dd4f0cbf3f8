"""Typed change notifications and a minimal subscription channel."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from bingo.models.number import NumberGroup


class RejectReason(str, Enum):
    EXHAUSTED_POOL = "exhausted_pool"
    INVALID_STATE = "invalid_state"
    INVALID_DRAW = "invalid_draw"


@dataclass(frozen=True)
class DrawStarted:
    candidates: tuple[int, ...]


@dataclass(frozen=True)
class DrawCompleted:
    value: int
    history: tuple[int, ...]


@dataclass(frozen=True)
class DrawRejected:
    reason: RejectReason
    message: str
    value: int | None = None


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class LayoutChanged:
    rows: int
    cell_size: float
    font_size: float
    columns: tuple[NumberGroup, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CurrentNumberFontSizeChanged:
    font_size: float


Event = Union[DrawStarted, DrawCompleted, DrawRejected, Reset, LayoutChanged, CurrentNumberFontSizeChanged]
Listener = Callable[[Event], None]


class EventEmitter:
    """Synchronous observer list.

    Listeners run in subscription order on the caller's thread. Exceptions
    raised by a listener propagate to whoever emitted the event.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: Event) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
