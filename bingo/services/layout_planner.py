"""Responsive board layout: row count, cell size and font sizes from viewport size."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from bingo.models.number import TOTAL_NUMBERS, NumberGroup, build_columns
from bingo.services.events import CurrentNumberFontSizeChanged, EventEmitter, LayoutChanged, Listener

logger = logging.getLogger(__name__)


ROW_CANDIDATES = (5, 10)

HORIZONTAL_MARGIN = 80.0
VERTICAL_RESERVED = 320.0
MIN_AVAILABLE = 200.0
SPACING = 6.0
COLUMN_PADDING = 12.0
MIN_CELL_SIZE = 24.0

CELL_FONT_SCALE = 0.42
CELL_FONT_MIN = 12.0
CELL_FONT_MAX = 48.0

CURRENT_FONT_SCALE = 0.55
CURRENT_FONT_MIN = 60.0
CURRENT_FONT_MAX = 320.0

# Changes smaller than these are not reported
CELL_SIZE_EPSILON = 0.5
FONT_SIZE_EPSILON = 0.5
CURRENT_FONT_EPSILON = 0.1

DEFAULT_ROWS = 10
DEFAULT_CELL_SIZE = 40.0
DEFAULT_FONT_SIZE = 16.0
DEFAULT_CURRENT_FONT_SIZE = 120.0

# Viewport the board is laid out for right after a reset
INITIAL_WIDTH = 1000.0
INITIAL_HEIGHT = 800.0


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class RowOption:
    rows: int
    columns_needed: int
    cell_size: float


@dataclass(frozen=True)
class LayoutPlan:
    rows: int
    cell_size: float
    font_size: float
    columns: tuple[NumberGroup, ...]


def evaluate_rows(rows: int, available_width: float, available_height: float, total: int = TOTAL_NUMBERS) -> RowOption:
    """Cell size that fits ``total`` numbers stacked ``rows`` high."""

    columns_needed = math.ceil(total / rows)
    by_height = (available_height - COLUMN_PADDING) / rows - SPACING
    by_width = (available_width - columns_needed * SPACING) / columns_needed - SPACING
    return RowOption(
        rows=rows,
        columns_needed=columns_needed,
        cell_size=max(MIN_CELL_SIZE, min(by_height, by_width)),
    )


def choose_rows(width: float, height: float, total: int = TOTAL_NUMBERS) -> RowOption:
    """Pick the row candidate giving the largest cells for a viewport.

    Margins are subtracted first and the remaining area is floored at
    200x200. The first candidate wins ties.
    """

    available_width = max(MIN_AVAILABLE, width - HORIZONTAL_MARGIN)
    available_height = max(MIN_AVAILABLE, height - VERTICAL_RESERVED)

    best: RowOption | None = None
    for rows in ROW_CANDIDATES:
        option = evaluate_rows(rows, available_width, available_height, total)
        if best is None or option.cell_size > best.cell_size:
            best = option
    assert best is not None
    return best


def cell_font_size(cell_size: float) -> float:
    return _clamp(cell_size * CELL_FONT_SCALE, CELL_FONT_MIN, CELL_FONT_MAX)


def current_number_font_size(width: float, height: float) -> float:
    """Font size for the large current-number display."""

    return _clamp(min(width, height) * CURRENT_FONT_SCALE, CURRENT_FONT_MIN, CURRENT_FONT_MAX)


def plan(width: float, height: float, total: int = TOTAL_NUMBERS) -> LayoutPlan:
    """Lay out ``total`` numbers in a ``width`` x ``height`` viewport."""

    option = choose_rows(width, height, total)
    return LayoutPlan(
        rows=option.rows,
        cell_size=option.cell_size,
        font_size=cell_font_size(option.cell_size),
        columns=build_columns(option.rows, total),
    )


class LayoutPlanner:
    """Holds the current layout and reports meaningful changes to it.

    Board columns are only regrouped when the chosen row count changes.
    """

    def __init__(self, total: int = TOTAL_NUMBERS) -> None:
        self._total = total
        self._events = EventEmitter()
        self.rows_per_column = DEFAULT_ROWS
        self.cell_size = DEFAULT_CELL_SIZE
        self.font_size = DEFAULT_FONT_SIZE
        self.current_number_font_size = DEFAULT_CURRENT_FONT_SIZE
        self.columns: tuple[NumberGroup, ...] = build_columns(DEFAULT_ROWS, total)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._events.subscribe(listener)

    def update(self, width: float, height: float) -> LayoutChanged | None:
        """Recompute the board layout; return the change event, if any."""

        option = choose_rows(width, height, self._total)
        changed = False

        if option.rows != self.rows_per_column:
            logger.debug("Rows per column %d -> %d", self.rows_per_column, option.rows)
            self.rows_per_column = option.rows
            self.columns = build_columns(option.rows, self._total)
            changed = True

        if abs(self.cell_size - option.cell_size) >= CELL_SIZE_EPSILON:
            self.cell_size = option.cell_size
            changed = True

        font_size = cell_font_size(option.cell_size)
        if abs(self.font_size - font_size) >= FONT_SIZE_EPSILON:
            self.font_size = font_size
            changed = True

        if not changed:
            return None

        event = LayoutChanged(
            rows=self.rows_per_column,
            cell_size=self.cell_size,
            font_size=self.font_size,
            columns=self.columns,
        )
        self._events.emit(event)
        return event

    def adjust_current_number_font_size(self, width: float, height: float) -> float:
        font_size = current_number_font_size(width, height)
        if abs(self.current_number_font_size - font_size) >= CURRENT_FONT_EPSILON:
            self.current_number_font_size = font_size
            self._events.emit(CurrentNumberFontSizeChanged(font_size=font_size))
        return self.current_number_font_size
