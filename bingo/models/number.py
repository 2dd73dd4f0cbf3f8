"""Number records and the roster that owns them.

The roster is the only owner of NumberRecord instances. Every grouping
(tens-groups, fifteens-columns, dynamic board columns) stores indices into
the roster, so marking a record drawn is visible in all of them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


TOTAL_NUMBERS = 75


@dataclass(eq=False)
class NumberRecord:
    """One bingo number and whether it has been drawn."""

    value: int
    drawn: bool = False


@dataclass(frozen=True)
class NumberGroup:
    """A labelled run of roster indices."""

    label: str
    indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def values(self) -> tuple[int, ...]:
        # index i always holds value i + 1
        return tuple(i + 1 for i in self.indices)


def _padded(value: int) -> str:
    return f"{value:02d}"


def build_tens_groups(total: int = TOTAL_NUMBERS) -> tuple[NumberGroup, ...]:
    """Group 1..total by decade: 01-10, 11-20, ..., 71-75."""

    groups: list[NumberGroup] = []
    start = 1
    while start <= total:
        end = min(((start - 1) // 10 + 1) * 10, total)
        groups.append(
            NumberGroup(
                label=f"{_padded(start)}-{_padded(end)}",
                indices=tuple(range(start - 1, end)),
            )
        )
        start = end + 1
    return tuple(groups)


def build_fifteens_columns(total: int = TOTAL_NUMBERS) -> tuple[NumberGroup, ...]:
    """Group 1..total into the classic B-I-N-G-O columns of 15."""

    columns: list[NumberGroup] = []
    start = 1
    while start <= total:
        end = min(start + 14, total)
        columns.append(NumberGroup(label=f"{start}-{end}", indices=tuple(range(start - 1, end))))
        start = end + 1
    return tuple(columns)


def build_columns(rows: int, total: int = TOTAL_NUMBERS) -> tuple[NumberGroup, ...]:
    """Split 1..total into contiguous buckets of ``rows`` items.

    The last bucket holds the remainder when ``rows`` does not divide
    ``total``.
    """

    if rows <= 0:
        raise ValueError("rows must be positive")

    columns: list[NumberGroup] = []
    for start_index in range(0, total, rows):
        end_index = min(start_index + rows, total) - 1
        columns.append(
            NumberGroup(
                label=f"{_padded(start_index + 1)}-{_padded(end_index + 1)}",
                indices=tuple(range(start_index, end_index + 1)),
            )
        )
    return tuple(columns)


class Roster:
    """Ordered arena of NumberRecords where index ``i`` holds value ``i + 1``."""

    def __init__(self, total: int = TOTAL_NUMBERS) -> None:
        self._records: list[NumberRecord] = [NumberRecord(value=i) for i in range(1, total + 1)]
        self.tens_groups = build_tens_groups(total)
        self.fifteens_columns = build_fifteens_columns(total)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[NumberRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> NumberRecord:
        return self._records[index]

    def record(self, value: int) -> NumberRecord:
        """Return the record holding ``value``."""

        if isinstance(value, bool) or not isinstance(value, int):
            raise KeyError(value)
        if value < 1 or value > len(self._records):
            raise KeyError(value)
        return self._records[value - 1]

    def resolve(self, group: NumberGroup) -> list[NumberRecord]:
        """Return the shared records a group points at."""

        return [self._records[i] for i in group.indices]

    def drawn_values(self) -> set[int]:
        return {r.value for r in self._records if r.drawn}
