"""Pool of undrawn numbers plus the roster of number records."""

from __future__ import annotations

import random

from bingo.models.number import TOTAL_NUMBERS, Roster


class NumberPool:
    """Draw-without-replacement pool over 1..75."""

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(seed)
        self._available: list[int] = []
        self._roster = Roster(TOTAL_NUMBERS)
        self.reset()

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def available(self) -> tuple[int, ...]:
        """Undrawn values in ascending order."""

        return tuple(self._available)

    def __len__(self) -> int:
        return len(self._available)

    def __contains__(self, value: object) -> bool:
        return value in self._available

    def reset(self) -> None:
        """Refill the pool with 1..75 and rebuild the roster, all undrawn."""

        self._available.clear()
        self._available.extend(range(1, TOTAL_NUMBERS + 1))
        self._roster = Roster(TOTAL_NUMBERS)

    def has_available(self) -> bool:
        return bool(self._available)

    def peek_shuffled_candidates(self) -> list[int]:
        """Return every undrawn value in random order without touching the pool."""

        numbers = list(self._available)
        # Fisher-Yates
        for i in range(len(numbers) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            numbers[i], numbers[j] = numbers[j], numbers[i]
        return numbers

    def commit(self, value: int) -> bool:
        """Remove ``value`` from the pool.

        Returns False, leaving the pool unchanged, when ``value`` is not an
        undrawn int. Bools and floats equal to a pool value are rejected too.
        """

        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value not in self._available:
            return False
        self._available.remove(value)
        return True
