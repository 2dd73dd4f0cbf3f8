"""Play a headless bingo game and print the draw history and board layout.

Each draw goes through both phases: request the shuffled candidates, then
confirm the one a roulette would land on (the first candidate).

Usage:
  python scripts/simulate_game.py --seed 42 --draws 10 --width 1280 --height 900

Options:
  --seed 42       (default: system randomness)
  --draws 75      (default: play until the pool is empty)
  --width/--height  viewport to lay the board out for
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from bingo.models.number import TOTAL_NUMBERS
from bingo.services.bingo_service import BingoService
from bingo.services.events import DrawRejected


logger = logging.getLogger(__name__)


def play(service: BingoService, draws: int) -> list[int]:
    """Run up to ``draws`` request/confirm cycles; return values in draw order."""

    drawn: list[int] = []
    for _ in range(draws):
        started = service.request_draw()
        if isinstance(started, DrawRejected):
            logger.info("Stopping: %s", started.message)
            break

        completed = service.confirm_draw(started.candidates[0])
        if isinstance(completed, DrawRejected):
            raise RuntimeError(completed.message)
        drawn.append(completed.value)
    return drawn


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a bingo game without a UI")
    parser.add_argument("--seed", dest="seed", type=int, default=None)
    parser.add_argument("--draws", dest="draws", type=int, default=TOTAL_NUMBERS)
    parser.add_argument("--width", dest="width", type=float, default=1000.0)
    parser.add_argument("--height", dest="height", type=float, default=800.0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.draws < 0:
        raise SystemExit("--draws must be >= 0")

    service = BingoService(seed=args.seed)
    service.report_size_changed(args.width, args.height)
    drawn = play(service, args.draws)

    snapshot = service.snapshot()
    layout = service.layout_snapshot()

    print(f"Drawn ({len(drawn)}): {' '.join(str(n) for n in drawn)}")
    print(f"Current number: {snapshot.current_number_display}  Remaining: {snapshot.remaining}")
    print(
        f"Layout: {layout.rows_per_column} rows, cell {layout.cell_size:.1f}px, "
        f"font {layout.font_size:.1f}px"
    )

    roster = service.engine.roster
    for column in layout.columns:
        marks = " ".join(
            f"[{r.value:02d}]" if r.drawn else f" {r.value:02d} " for r in roster.resolve(column)
        )
        print(f"{column.label}: {marks}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
