"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from bingo.errors import error_for_rejection
from bingo.game import get_game
from bingo.schemas.draw import (
    BoardSchema,
    ConfirmDrawRequestSchema,
    DrawCompletedSchema,
    DrawStartedSchema,
    GameStateSchema,
)
from bingo.services.events import DrawCompleted, DrawRejected, DrawStarted
from bingo.utils.responses import ok


draw_bp = Blueprint("draw", __name__)

_confirm_schema = ConfirmDrawRequestSchema()
_started_schema = DrawStartedSchema()
_completed_schema = DrawCompletedSchema()
_state_schema = GameStateSchema()
_board_schema = BoardSchema()


def _raise_if_rejected(event: DrawStarted | DrawCompleted | DrawRejected) -> DrawStarted | DrawCompleted:
    if isinstance(event, DrawRejected):
        details = {"value": event.value} if event.value is not None else None
        raise error_for_rejection(event.reason.value, event.message, details)
    return event


@draw_bp.get("/state")
def get_state():
    return ok(_state_schema.dump(get_game().snapshot()))


@draw_bp.get("/board")
def get_board():
    return ok(_board_schema.dump(get_game().board_snapshot()))


@draw_bp.post("/draw")
def request_draw():
    """Start a draw and return the shuffled candidates for the roulette."""

    event = _raise_if_rejected(get_game().request_draw())
    return ok(_started_schema.dump(event))


@draw_bp.post("/draw/confirm")
def confirm_draw():
    payload = request.get_json(silent=True) or {}
    data = _confirm_schema.load(payload)

    event = _raise_if_rejected(get_game().confirm_draw(int(data["value"])))
    return ok(_completed_schema.dump(event))


@draw_bp.post("/reset")
def reset_game():
    game = get_game()
    game.reset()
    return ok(_state_schema.dump(game.snapshot()))
