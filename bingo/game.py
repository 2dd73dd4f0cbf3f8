"""Game lifetime: one BingoService per Flask app.

Mirrors the engine-per-app pattern: created in the app factory, looked up
from the current app inside request handlers.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app

from bingo.services.bingo_service import BingoService
from bingo.services.events import Event

logger = logging.getLogger(__name__)

_EXTENSION_KEY = "bingo_game"


def _log_event(event: Event) -> None:
    logger.debug("Event %s", event)


def init_game(app: Flask) -> BingoService:
    """Create the app's game and hook event logging onto it."""

    service = BingoService(seed=app.config.get("BINGO_RANDOM_SEED"))
    service.subscribe(_log_event)
    app.extensions[_EXTENSION_KEY] = service
    return service


def get_game() -> BingoService:
    """Return the game attached to the current app."""

    service = current_app.extensions.get(_EXTENSION_KEY)
    if service is None:
        raise RuntimeError("Game is not initialized; call init_game(app) first")
    return service
