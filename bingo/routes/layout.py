"""Layout routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from bingo.game import get_game
from bingo.schemas.layout import CurrentNumberFontSchema, LayoutSchema, SizeRequestSchema
from bingo.utils.responses import ok


layout_bp = Blueprint("layout", __name__)

_size_schema = SizeRequestSchema()
_layout_schema = LayoutSchema()
_font_schema = CurrentNumberFontSchema()


@layout_bp.get("/layout")
def get_layout():
    return ok(_layout_schema.dump(get_game().layout_snapshot()))


@layout_bp.post("/layout/size")
def report_size():
    """Re-plan the board for a new viewport size."""

    data = _size_schema.load(request.get_json(silent=True) or {})

    game = get_game()
    game.report_size_changed(float(data["width"]), float(data["height"]))
    return ok(_layout_schema.dump(game.layout_snapshot()))


@layout_bp.post("/layout/current-number-size")
def report_current_number_size():
    data = _size_schema.load(request.get_json(silent=True) or {})

    font_size = get_game().report_current_number_area_size_changed(float(data["width"]), float(data["height"]))
    return ok(_font_schema.dump({"current_number_font_size": font_size}))
