"""Marshmallow schemas for draw requests and game state."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from bingo.models.number import TOTAL_NUMBERS


class ConfirmDrawRequestSchema(Schema):
    """Validate the number a roulette landed on."""

    value = fields.Integer(required=True, strict=True, validate=validate.Range(min=1, max=TOTAL_NUMBERS))


class DrawStartedSchema(Schema):
    candidates = fields.List(fields.Integer(), required=True)


class DrawCompletedSchema(Schema):
    value = fields.Integer(required=True)
    history = fields.List(fields.Integer(), required=True)


class GameStateSchema(Schema):
    """Serialize a GameSnapshot."""

    state = fields.Function(lambda s: s.state.value)
    is_drawing = fields.Boolean()
    can_draw = fields.Boolean()
    current_number = fields.Integer(allow_none=True)
    current_number_display = fields.String()
    history = fields.List(fields.Integer())
    remaining = fields.Integer()


class NumberRecordSchema(Schema):
    value = fields.Integer()
    drawn = fields.Boolean()


class BoardGroupSchema(Schema):
    label = fields.String()
    numbers = fields.List(fields.Nested(NumberRecordSchema))


class BoardSchema(Schema):
    """Serialize a BoardSnapshot."""

    numbers = fields.List(fields.Nested(NumberRecordSchema))
    grouped_numbers = fields.List(fields.Nested(BoardGroupSchema))
    columns = fields.List(fields.Nested(BoardGroupSchema))
    dynamic_columns = fields.List(fields.Nested(BoardGroupSchema))
