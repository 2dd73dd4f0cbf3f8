"""Marshmallow schemas for layout requests and responses."""

from __future__ import annotations

from marshmallow import Schema, fields


class SizeRequestSchema(Schema):
    """Validate a reported viewport or display-area size."""

    width = fields.Float(required=True, allow_nan=False)
    height = fields.Float(required=True, allow_nan=False)


class ColumnSchema(Schema):
    label = fields.String()
    values = fields.List(fields.Integer())


class LayoutSchema(Schema):
    """Serialize a LayoutSnapshot."""

    rows_per_column = fields.Integer()
    cell_size = fields.Float()
    font_size = fields.Float()
    current_number_font_size = fields.Float()
    columns = fields.List(fields.Nested(ColumnSchema))


class CurrentNumberFontSchema(Schema):
    current_number_font_size = fields.Float(required=True)
