"""Board models."""

from bingo.models.number import NumberGroup, NumberRecord, Roster

__all__ = ["NumberGroup", "NumberRecord", "Roster"]
