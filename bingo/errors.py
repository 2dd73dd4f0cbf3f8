"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class ExhaustedPoolError(AppError):
    """Draw requested after every number has been drawn."""

    def __init__(self, message: str = "No numbers left to draw", details: Any | None = None) -> None:
        super().__init__(code="exhausted_pool", message=message, status_code=409, details=details)


class InvalidStateError(AppError):
    """Draw operation called from the wrong engine state."""

    def __init__(self, message: str = "Invalid draw state", details: Any | None = None) -> None:
        super().__init__(code="invalid_state", message=message, status_code=409, details=details)


class InvalidDrawError(AppError):
    """Confirmed value is not in the pool of undrawn numbers."""

    def __init__(self, message: str = "Number is not available", details: Any | None = None) -> None:
        super().__init__(code="invalid_draw", message=message, status_code=422, details=details)


_REJECTION_ERRORS: dict[str, type[AppError]] = {
    "exhausted_pool": ExhaustedPoolError,
    "invalid_state": InvalidStateError,
    "invalid_draw": InvalidDrawError,
}


def error_for_rejection(reason: str, message: str, details: Any | None = None) -> AppError:
    """Map a draw rejection reason onto the matching application error."""

    error_cls = _REJECTION_ERRORS.get(reason)
    if error_cls is None:
        return AppError(code=reason, message=message, status_code=409, details=details)
    return error_cls(message=message, details=details)
