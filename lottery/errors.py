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

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class InvalidPrizeSchedule(AppError):
    """Prize weights are not a usable schedule (they must sum to 1.0)."""

    def __init__(
        self,
        message: str = "The winning percentages do not add up to 1.0",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="invalid_prize_schedule", message=message, status_code=500, details=details)


class DrawNotAvailable(AppError):
    """Every ticket number of the current round has been sold."""

    def __init__(
        self,
        message: str = "There are no more draws to be sold",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="draw_not_available", message=message, status_code=409, details=details)


class InvalidName(AppError):
    """Purchaser name is missing or blank."""

    def __init__(self, message: str = "A first name is required", details: Any | None = None) -> None:
        super().__init__(code="invalid_name", message=message, status_code=400, details=details)


class IndexOutOfRange(AppError):
    """Requested prize rank does not exist in the schedule."""

    def __init__(self, message: str = "Rank out of range", details: Any | None = None) -> None:
        super().__init__(code="index_out_of_range", message=message, status_code=404, details=details)
