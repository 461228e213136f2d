"""Typed errors raised by the scheduler and order services."""

from __future__ import annotations

from typing import Any


class SchedulerError(Exception):
    """Base error for every failure surfaced across the service boundary."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidDate(SchedulerError):
    """Raised for date input that is not a canonical YYYY-MM-DD value."""


class ValidationError(SchedulerError):
    """Raised when input fails a business validation rule."""


class InvalidOperation(SchedulerError):
    """Raised for an operation that is not allowed in the current state."""


class NotFound(SchedulerError):
    """Raised when a referenced order or record does not exist."""


class StorageError(SchedulerError):
    """Raised when the persistence boundary fails."""


class BatchSaveError(StorageError):
    """Raised when a batch save fails partway through.

    Dates written before the failure stay committed.
    """

    def __init__(self, message: str, saved_count: int, failed_date: str) -> None:
        super().__init__(message, {"saved_count": saved_count, "failed_date": failed_date})
        self.saved_count = saved_count
        self.failed_date = failed_date


ERROR_STATUS_CODES: dict[type[SchedulerError], int] = {
    InvalidDate: 400,
    ValidationError: 400,
    InvalidOperation: 400,
    NotFound: 404,
    StorageError: 503,
}


def status_code_for(error: SchedulerError) -> int:
    """Resolve HTTP status for an error, walking up its class hierarchy."""
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return 500
