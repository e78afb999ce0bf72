"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.
    """

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ConstraintViolationException(AppException):
    """A uniqueness, foreign-key or NOT NULL constraint rejected the write."""

    code = "CONSTRAINT_VIOLATION"
    status_code = 409


class DecodingFaultException(AppException):
    """A stored value could not be mapped back to its domain type.

    This is a data-integrity condition, never a stand-in for "absent".
    """

    code = "DECODING_FAULT"
    status_code = 500


class ResourceExhaustedException(AppException):
    """No connection could be obtained, or the store is unreachable."""

    code = "RESOURCE_EXHAUSTED"
    status_code = 503


class DeadlineExceededException(AppException):
    code = "DEADLINE_EXCEEDED"
    status_code = 504
