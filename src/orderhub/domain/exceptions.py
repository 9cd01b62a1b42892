"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.  Infrastructure errors (database, file I/O) are
never wrapped and propagate unchanged.
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(Enum):
    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_TOTAL = "INVALID_TOTAL"
    INVALID_STATUS = "INVALID_STATUS"
    INVALID_TRANSITION = "INVALID_TRANSITION"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(self, message: str, kind: ValidationErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class NotFoundError(DomainException):
    """A requested entity does not exist."""
