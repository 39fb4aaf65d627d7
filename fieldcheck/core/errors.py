"""Error taxonomy

An invalid value is never an exception: validators express it through
``ValidationResult.is_valid``. Exceptions are reserved for misuse of the API
(building a combinator from something that is not a validator) and for callers
that explicitly ask for invalid results to be raised.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from fieldcheck.validation.report import Report


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors
    E9xxx: Internal errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9004_INVALID_CONSTRUCTION = 9004

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if 2000 <= self.value < 3000:
            return "validation"
        return "internal"


class FieldcheckError(Exception):
    """Base error carrying a typed code."""

    code: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC

    def __init__(self, message: str, *, code: ErrorCode | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "category": self.code.category,
                "message": self.message,
            }
        }


class ValidatorConstructionError(FieldcheckError, TypeError):
    """A combinator was given an entry that cannot be validated."""

    code = ErrorCode.E9004_INVALID_CONSTRUCTION


class ValidationFailedError(FieldcheckError):
    """Raised on request when one or more fields are invalid.

    Carries the report of every failing field so the caller can surface them
    without re-running validation.
    """

    code = ErrorCode.E2000_VALIDATION_GENERIC

    def __init__(self, reports: Sequence[Report], message: str = "Validation failed"):
        super().__init__(message)
        self.reports = list(reports)

    def __str__(self) -> str:
        if len(self.reports) == 1:
            report = self.reports[0]
            return f"{report.attribute}: expected {report.expected}, got {report.actual}"
        return f"{self.message} ({len(self.reports)} errors)"

    @property
    def attributes(self) -> list[str]:
        return [r.attribute for r in self.reports]

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["error"]["error_count"] = len(self.reports)
        payload["error"]["errors"] = [r.to_dict() for r in self.reports]
        return payload
