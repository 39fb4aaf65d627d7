"""Domain objects that carry their own validation.

Usage:
    class Name(Checkable):
        key = "name"

        def __init__(self, value: str):
            super().__init__(length_validator(self.key, value, 1, 100))
            self.value = value

    class User(CheckableModel):
        def __init__(self, name: str):
            self.name = Name(name)

    User("waddy").ensure_valid()
"""
from __future__ import annotations

from fieldcheck.core.errors import ValidationFailedError
from fieldcheck.core.logging import get_logger
from fieldcheck.validation.report import Report, ValidationResult
from fieldcheck.validation.validators import Validator

logger = get_logger(__name__)


class Checkable:
    """A domain value paired with the validator tree that checks it."""

    def __init__(self, validator: Validator):
        self.validator = validator

    def check(self) -> ValidationResult:
        return self.validator.validate()


class CheckableModel:
    """Domain object whose ``Checkable`` attributes are validated together.

    Attributes are checked in assignment order; non-``Checkable`` attributes
    are ignored.
    """

    def checkables(self) -> list[Checkable]:
        return [v for v in vars(self).values() if isinstance(v, Checkable)]

    def validate_all(self) -> list[ValidationResult]:
        return [c.check() for c in self.checkables()]

    def invalid_reports(self) -> list[Report]:
        return [r.report for r in self.validate_all() if not r.is_valid]

    def is_valid(self) -> bool:
        return not self.invalid_reports()

    def ensure_valid(self) -> None:
        """Raise ValidationFailedError carrying every failing report."""
        if reports := self.invalid_reports():
            logger.warning("validation_failed", model=type(self).__name__,
                attributes=[r.attribute for r in reports])
            raise ValidationFailedError(reports)
