"""Composable Validation

Leaf validators check one value against one rule; ``CompositeValidator`` (AND)
and ``OrCompositeValidator`` (OR) combine them into trees evaluated once at the
root. Every validator returns a ``ValidationResult`` whose ``Report`` names
the field and rule that decided the verdict.

Usage:
    from fieldcheck.validation import (
        CompositeValidator, OrCompositeValidator,
        MinLengthValidator, MaxLengthValidator,
    )

    five = CompositeValidator(
        MinLengthValidator("postal_code", value, 5),
        MaxLengthValidator("postal_code", value, 5),
    )
    result = (five | seven).validate()
    if not result.is_valid:
        print(result.report.to_dict())
"""

from .report import Report, ValidationResult

from .validators import (
    Validator,
    # Presence validators
    NotEmptyValidator,
    FalseValidator,
    FalsyValidator,
    # String validators
    RegExpValidator,
    LiteralTypeCheckValidator,
    MinLengthValidator,
    MaxLengthValidator,
    ContainsValidator,
    # Numeric validators
    NumberRangeValidator,
    # Date/time validators
    DateTimeValidator,
    DateTimeFormatValidator,
    ISODateTimeValidator,
    # Predicates
    is_falsy,
    is_number,
    measure_length,
)

from .combinators import CompositeValidator, OrCompositeValidator

from .checkable import Checkable, CheckableModel

from . import factory, regexp

__all__ = [
    "Report",
    "ValidationResult",
    "Validator",
    "NotEmptyValidator",
    "FalseValidator",
    "FalsyValidator",
    "RegExpValidator",
    "LiteralTypeCheckValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "ContainsValidator",
    "NumberRangeValidator",
    "DateTimeValidator",
    "DateTimeFormatValidator",
    "ISODateTimeValidator",
    "is_falsy",
    "is_number",
    "measure_length",
    "CompositeValidator",
    "OrCompositeValidator",
    "Checkable",
    "CheckableModel",
    "factory",
    "regexp",
]
