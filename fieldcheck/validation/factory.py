"""Factory functions assembling common validator trees.

Pure call graphs over the leaves and combinators: no behavior of their own.
"""
from __future__ import annotations

import re
from typing import Any, Sequence

from fieldcheck.validation import regexp
from fieldcheck.validation.combinators import CompositeValidator, OrCompositeValidator
from fieldcheck.validation.validators import (
    ContainsValidator,
    DateTimeValidator,
    FalseValidator,
    ISODateTimeValidator,
    LiteralTypeCheckValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NotEmptyValidator,
    NumberRangeValidator,
    RegExpValidator,
    Validator,
)


def to_number(value: str | None) -> float | int:
    """Parse a numeric string; anything unparsable becomes NaN."""
    if value is None:
        return float("nan")
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return float("nan")


def format_validator(
    name: str,
    value: str | None,
    min_length: int | None = None,
    max_length: int | None = None,
    format: re.Pattern[str] | str | None = None,
) -> Validator:
    """NotEmpty && [MinLength] && [MaxLength] && [RegExp].

    Optional rules are included only when their parameter is truthy, so a
    length bound of 0 is treated as "no bound".
    """
    return CompositeValidator(
        NotEmptyValidator(name, value),
        MinLengthValidator(name, value, min_length) if min_length else None,
        MaxLengthValidator(name, value, max_length) if max_length else None,
        RegExpValidator(name, value, format) if format else None,
    )


def not_empty_validator(name: str, value: str | None) -> Validator:
    return NotEmptyValidator(name, value)


def uuid_v4_check_validator(name: str, value: str | None) -> Validator:
    """NotEmpty && UUIDv4"""
    return CompositeValidator(NotEmptyValidator(name, value),
        RegExpValidator(name, value, regexp.UUID_V4))


def number_range_validator(name: str, value: str | None, min_value: float, max_value: float) -> Validator:
    """NotEmpty && digits only && within [min_value, max_value]"""
    return CompositeValidator(
        NotEmptyValidator(name, value),
        RegExpValidator(name, value, regexp.NUMBER),
        NumberRangeValidator(name, to_number(value), min_value, max_value),
    )


def length_validator(name: str, value: str | None, min_length: int, max_length: int) -> Validator:
    """NotEmpty && MinLength && MaxLength"""
    return CompositeValidator(
        NotEmptyValidator(name, value),
        MinLengthValidator(name, value, min_length),
        MaxLengthValidator(name, value, max_length),
    )


def contains_validator(name: str, value: str | None, master: Sequence[str]) -> Validator:
    """Membership test that reports instead of returning a bare bool."""
    return CompositeValidator(NotEmptyValidator(name, value), ContainsValidator(name, value, master))


def literal_check_validator(name: str, value: str | None, *literal_types: str) -> Validator:
    return LiteralTypeCheckValidator(name, value, *literal_types)


def iso_date_validator(name: str, value: str | None) -> Validator:
    return ISODateTimeValidator(name, value)


def date_time_validator(name: str, value: str | None, date_format: str) -> Validator:
    return DateTimeValidator(name, value, date_format)


def alphanumeric_validator(name: str, value: str | None, min_length: int, max_length: int) -> Validator:
    return format_validator(name, value, min_length=min_length, max_length=max_length,
        format=regexp.ALPHANUMERIC)


def number_format_validator(name: str, value: str | None, min_length: int, max_length: int) -> Validator:
    return format_validator(name, value, min_length=min_length, max_length=max_length,
        format=regexp.NUMBER)


def empty_string_validator(name: str, value: str | None) -> Validator:
    """Only the empty string passes."""
    return literal_check_validator(name, value, "")


def false_validator(name: str, value: Any = None) -> Validator:
    return FalseValidator(name, value)


def and_(*validators: Validator | None) -> Validator:
    return CompositeValidator(*validators)


def or_(*validators: Validator) -> Validator:
    return OrCompositeValidator(*validators)
