"""Postal code: exactly five or exactly seven characters."""
from fieldcheck.validation.combinators import CompositeValidator, OrCompositeValidator
from fieldcheck.validation.validators import MaxLengthValidator, MinLengthValidator, Validator

KEY = "postal_code"


def postal_code_validator(value: str | None) -> Validator:
    five = CompositeValidator(MinLengthValidator(KEY, value, 5), MaxLengthValidator(KEY, value, 5))
    seven = CompositeValidator(MinLengthValidator(KEY, value, 7), MaxLengthValidator(KEY, value, 7))
    return OrCompositeValidator(five, seven)
