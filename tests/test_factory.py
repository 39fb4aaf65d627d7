"""Tests for the factory functions and shared patterns."""

import math

import pytest

from fieldcheck.validation import factory, regexp
from fieldcheck.validation.combinators import CompositeValidator, OrCompositeValidator
from fieldcheck.validation.report import Report, ValidationResult

HTML_COLOR_EXPECTED = f"pattern: {regexp.HTML_COLOR.pattern}"


class TestFormatValidator:
    @pytest.mark.parametrize(
        "value, is_valid, expected",
        [
            ("#FFF", True, HTML_COLOR_EXPECTED),
            ("#000000", True, HTML_COLOR_EXPECTED),
            ("#ffffff", True, HTML_COLOR_EXPECTED),
            ("#FFFF", True, HTML_COLOR_EXPECTED),
            ("rgb(255, 0, 0, 0.3)", True, HTML_COLOR_EXPECTED),
            ("rgba(255, 0, 0, 3)", True, HTML_COLOR_EXPECTED),
            ("hsl(120, 100%, 500%)", True, HTML_COLOR_EXPECTED),
            ("hsla(120, 100%, 75%, 40)", True, HTML_COLOR_EXPECTED),
            ("aliceblue", True, HTML_COLOR_EXPECTED),
            ("tokyo", False, HTML_COLOR_EXPECTED),
            ("###", False, HTML_COLOR_EXPECTED),
            ("0x123", False, HTML_COLOR_EXPECTED),
            ("hslv(120,  60%, 70%, 2)", False, HTML_COLOR_EXPECTED),
            ("rgb(0, 0, #AAA)", False, HTML_COLOR_EXPECTED),
            ("", False, "not empty"),
        ],
    )
    def test_html_color(self, value: str, is_valid: bool, expected: str) -> None:
        validator = factory.format_validator("htmlColor", value, format=regexp.HTML_COLOR)

        assert validator.validate() == ValidationResult(
            is_valid, Report(raw_value=value, attribute="htmlColor", expected=expected, actual=value)
        )

    def test_optional_rules_are_skipped(self) -> None:
        validator = factory.format_validator("code", "abc")

        assert isinstance(validator, CompositeValidator)
        assert len(validator.validators) == 1

    def test_zero_min_length_is_treated_as_unset(self) -> None:
        validator = factory.format_validator("code", "abc", min_length=0, max_length=5)

        assert len(validator.validators) == 2
        assert validator.validate().report.expected == "max length: 5"

    def test_accepts_string_pattern(self) -> None:
        result = factory.format_validator("code", "abc-1", format=r"^[a-z]+-\d$").validate()

        assert result.is_valid


class TestPresetFactories:
    def test_alphanumeric_validator(self) -> None:
        assert factory.alphanumeric_validator("user_id", "abc123", 3, 10).validate().is_valid

        result = factory.alphanumeric_validator("user_id", "abc-123", 3, 10).validate()
        assert not result.is_valid
        assert result.report.expected == f"pattern: {regexp.ALPHANUMERIC.pattern}"

    def test_number_format_validator_checks_length_first(self) -> None:
        result = factory.number_format_validator("zip", "12", 3, 7).validate()

        assert not result.is_valid
        assert result.report.expected == "min length: 3"

    @pytest.mark.parametrize(
        "value, is_valid, expected",
        [
            ("30", True, "between: 0 - 120"),
            ("121", False, "between: 0 - 120"),
            ("3a", False, f"pattern: {regexp.NUMBER.pattern}"),
            ("", False, "not empty"),
            (None, False, "not empty"),
        ],
    )
    def test_number_range_validator(self, value, is_valid: bool, expected: str) -> None:
        result = factory.number_range_validator("age", value, 0, 120).validate()

        assert result.is_valid is is_valid
        assert result.report.expected == expected

    def test_length_validator(self) -> None:
        assert factory.length_validator("name", "waddy", 1, 100).validate() == ValidationResult(
            True, Report(raw_value="waddy", attribute="name", expected="max length: 100", actual="5")
        )
        assert factory.length_validator("name", "", 1, 100).validate().report.expected == "not empty"

    def test_uuid_v4_check_validator(self) -> None:
        assert factory.uuid_v4_check_validator("id", "0f8fad5b-d9cb-469f-a165-70867728950e").validate().is_valid
        assert not factory.uuid_v4_check_validator("id", "0F8FAD5B").validate().is_valid

    def test_contains_validator(self) -> None:
        master = ["LoggedIn", "Logout"]

        assert factory.contains_validator("status", "LoggedIn", master).validate().is_valid
        assert factory.contains_validator("status", "", master).validate().report.expected == "not empty"
        assert factory.contains_validator("status", "Guest", master).validate().report.actual == "false"

    def test_literal_and_empty_string_validators(self) -> None:
        assert factory.literal_check_validator("kind", "a", "a", "b").validate().is_valid
        assert factory.empty_string_validator("memo", "").validate().is_valid

        result = factory.empty_string_validator("memo", "text").validate()
        assert not result.is_valid
        assert result.report.expected == "type: "

    def test_date_validators(self) -> None:
        assert factory.iso_date_validator("at", "").validate().is_valid
        assert factory.date_time_validator("at", "20200131", "%Y%m%d").validate().is_valid
        assert factory.not_empty_validator("at", None).validate().is_valid is False


class TestCombinatorShortcuts:
    @pytest.mark.parametrize(
        "first, second, is_valid, attribute, raw_value",
        [
            (("string", ""), ("number", 0), True, "number", "0"),
            (("string", None), ("string", None), True, "string", "None"),
            (("number", float("nan")), ("number", None), True, "number", "None"),
            (("boolean", False), ("boolean", None), True, "boolean", "None"),
            (("string", None), ("object", {}), False, "object", "{}"),
            (("array", []), ("string", "a"), False, "array", "[]"),
        ],
    )
    def test_and_of_false_validators(self, first, second, is_valid, attribute, raw_value) -> None:
        sut = factory.and_(factory.false_validator(*first), factory.false_validator(*second))

        assert sut.validate() == ValidationResult(is_valid, Report(raw_value=raw_value,
            attribute=attribute, expected="falsy", actual="falsy" if is_valid else "truthy"))

    def test_or_builds_or_composite(self) -> None:
        sut = factory.or_(factory.false_validator("a", 1), factory.false_validator("b", 0))

        assert isinstance(sut, OrCompositeValidator)
        assert sut.validate().report.attribute == "b"


class TestToNumber:
    def test_integers_and_floats(self) -> None:
        assert factory.to_number("42") == 42
        assert factory.to_number(" 42 ") == 42
        assert factory.to_number("4.5") == 4.5

    @pytest.mark.parametrize("value", [None, "", "abc", "4.5.6"])
    def test_unparsable_is_nan(self, value) -> None:
        assert math.isnan(factory.to_number(value))
