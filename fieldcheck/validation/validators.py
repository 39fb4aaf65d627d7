"""Leaf Validators

Each leaf captures a field name, the value to check and its rule parameters
at construction, then reports a verdict through ``validate()``. Leaves combine
with ``&`` (AND) and ``|`` (OR), see ``fieldcheck.validation.combinators``.

Features:
- Frozen dataclass validators for immutability
- Patterns compiled once at construction
- Fixed report templates that consumers match on verbatim
- Invalid input never raises
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence
import json
import math
import re

from fieldcheck.core.config import LengthUnit, get_settings
from fieldcheck.validation.report import Report, ValidationResult

if TYPE_CHECKING:
    from fieldcheck.validation.combinators import CompositeValidator, OrCompositeValidator

ISO_EXAMPLE = "2011-10-05T14:48:00.000+09:00"


class Validator(ABC):
    """Base class for every validator, leaf or composite.

    Validators are immutable and composable via operators:
    - & (AND): all must pass, stops at the first failure
    - | (OR): at least one must pass
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Evaluate the captured value. Never raises for invalid input."""

    def __and__(self, other: Validator) -> CompositeValidator:
        if not isinstance(other, Validator):
            return NotImplemented
        from fieldcheck.validation.combinators import CompositeValidator
        return CompositeValidator(self, other)

    def __or__(self, other: Validator) -> OrCompositeValidator:
        if not isinstance(other, Validator):
            return NotImplemented
        from fieldcheck.validation.combinators import OrCompositeValidator
        return OrCompositeValidator(self, other)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def is_number(value: Any) -> bool:
    """True for real numbers other than NaN. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return not _is_nan(value)


def is_falsy(value: Any) -> bool:
    """Falsy set: None, False, numeric zero, NaN and the empty string.

    Everything else is truthy, including empty containers.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return _is_nan(value) or value == 0
    return False


def measure_length(value: str | None, unit: LengthUnit = LengthUnit.UTF16) -> int:
    """Length of ``value`` in the given unit; an absent value has length 0."""
    if value is None:
        return 0
    if unit is LengthUnit.UTF16 and isinstance(value, str):
        # Astral characters take two UTF-16 code units, lone surrogates one
        return len(value.encode("utf-16-le", "surrogatepass")) // 2
    return len(value)


def number_text(value: Any) -> str:
    """Render a number for a report: NaN and infinities use their JS spelling."""
    if _is_nan(value):
        return "NaN"
    if isinstance(value, (float, Decimal)) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def _length_unit() -> LengthUnit:
    return get_settings().LENGTH_UNIT


# ============================================================================
# Presence Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class NotEmptyValidator(Validator):
    """Valid unless the value is absent or the empty string."""
    name: str
    value: str | None = None

    def validate(self) -> ValidationResult:
        report = Report(raw_value=str(self.value), attribute=self.name,
            expected="not empty", actual=str(self.value))
        return ValidationResult(self.value is not None and self.value != "", report)


@dataclass(frozen=True, slots=True)
class FalseValidator(Validator):
    """Valid iff the value is falsy (see ``is_falsy``)."""
    name: str
    value: Any = None

    def validate(self) -> ValidationResult:
        falsy = is_falsy(self.value)
        return ValidationResult(falsy, Report(raw_value=str(self.value), attribute=self.name,
            expected="falsy", actual="falsy" if falsy else "truthy"))


FalsyValidator = FalseValidator


# ============================================================================
# String Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class RegExpValidator(Validator):
    """Valid iff the pattern is found in the value. Absent values never match."""
    name: str
    value: str | None
    pattern: re.Pattern[str] | str

    def __post_init__(self):
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def validate(self) -> ValidationResult:
        report = Report(raw_value=str(self.value), attribute=self.name,
            expected=f"pattern: {self.pattern.pattern}", actual=str(self.value))
        is_valid = isinstance(self.value, str) and self.pattern.search(self.value) is not None
        return ValidationResult(is_valid, report)


@dataclass(frozen=True, slots=True)
class LiteralTypeCheckValidator(Validator):
    """Valid iff the value equals one of the literals. No literals means never valid."""
    name: str
    value: str | None
    literal_types: tuple[str, ...]

    def __init__(self, name: str, value: str | None, *literal_types: str):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "literal_types", tuple(literal_types))

    def validate(self) -> ValidationResult:
        report = Report(raw_value=str(self.value), attribute=self.name,
            expected=f"type: {'|'.join(self.literal_types)}", actual=str(self.value))
        return ValidationResult(any(self.value == lt for lt in self.literal_types), report)


@dataclass(frozen=True, slots=True)
class MinLengthValidator(Validator):
    """Valid iff the value has at least ``min_length`` characters."""
    name: str
    value: str | None
    min_length: int
    unit: LengthUnit = field(default_factory=_length_unit)

    def validate(self) -> ValidationResult:
        actual = measure_length(self.value, self.unit)
        return ValidationResult(self.min_length <= actual, Report(raw_value=str(self.value),
            attribute=self.name, expected=f"min length: {self.min_length}", actual=str(actual)))


@dataclass(frozen=True, slots=True)
class MaxLengthValidator(Validator):
    """Valid iff the value has at most ``max_length`` characters."""
    name: str
    value: str | None
    max_length: int
    unit: LengthUnit = field(default_factory=_length_unit)

    def validate(self) -> ValidationResult:
        actual = measure_length(self.value, self.unit)
        return ValidationResult(actual <= self.max_length, Report(raw_value=str(self.value),
            attribute=self.name, expected=f"max length: {self.max_length}", actual=str(actual)))


@dataclass(frozen=True, slots=True)
class ContainsValidator(Validator):
    """Valid iff the value is one of the ``master`` entries (exact equality)."""
    name: str
    value: str | None
    master: tuple[str, ...]

    def __init__(self, name: str, value: str | None, master: Sequence[str]):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "master", tuple(master))

    def validate(self) -> ValidationResult:
        is_valid = self.value in self.master
        master = json.dumps(list(self.master), ensure_ascii=False, separators=(",", ":"))
        return ValidationResult(is_valid, Report(raw_value=str(self.value), attribute=self.name,
            expected=f"{master} contains.", actual=json.dumps(is_valid)))


# ============================================================================
# Numeric Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class NumberRangeValidator(Validator):
    """Valid iff the value is a number within ``[min_value, max_value]``.

    The value is expected to be parsed already; NaN is never in range.
    """
    name: str
    value: float | int | Decimal | None
    min_value: float | int
    max_value: float | int

    def validate(self) -> ValidationResult:
        shown = number_text(self.value)
        report = Report(raw_value=shown, attribute=self.name,
            expected=f"between: {number_text(self.min_value)} - {number_text(self.max_value)}",
            actual=shown)
        is_valid = is_number(self.value) and self.min_value <= self.value <= self.max_value
        return ValidationResult(is_valid, report)


# ============================================================================
# Date/Time Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class DateTimeValidator(Validator):
    """Validate a value against an explicit ``strptime`` format.

    Parsing is strict: the parsed datetime must format back to the exact input,
    which rejects unpadded fields and non-ASCII digits. Directives whose
    ``strftime`` output differs from what ``strptime`` accepts only pass in
    their formatted spelling: ``%z`` needs ``+0900`` (not ``+09:00``) and
    ``%f`` needs all six digits.
    """
    name: str
    value: str | None
    date_format: str

    def validate(self) -> ValidationResult:
        report = Report(raw_value=str(self.value), attribute=self.name,
            expected=f"dateFormat: {self.date_format}", actual=str(self.value))
        return ValidationResult(self._parses(), report)

    def _parses(self) -> bool:
        if not isinstance(self.value, str):
            return False
        try:
            parsed = datetime.strptime(self.value, self.date_format)
        except ValueError:
            return False
        return parsed.strftime(self.date_format) == self.value


DateTimeFormatValidator = DateTimeValidator


@dataclass(frozen=True, slots=True)
class ISODateTimeValidator(Validator):
    """Validate ISO8601 datetime format.

    The empty string is accepted so optional date fields can be left blank;
    an absent value is not.
    """
    name: str
    value: str | None = None

    def validate(self) -> ValidationResult:
        report = Report(raw_value=str(self.value), attribute=self.name,
            expected=f"valid ISO string. ex: {ISO_EXAMPLE}", actual=str(self.value))
        if self.value is None:
            return ValidationResult(False, report)
        if self.value == "":
            return ValidationResult(True, report)
        return ValidationResult(is_iso_datetime(self.value), report)


_ISO_YEAR = re.compile(r"[0-9]{4}")
_ISO_YEAR_MONTH = re.compile(r"[0-9]{4}-[0-9]{2}")
_ISO_ORDINAL = re.compile(r"([0-9]{4})-[0-9]{3}")


def _check_iso_date(text: str) -> None:
    if _ISO_YEAR.fullmatch(text):
        return
    if _ISO_YEAR_MONTH.fullmatch(text):
        datetime.strptime(text, "%Y-%m")
        return
    ordinal = _ISO_ORDINAL.fullmatch(text)
    if ordinal:
        # %j overflows into the next year instead of failing
        if datetime.strptime(text, "%Y-%j").year != int(ordinal.group(1)):
            raise ValueError(f"day of year out of range: {text}")
        return
    date.fromisoformat(text)


def is_iso_datetime(value: Any) -> bool:
    """True for ISO-8601 dates and datetimes.

    Accepts calendar (``2016-05-25``, ``20160525``), reduced (``2016``,
    ``2016-05``), ordinal (``2016-200``) and week (``2016-W21-3``) dates,
    optionally followed by ``T`` and a time with an optional offset.
    """
    if not isinstance(value, str):
        return False
    date_text, sep, time_text = value.partition("T")
    try:
        _check_iso_date(date_text)
        if sep:
            time.fromisoformat(time_text.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True
