"""Validation result model shared by every validator, leaf or composite."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Report:
    """Human-readable diagnostic for one verdict.

    - raw_value: the original input, stringified
    - attribute: field or combinator label
    - expected: the rule, in a fixed template consumers match on
    - actual: the observed value or outcome
    """
    raw_value: str
    attribute: str
    expected: str
    actual: str

    def to_dict(self) -> dict[str, str]:
        """Serialize with the wire keys used by printed diagnostics."""
        return {"rawValue": self.raw_value, "attribute": self.attribute,
            "expected": self.expected, "actual": self.actual}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Verdict of a validator paired with the report that explains it."""
    is_valid: bool
    report: Report

    def as_valid(self) -> ValidationResult:
        """Same report with the verdict forced to valid."""
        return self if self.is_valid else replace(self, is_valid=True)

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "report": self.report.to_dict()}
