"""Combinators

``CompositeValidator`` (AND) and ``OrCompositeValidator`` (OR) implement the
same ``Validator`` capability as the leaves, so trees nest freely. Children are
evaluated sequentially, in construction order, at most once each.

The surfaced report always belongs to the child that decided the verdict. The
only synthesized reports are the defaults a combinator starts from.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable

from fieldcheck.core.config import get_settings
from fieldcheck.core.errors import ValidatorConstructionError
from fieldcheck.core.logging import get_logger
from fieldcheck.validation.report import Report, ValidationResult
from fieldcheck.validation.validators import Validator

logger = get_logger(__name__)


def _children(validators: Iterable[Validator | None], combinator: str) -> tuple[Validator, ...]:
    children = tuple(validators)
    for index, child in enumerate(children):
        if not isinstance(child, Validator):
            raise ValidatorConstructionError(
                f"{combinator} entry {index} is not a Validator: {child!r}")
    return children


def _describe(validators: tuple[Validator, ...]) -> str:
    return json.dumps([type(v).__name__ for v in validators])


def _tracing() -> bool:
    return get_settings().TRACE_EVALUATION


@dataclass(frozen=True, slots=True)
class CompositeValidator(Validator):
    """AND combinator: all validators must pass (short-circuit on first failure).

    ``None`` entries are dropped at construction so optional rules can be
    passed inline, e.g. ``CompositeValidator(required, min_rule if n else None)``.
    """
    validators: tuple[Validator, ...]

    def __init__(self, *validators: Validator | None):
        object.__setattr__(self, "validators",
            _children((v for v in validators if v is not None), "CompositeValidator"))

    def default_result(self) -> ValidationResult:
        return ValidationResult(False, Report(raw_value=_describe(self.validators), attribute="and",
            expected="Pass all validator.", actual="Passed all validator."))

    def validate(self) -> ValidationResult:
        if not self.validators:
            return self.default_result()
        trace = _tracing()
        result = None
        for index, child in enumerate(self.validators):
            if not (result := child.validate()).is_valid:
                if trace:
                    logger.debug("and_short_circuit", index=index, attribute=result.report.attribute)
                return result
        if trace:
            logger.debug("and_passed", count=len(self.validators), attribute=result.report.attribute)
        return result.as_valid()


@dataclass(frozen=True, slots=True)
class OrCompositeValidator(Validator):
    """OR combinator: at least one validator must pass.

    Every child is evaluated, even after one has passed. The first passing
    child's report is locked in; later children never displace it. Until a
    child passes the default OR report stands, or with
    ``surface_last_failure`` the report of the most recent failing child.
    """
    validators: tuple[Validator, ...]
    surface_last_failure: bool

    def __init__(self, *validators: Validator, surface_last_failure: bool = False):
        object.__setattr__(self, "validators", _children(validators, "OrCompositeValidator"))
        object.__setattr__(self, "surface_last_failure", surface_last_failure)

    def default_result(self) -> ValidationResult:
        return ValidationResult(False, Report(raw_value=_describe(self.validators), attribute="or",
            expected="Pass at least one validator.", actual="None of the validators passed."))

    def validate(self) -> ValidationResult:
        trace = _tracing()
        acc = self.default_result()
        for index, child in enumerate(self.validators):
            result = child.validate()
            if acc.is_valid:
                continue
            if result.is_valid:
                acc = result
                if trace:
                    logger.debug("or_locked", index=index, attribute=result.report.attribute)
            elif self.surface_last_failure:
                acc = result
        if trace and not acc.is_valid:
            logger.debug("or_failed", count=len(self.validators), attribute=acc.report.attribute)
        return acc
