"""Tests for the example domain objects and the CLI."""

import json

import pytest

from fieldcheck.cli import main
from fieldcheck.core.errors import ErrorCode, ValidationFailedError
from fieldcheck.examples import LoginStatus, Name, UserDomainObject, postal_code_validator

OR_FAILURE = {
    "attribute": "or",
    "expected": "Pass at least one validator.",
    "actual": "None of the validators passed.",
}


class TestPostalCode:
    """Exactly five or exactly seven characters."""

    @pytest.mark.parametrize(
        "value, is_valid, report",
        [
            ("", False, OR_FAILURE),
            ("1", False, OR_FAILURE),
            ("12", False, OR_FAILURE),
            ("123", False, OR_FAILURE),
            ("1234", False, OR_FAILURE),
            ("12345", True, {"attribute": "postal_code", "expected": "max length: 5", "actual": "5"}),
            ("123456", False, OR_FAILURE),
            ("1234567", True, {"attribute": "postal_code", "expected": "max length: 7", "actual": "7"}),
            ("12345678", False, OR_FAILURE),
            ("123456789", False, OR_FAILURE),
            ("1234567899", False, OR_FAILURE),
        ],
    )
    def test_five_or_seven_characters(self, value: str, is_valid: bool, report: dict) -> None:
        result = postal_code_validator(value).validate()

        assert result.is_valid is is_valid
        assert result.report.attribute == report["attribute"]
        assert result.report.expected == report["expected"]
        assert result.report.actual == report["actual"]
        assert isinstance(result.report.raw_value, str)


class TestUserDomainObject:
    def test_valid_user(self) -> None:
        user = UserDomainObject.of(name="waddy", status="LoggedIn")

        assert user.is_valid()
        assert [r.is_valid for r in user.validate_all()] == [True, True]
        user.ensure_valid()

    def test_results_follow_attribute_order(self) -> None:
        user = UserDomainObject.of(name="", status="")

        assert [r.report.attribute for r in user.validate_all()] == [Name.key, LoginStatus.key]

    def test_empty_status_is_reported(self) -> None:
        user = UserDomainObject.of(name="waddy", status="")

        reports = user.invalid_reports()

        assert len(reports) == 1
        assert reports[0].attribute == "login_status"
        assert reports[0].expected == "not empty"

    def test_unknown_status_is_reported(self) -> None:
        reports = UserDomainObject.of(name="waddy", status="Away").invalid_reports()

        assert reports[0].expected == '["LoggedIn","Logout"] contains.'
        assert reports[0].actual == "false"

    def test_name_too_long(self) -> None:
        reports = UserDomainObject.of(name="x" * 101, status="Logout").invalid_reports()

        assert [(r.attribute, r.expected) for r in reports] == [("name", "max length: 100")]

    def test_ensure_valid_raises_with_reports(self) -> None:
        user = UserDomainObject.of(name="", status="Away")

        with pytest.raises(ValidationFailedError) as exc_info:
            user.ensure_valid()

        error = exc_info.value
        assert error.attributes == ["name", "login_status"]
        assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
        payload = error.to_dict()["error"]
        assert payload["error_count"] == 2
        assert payload["category"] == "validation"
        assert payload["errors"][0]["rawValue"] == ""

    def test_single_failure_message(self) -> None:
        with pytest.raises(ValidationFailedError, match="login_status: expected not empty"):
            UserDomainObject.of(name="waddy", status="").ensure_valid()


class TestCli:
    def test_valid_postal_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["postal-code", "1234567"]) == 0

        assert capsys.readouterr().out.strip() == "ok"

    def test_invalid_postal_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["postal-code", "123"]) == 1

        err = capsys.readouterr().err
        reports = json.loads(err.strip().splitlines()[-1])
        assert reports == [{
            "rawValue": reports[0]["rawValue"],
            "attribute": "or",
            "expected": "Pass at least one validator.",
            "actual": "None of the validators passed.",
        }]

    def test_invalid_user(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["user", "--name", "waddy", "--status", ""]) == 1

        reports = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert [r["attribute"] for r in reports] == ["login_status"]

    def test_valid_user(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json-logs", "user", "--name", "waddy", "--status", "Logout"]) == 0

        assert capsys.readouterr().out.strip().splitlines()[-1] == "ok"

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
