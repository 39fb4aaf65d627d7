"""Example domain object validated field by field."""
from __future__ import annotations

from typing import ClassVar

from fieldcheck.validation.checkable import Checkable, CheckableModel
from fieldcheck.validation.factory import contains_validator, length_validator


class Name(Checkable):
    key: ClassVar[str] = "name"

    def __init__(self, value: str | None):
        super().__init__(length_validator(self.key, value, 1, 100))
        self.value = value


class LoginStatus(Checkable):
    key: ClassVar[str] = "login_status"
    possible_values: ClassVar[tuple[str, ...]] = ("LoggedIn", "Logout")

    def __init__(self, value: str | None):
        super().__init__(contains_validator(self.key, value, self.possible_values))
        self.value = value


class UserDomainObject(CheckableModel):
    def __init__(self, name: Name, status: LoginStatus):
        self.name = name
        self.status = status

    @classmethod
    def of(cls, *, name: str | None, status: str | None) -> UserDomainObject:
        return cls(Name(name), LoginStatus(status))
