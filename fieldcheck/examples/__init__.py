"""Worked examples built on the public validators."""
from fieldcheck.examples.postal_code import postal_code_validator
from fieldcheck.examples.user_domain import LoginStatus, Name, UserDomainObject

__all__ = ["postal_code_validator", "LoginStatus", "Name", "UserDomainObject"]
