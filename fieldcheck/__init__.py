"""fieldcheck: composable field validators with structured reports."""

from fieldcheck.validation import *  # noqa: F401,F403
from fieldcheck.validation import __all__ as _validation_all
from fieldcheck.core.errors import ValidationFailedError, ValidatorConstructionError

__version__ = "0.1.0"

__all__ = [*_validation_all, "ValidationFailedError", "ValidatorConstructionError"]
