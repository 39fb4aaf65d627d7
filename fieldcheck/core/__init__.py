# Core module exports
from fieldcheck.core.config import LengthUnit, Settings, get_settings
from fieldcheck.core.errors import (
    ErrorCode,
    FieldcheckError,
    ValidationFailedError,
    ValidatorConstructionError,
)
from fieldcheck.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
