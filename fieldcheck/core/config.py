from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings


class LengthUnit(str, Enum):
    """Character-counting unit for the length validators."""
    UTF16 = "utf16"
    CODEPOINT = "codepoint"


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for machine-readable output, False for colored console

    # Validation
    LENGTH_UNIT: LengthUnit = LengthUnit.UTF16
    TRACE_EVALUATION: bool = False  # Emit debug events from the combinators

    class Config:
        env_prefix = "FIELDCHECK_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
