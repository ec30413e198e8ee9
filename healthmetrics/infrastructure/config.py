"""Configuration utilities for infrastructure layer.

Environment Variables:
    HEALTHMETRICS_LOG_LEVEL: Log level (default: WARNING)
    HEALTHMETRICS_BMR_FORMULA: 'revised' or 'original' (default: revised)
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.core.exceptions.domain_errors import InvalidConfigurationError
from ..domain.core.value_objects.bmr import BMRFormula

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """
    Runtime settings.

    Example:
        >>> settings = Settings(log_level="debug")
        >>> settings.log_level
        'DEBUG'
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="WARNING", description="Minimum log level")
    bmr_formula: BMRFormula = Field(
        default=BMRFormula.REVISED, description="Harris-Benedict coefficient set"
    )

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        """Normalize and validate log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("bmr_formula", mode="before")
    @classmethod
    def normalize_formula(cls, v: object) -> object:
        """Accept formula names case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from the environment.

    Loads ``env_file`` (default: ``.env`` in the working directory) first,
    without overriding variables already set.

    Args:
        env_file: Optional path to a dotenv file

    Returns:
        Validated Settings

    Raises:
        InvalidConfigurationError: If a variable holds an invalid value
    """
    env_path = env_file or Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    values = {}
    log_level = os.getenv("HEALTHMETRICS_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    bmr_formula = os.getenv("HEALTHMETRICS_BMR_FORMULA")
    if bmr_formula:
        values["bmr_formula"] = bmr_formula

    try:
        return Settings(**values)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid configuration: {e}") from e
