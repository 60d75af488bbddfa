"""
Application settings and configuration management.
Values can be overridden with HOOPLOG_* environment variables or a .env file.
"""
from functools import lru_cache

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings - defaults overridable from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="HOOPLOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "HoopLog"
    app_version: str = "0.1.0"

    # Persistence settings
    data_file: str = "players_data.txt"
    export_dir: str = "."

    # Report settings
    chart_points_per_star: int = 2

    # Logging settings
    log_level: str = "WARNING"

    @field_validator("chart_points_per_star")
    @classmethod
    def _positive_scale(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chart_points_per_star must be a positive integer")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    Settings are read on first use rather than at import, so a bad
    HOOPLOG_* value surfaces as a ConfigurationError the caller can report.
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        error = e.errors()[0]
        setting = ".".join(str(part) for part in error["loc"]) or "settings"
        raise ConfigurationError(setting, error["msg"], original_error=e) from e
