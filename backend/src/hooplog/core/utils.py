"""
Core utilities for HoopLog.
Common functionality used across the entire application.
"""

import logging
from typing import Any, Optional

from .exceptions import ValidationError

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggerFactory:
    """Centralized logger configuration."""

    _configured = False

    @classmethod
    def setup_logging(cls, level: Optional[str] = None, format_string: Optional[str] = None):
        """Setup application-wide logging configuration."""
        if cls._configured:
            return

        if level is None:
            from ..config.settings import get_settings
            level = get_settings().log_level

        if format_string is None:
            format_string = DEFAULT_LOG_FORMAT

        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.WARNING),
            format=format_string,
            handlers=[logging.StreamHandler()]
        )
        cls._configured = True

    @classmethod
    def set_level(cls, level: str):
        """Change the root log level after setup (e.g. from a --log-level flag)."""
        cls.setup_logging(level)
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a configured logger instance."""
        LoggerFactory.setup_logging()
        return logging.getLogger(name)


class DataValidator:
    """Common data validation utilities."""

    @staticmethod
    def parse_int(value: Any, name: str) -> int:
        """Parse an integer from user or file input."""
        if isinstance(value, bool):
            raise ValidationError(name, value, "must be an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ValidationError(name, value, "must be an integer")

    @staticmethod
    def validate_player_name(name: Any) -> str:
        """Validate a player name: non-empty, single line."""
        if not isinstance(name, str) or not name:
            raise ValidationError("name", name, "player name cannot be empty")
        if "\n" in name or "\r" in name:
            raise ValidationError("name", name, "player name must be a single line")
        if not DataValidator.is_utf8_encodable(name):
            raise ValidationError("name", name, "player name must be valid UTF-8 text")
        return name

    @staticmethod
    def validate_game_date(date: Any) -> str:
        """Validate a game date: one non-empty token with no whitespace, stripped."""
        if not isinstance(date, str) or not date.strip():
            raise ValidationError("date", date, "date cannot be empty")
        date = date.strip()
        if any(ch.isspace() for ch in date):
            raise ValidationError("date", date, "date cannot contain spaces")
        if not DataValidator.is_utf8_encodable(date):
            raise ValidationError("date", date, "date must be valid UTF-8 text")
        return date

    @staticmethod
    def is_utf8_encodable(text: str) -> bool:
        """False for strings holding lone surrogates (undecodable terminal input)."""
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    @staticmethod
    def validate_position(number: Any, count: int, name: str = "number") -> int:
        """Validate a 1-based position against a sequence length."""
        number = DataValidator.parse_int(number, name)
        if number < 1 or number > count:
            raise ValidationError(name, number, f"must be between 1 and {count}")
        return number


# Export commonly used utilities
__all__ = [
    'LoggerFactory',
    'DataValidator',
    'DEFAULT_LOG_FORMAT'
]
