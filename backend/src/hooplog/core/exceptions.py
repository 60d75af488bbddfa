"""
Exception hierarchy for the HoopLog stats tracker.
Provides specific exceptions for different error scenarios with context.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ErrorContext:
    """Context information for errors."""
    operation: str
    path: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error context to dictionary."""
        return {
            'operation': self.operation,
            'path': self.path,
            'parameters': self.parameters,
            'timestamp': self.timestamp.isoformat(),
        }


class HoopLogException(Exception):
    """
    Base exception class for all HoopLog-specific errors.
    Provides rich context and error categorization.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.original_error = original_error
        self.error_code = error_code
        self.recoverable = recoverable
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'recoverable': self.recoverable,
            'timestamp': self.timestamp.isoformat(),
            'context': self.context.to_dict() if self.context else None,
            'original_error': str(self.original_error) if self.original_error else None
        }

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        base_msg = self.message
        if self.error_code:
            base_msg += f" [Code: {self.error_code}]"
        return base_msg


# =============================================================================
# Validation and Configuration Exceptions
# =============================================================================

class ValidationError(HoopLogException):
    """Raised when input validation fails."""

    def __init__(
        self,
        field: str,
        value: Any,
        constraint: str,
        context: Optional[ErrorContext] = None
    ):
        message = f"Validation failed for field '{field}': {constraint}. Got: {value!r}"
        super().__init__(
            message=message,
            context=context,
            error_code="VALIDATION_ERROR",
            recoverable=True
        )
        self.field = field
        self.value = value
        self.constraint = constraint


class ConfigurationError(HoopLogException):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        setting: str,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        full_message = f"Configuration error for '{setting}': {message}"
        super().__init__(
            message=full_message,
            context=context,
            original_error=original_error,
            error_code="CONFIG_ERROR",
            recoverable=False
        )
        self.setting = setting


# =============================================================================
# Domain-Level Exceptions
# =============================================================================

class DomainException(HoopLogException):
    """Base class for domain logic errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "DOMAIN_ERROR",
        recoverable: bool = True
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code=error_code,
            recoverable=recoverable
        )


class PlayerNotFoundError(DomainException):
    """Raised when a player cannot be found."""

    def __init__(
        self,
        index: Optional[int] = None,
        player_name: Optional[str] = None,
        context: Optional[ErrorContext] = None
    ):
        if player_name:
            message = f"Player '{player_name}' not found"
        elif index is not None:
            message = f"No player at position {index + 1}"
        else:
            message = "Player not found"

        super().__init__(
            message=message,
            context=context,
            error_code="PLAYER_NOT_FOUND",
            recoverable=True
        )
        self.index = index
        self.player_name = player_name


class GameNotFoundError(DomainException):
    """Raised when a game number is outside a player's game list."""

    def __init__(
        self,
        number: int,
        game_count: int,
        context: Optional[ErrorContext] = None
    ):
        if game_count:
            message = f"Game number {number} out of range (1-{game_count})"
        else:
            message = f"Game number {number} out of range (no games recorded)"

        super().__init__(
            message=message,
            context=context,
            error_code="GAME_NOT_FOUND",
            recoverable=True
        )
        self.number = number
        self.game_count = game_count


# =============================================================================
# Storage-Related Exceptions
# =============================================================================

class StorageException(HoopLogException):
    """Base class for save/load/export errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "STORAGE_ERROR",
        recoverable: bool = True
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code=error_code,
            recoverable=recoverable
        )
        self.path = path


class StorageNotFoundError(StorageException):
    """Raised when a data file does not exist or cannot be opened for reading."""

    def __init__(
        self,
        path: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message=f"No saved file '{path}' found",
            path=path,
            context=context,
            original_error=original_error,
            error_code="STORAGE_NOT_FOUND"
        )


class StorageWriteError(StorageException):
    """Raised when a destination cannot be opened for writing."""

    def __init__(
        self,
        path: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        message = f"Error opening '{path}' for writing"
        if original_error:
            message += f": {original_error}"
        super().__init__(
            message=message,
            path=path,
            context=context,
            original_error=original_error,
            error_code="STORAGE_WRITE_ERROR"
        )


class StorageFormatError(StorageException):
    """Raised when stored data is malformed or a store cannot be encoded."""

    def __init__(
        self,
        path: Optional[str],
        reason: str,
        line_number: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        location = f"'{path}'" if path else "data"
        if line_number is not None:
            location += f" line {line_number}"
        super().__init__(
            message=f"Malformed {location}: {reason}",
            path=path,
            context=context,
            original_error=original_error,
            error_code="STORAGE_FORMAT_ERROR"
        )
        self.reason = reason
        self.line_number = line_number
