"""
Core package for HoopLog.
Contains exceptions, utilities, and common functionality.
"""

from .exceptions import *
from .error_handler import ErrorHandler, error_handler, with_error_context
from .utils import *

__all__ = [
    # Base exceptions
    "HoopLogException",
    "ErrorContext",
    "ValidationError",
    "ConfigurationError",

    # Domain exceptions
    "DomainException",
    "PlayerNotFoundError",
    "GameNotFoundError",

    # Storage exceptions
    "StorageException",
    "StorageNotFoundError",
    "StorageWriteError",
    "StorageFormatError",

    # Error handler
    "ErrorHandler",
    "error_handler",
    "with_error_context",

    # Utilities
    "LoggerFactory",
    "DataValidator",
    "DEFAULT_LOG_FORMAT"
]
