"""
Centralized error handling for HoopLog.
Provides decorators and context managers for consistent error management.
"""

import logging
import functools
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar
from datetime import datetime

from .exceptions import (
    HoopLogException, ErrorContext, StorageException
)

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


class ErrorHandler:
    """
    Centralized error handling with error boundaries and failure tracking.
    """

    def __init__(self):
        self.failure_history: Dict[str, Dict[str, Any]] = {}

    @contextmanager
    def error_boundary(
        self,
        operation: str,
        report: Optional[Callable[[str], Any]] = None
    ) -> Iterator[None]:
        """
        Context manager that stops HoopLog errors at the boundary.

        The error is logged, recorded, and passed to ``report`` (if given) so the
        caller can show it and carry on. Anything that is not a HoopLogException
        propagates unchanged.

        Args:
            operation: Name of the operation
            report: Callback receiving the user-facing error message
        """
        try:
            yield
        except HoopLogException as e:
            if not e.context:
                e.context = ErrorContext(operation=operation)
            logger.warning(f"Error boundary triggered for {operation}: {e}")
            self._record_failure(operation, e)
            if report is not None:
                report(e.message)

    def _record_failure(self, operation: str, error: Exception):
        """Record operation failure for monitoring."""
        if operation not in self.failure_history:
            self.failure_history[operation] = {
                'failures': 0,
                'last_failure': None,
                'last_error': None
            }

        history = self.failure_history[operation]
        history['failures'] += 1
        history['last_failure'] = datetime.now()
        history['last_error'] = type(error).__name__

    def get_failure_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get failure statistics for monitoring."""
        return self.failure_history.copy()

    def reset_stats(self):
        """Reset failure statistics."""
        self.failure_history.clear()


# Global error handler instance
error_handler = ErrorHandler()


def with_error_context(operation: str):
    """
    Decorator that adds error context to exceptions.

    HoopLog exceptions get an ErrorContext if they have none; stray OSErrors
    are wrapped in a StorageException.

    Args:
        operation: Name of the operation
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HoopLogException as e:
                if not e.context:
                    e.context = ErrorContext(
                        operation=operation,
                        path=getattr(e, 'path', None),
                        parameters=kwargs or None
                    )
                raise
            except OSError as e:
                context = ErrorContext(
                    operation=operation,
                    path=getattr(e, 'filename', None),
                    parameters=kwargs or None
                )
                raise StorageException(
                    message=f"Unexpected I/O error in {operation}: {e}",
                    path=context.path,
                    context=context,
                    original_error=e
                ) from e

        return wrapper

    return decorator
