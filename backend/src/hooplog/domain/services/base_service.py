"""
Common response types for HoopLog domain services.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass
class ServiceResponse(Generic[T]):
    """
    Standardized response from domain services.

    Validation rejections are reported with ``success=False`` and an error
    message instead of raising, and leave the store unchanged.
    """
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: Optional[T] = None, **metadata: Any) -> 'ServiceResponse[T]':
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def rejected(cls, error: str, **metadata: Any) -> 'ServiceResponse[T]':
        return cls(success=False, error=error, metadata=metadata)


# Export commonly used classes
__all__ = [
    'ServiceResponse',
]
