"""
Service result patterns for standardized response handling.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar


class ErrorCode(str, Enum):
    """Standard error codes for service operations."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Business logic errors
    CONFLICT = "CONFLICT"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Security errors
    UNAUTHORIZED = "UNAUTHORIZED"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"

    # Data errors
    DATABASE_ERROR = "DATABASE_ERROR"


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
        metadata: Additional context, e.g. ``created`` flags or room sync warnings
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(
            is_success=True,
            data=data,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        error: ServiceError,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(
            is_success=False,
            error=error,
            message=error.message,
            metadata=metadata or {},
        )

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a validation failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.VALIDATION_ERROR,
                message=message,
                field=field,
                details=details,
            )
        )

    @classmethod
    def not_found(
        cls,
        resource_type: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a not found failure result."""
        if not message:
            message = f"{resource_type} not found"

        return cls.failure(
            ServiceError(
                code=ErrorCode.NOT_FOUND,
                message=message,
                severity=ErrorSeverity.WARNING,
                details={"resource_type": resource_type, "resource_id": resource_id},
            )
        )

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized access") -> "ServiceResult[TData]":
        """Create an authentication failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.UNAUTHORIZED,
                message=message,
                severity=ErrorSeverity.WARNING,
            )
        )

    @classmethod
    def conflict(
        cls,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a conflict failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.CONFLICT,
                message=message,
                severity=ErrorSeverity.WARNING,
                details=details,
            )
        )

    def add_metadata(self, key: str, value: Any) -> "ServiceResult[TData]":
        """Add metadata to the result."""
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value
        return self

    def __bool__(self) -> bool:
        """Allow boolean evaluation of the result."""
        return self.is_success

    def __repr__(self) -> str:
        status = "Success" if self.is_success else "Failure"
        if self.message:
            return f"ServiceResult({status}: {self.message})"
        return f"ServiceResult({status})"


__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
]
