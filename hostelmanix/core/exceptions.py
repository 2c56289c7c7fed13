"""
Custom Exceptions for the Hostel Management API

This module defines custom exception classes used throughout the application
for better error handling and debugging.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Resource specific errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class UserNotFoundError(ResourceNotFoundError):
    """Exception raised when a user is not found"""

    def __init__(self, user_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("User", user_id, message)
        self.error_code = ErrorCode.USER_NOT_FOUND


class StudentNotFoundError(ResourceNotFoundError):
    """Exception raised when a student is not found"""

    def __init__(self, student_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Student", student_id, message)
        self.error_code = ErrorCode.STUDENT_NOT_FOUND


class RoomNotFoundError(ResourceNotFoundError):
    """Exception raised when a room is not found"""

    def __init__(self, room_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Room", room_id, message)
        self.error_code = ErrorCode.ROOM_NOT_FOUND


# ========================================
# Authentication & Authorization Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when authorization fails"""

    def __init__(
        self,
        message: str = "Access denied",
        required_role: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.AUTHORIZATION_FAILED
    ):
        details = {"required_role": required_role} if required_role else {}
        super().__init__(message, error_code, details, 403)


class TokenExpiredError(AuthenticationError):
    """Exception raised when a token has expired"""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED)


class InvalidTokenError(AuthenticationError):
    """Exception raised when a token is invalid"""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, ErrorCode.TOKEN_INVALID)


# ========================================
# Database Exceptions
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised for database errors"""

    def __init__(
        self,
        message: str = "Database operation failed",
        table: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        status_code: int = 500
    ):
        details = {"table": table} if table else {}
        super().__init__(message, error_code, details, status_code)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique key is already taken"""

    def __init__(self, message: str = "Duplicate entry", table: Optional[str] = None):
        super().__init__(message, table=table, error_code=ErrorCode.DUPLICATE_ENTRY, status_code=409)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'ResourceNotFoundError',
    'UserNotFoundError',
    'StudentNotFoundError',
    'RoomNotFoundError',
    'AuthenticationError',
    'AuthorizationError',
    'TokenExpiredError',
    'InvalidTokenError',
    'DatabaseError',
    'DuplicateEntryError',
]
