"""
Translation of service results into HTTP outcomes.
"""

from typing import Optional, TypeVar

from fastapi import Response, status

from hostelmanix.core.exceptions import (
    AuthenticationError,
    BaseAppException,
    DatabaseError,
    DuplicateEntryError,
    ErrorCode as AppErrorCode,
    ResourceNotFoundError,
    RoomNotFoundError,
    StudentNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from hostelmanix.services.base.service_result import ErrorCode, ServiceResult
from hostelmanix.services.student import ROOM_SYNC_WARNING

T = TypeVar("T")

ROOM_SYNC_HEADER = "X-Room-Sync-Warning"

NOT_FOUND_ERRORS = {
    "Room": RoomNotFoundError,
    "Student": StudentNotFoundError,
    "User": UserNotFoundError,
}


def to_exception(result: ServiceResult) -> BaseAppException:
    """Application exception matching a failed service result."""
    error = result.error
    message = error.message if error else "Operation failed"
    details = (error.details if error else None) or {}
    code = error.code if error else ErrorCode.INTERNAL_ERROR

    if code == ErrorCode.NOT_FOUND:
        resource_type = details.get("resource_type") or "Resource"
        resource_id = details.get("resource_id")
        if resource_type in NOT_FOUND_ERRORS:
            return NOT_FOUND_ERRORS[resource_type](resource_id, message=message)
        return ResourceNotFoundError(resource_type, resource_id, message=message)
    if code == ErrorCode.VALIDATION_ERROR:
        field_errors = {error.field: [message]} if error and error.field else None
        return ValidationError(message, field_errors=field_errors)
    if code == ErrorCode.CONFLICT:
        exc = DuplicateEntryError(message)
        exc.details = details
        return exc
    if code in (ErrorCode.UNAUTHORIZED, ErrorCode.AUTHENTICATION_FAILED):
        return AuthenticationError(message)
    if code == ErrorCode.DATABASE_ERROR:
        return DatabaseError(message)
    return BaseAppException(message, AppErrorCode.OPERATION_FAILED, details, status.HTTP_500_INTERNAL_SERVER_ERROR)


def unwrap(result: ServiceResult[T], response: Optional[Response] = None) -> T:
    """
    Data of a successful result, or raise the matching HTTP error.

    When ``response`` is given, a room sync warning on the result is
    exposed through the ``X-Room-Sync-Warning`` header.
    """
    if not result.is_success:
        raise to_exception(result)

    warning = (result.metadata or {}).get(ROOM_SYNC_WARNING)
    if warning and response is not None:
        response.headers[ROOM_SYNC_HEADER] = warning.get("message", "room sync failed")
    return result.data
