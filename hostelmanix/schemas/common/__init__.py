"""Shared schema building blocks."""

from hostelmanix.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from hostelmanix.schemas.common.response import BulkOperationResponse, MessageResponse

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "MessageResponse",
    "BulkOperationResponse",
]
