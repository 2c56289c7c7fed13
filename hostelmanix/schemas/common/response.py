"""
Standard API response wrappers.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from hostelmanix.schemas.common.base import BaseSchema

__all__ = [
    "MessageResponse",
    "BulkItemResult",
    "BulkOperationResponse",
]


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str = Field(..., description="Response message")
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional details",
    )


class BulkItemResult(BaseSchema):
    """Outcome of one item inside a bulk operation."""

    key: str = Field(..., description="Identifier the item was submitted with")
    success: bool
    action: Optional[str] = Field(default=None, description="created or updated")
    record_id: Optional[str] = None
    error: Optional[str] = None


class BulkOperationResponse(BaseSchema):
    """Bulk operation response."""

    message: str = Field(..., description="Operation summary message")
    total: int = Field(..., ge=0, description="Total items submitted")
    successful: int = Field(..., ge=0, description="Successfully processed items")
    failed: int = Field(..., ge=0, description="Failed items")
    results: List[BulkItemResult] = Field(default_factory=list)
