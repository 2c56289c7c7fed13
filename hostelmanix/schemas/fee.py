"""
Fee schemas.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field

from hostelmanix.models.enums import FeeStatus
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema
from hostelmanix.schemas.summary import StudentBrief

__all__ = ["FeeCreate", "FeeUpdate", "FeeResponse"]

Amount = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class FeeCreate(BaseCreateSchema):
    student_id: str = Field(..., description="Internal id of the charged student")
    amount: Amount
    due_date: Date
    status: FeeStatus = Field(default=FeeStatus.PENDING)
    paid_date: Optional[Date] = None
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)


class FeeUpdate(BaseUpdateSchema):
    amount: Optional[Amount] = None
    due_date: Optional[Date] = None
    status: Optional[FeeStatus] = None
    paid_date: Optional[Date] = None
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)


class FeeResponse(BaseResponseSchema):
    student_id: str
    amount: Decimal
    due_date: Date
    status: FeeStatus
    paid_date: Optional[Date] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None

    student: Optional[StudentBrief] = None
