"""
Fee endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.fee import FeeCreate, FeeResponse, FeeUpdate
from hostelmanix.services.fee import FeeService

router = APIRouter(prefix="/fees", tags=["Fees"])


@router.get("", response_model=List[FeeResponse])
def list_fees(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[FeeResponse]:
    return [FeeResponse.model_validate(f) for f in unwrap(FeeService(db).list_all())]


@router.get("/student/{student_id}", response_model=List[FeeResponse])
def list_student_fees(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[FeeResponse]:
    return [FeeResponse.model_validate(f) for f in unwrap(FeeService(db).list_for_student(student_id))]


@router.get("/{fee_id}", response_model=FeeResponse)
def read_fee(
    fee_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> FeeResponse:
    return FeeResponse.model_validate(unwrap(FeeService(db).get_by_id(fee_id)))


@router.post("", response_model=FeeResponse, status_code=status.HTTP_201_CREATED)
def create_fee(
    payload: FeeCreate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> FeeResponse:
    return FeeResponse.model_validate(unwrap(FeeService(db).create_fee(payload)))


@router.put("/{fee_id}", response_model=FeeResponse)
def update_fee(
    fee_id: str,
    payload: FeeUpdate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> FeeResponse:
    return FeeResponse.model_validate(unwrap(FeeService(db).update_fee(fee_id, payload)))


@router.delete("/{fee_id}", response_model=MessageResponse)
def delete_fee(
    fee_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(FeeService(db).delete_by_id(fee_id))
    return MessageResponse(message="Fee deleted successfully")
