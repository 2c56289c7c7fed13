"""
Leave application endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.leave import LeaveCreate, LeaveResponse, LeaveReview
from hostelmanix.services.leave import LeaveService

router = APIRouter(prefix="/leaves", tags=["Leaves"])


@router.get("", response_model=List[LeaveResponse])
def list_leaves(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[LeaveResponse]:
    return [LeaveResponse.model_validate(l) for l in unwrap(LeaveService(db).list_all())]


@router.get("/student/{student_id}", response_model=List[LeaveResponse])
def list_student_leaves(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[LeaveResponse]:
    leaves = unwrap(LeaveService(db).list_for_student(student_id))
    return [LeaveResponse.model_validate(l) for l in leaves]


@router.get("/{leave_id}", response_model=LeaveResponse)
def read_leave(
    leave_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> LeaveResponse:
    return LeaveResponse.model_validate(unwrap(LeaveService(db).get_by_id(leave_id)))


@router.post("", response_model=LeaveResponse, status_code=status.HTTP_201_CREATED)
def apply_leave(
    payload: LeaveCreate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> LeaveResponse:
    return LeaveResponse.model_validate(unwrap(LeaveService(db).apply(auth, payload)))


@router.put("/{leave_id}", response_model=LeaveResponse)
def review_leave(
    leave_id: str,
    payload: LeaveReview,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> LeaveResponse:
    """Approve or reject a leave."""
    return LeaveResponse.model_validate(unwrap(LeaveService(db).review(admin, leave_id, payload)))


@router.delete("/{leave_id}", response_model=MessageResponse)
def delete_leave(
    leave_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MessageResponse:
    unwrap(LeaveService(db).delete_by_id(leave_id))
    return MessageResponse(message="Leave deleted successfully")
