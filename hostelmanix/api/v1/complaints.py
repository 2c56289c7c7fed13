"""
Complaint endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.complaint import ComplaintCreate, ComplaintResponse, ComplaintUpdate
from hostelmanix.services.complaint import ComplaintService

router = APIRouter(prefix="/complaints", tags=["Complaints"])


@router.get("", response_model=List[ComplaintResponse])
def list_complaints(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[ComplaintResponse]:
    return [ComplaintResponse.model_validate(c) for c in unwrap(ComplaintService(db).list_all())]


@router.get("/student/{student_id}", response_model=List[ComplaintResponse])
def list_student_complaints(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[ComplaintResponse]:
    complaints = unwrap(ComplaintService(db).list_for_student(student_id))
    return [ComplaintResponse.model_validate(c) for c in complaints]


@router.get("/{complaint_id}", response_model=ComplaintResponse)
def read_complaint(
    complaint_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> ComplaintResponse:
    return ComplaintResponse.model_validate(unwrap(ComplaintService(db).get_by_id(complaint_id)))


@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED)
def submit_complaint(
    payload: ComplaintCreate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> ComplaintResponse:
    return ComplaintResponse.model_validate(unwrap(ComplaintService(db).submit(auth, payload)))


@router.put("/{complaint_id}", response_model=ComplaintResponse)
def update_complaint(
    complaint_id: str,
    payload: ComplaintUpdate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> ComplaintResponse:
    complaint = unwrap(ComplaintService(db).update_complaint(admin, complaint_id, payload))
    return ComplaintResponse.model_validate(complaint)


@router.delete("/{complaint_id}", response_model=MessageResponse)
def delete_complaint(
    complaint_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(ComplaintService(db).delete_by_id(complaint_id))
    return MessageResponse(message="Complaint deleted successfully")
