"""
Attendance endpoints.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.attendance import (
    AttendanceBulkCreate,
    AttendanceCreate,
    AttendanceResponse,
    AttendanceStats,
    AttendanceUpdate,
)
from hostelmanix.schemas.common.response import BulkOperationResponse, MessageResponse
from hostelmanix.services.attendance import AttendanceService

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.get("", response_model=List[AttendanceResponse])
def list_attendance(
    student_id: Optional[str] = Query(default=None, description="External student id"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[AttendanceResponse]:
    records = unwrap(AttendanceService(db).list_records(student_id, start_date, end_date))
    return [AttendanceResponse.model_validate(r) for r in records]


@router.get("/student/{student_id}", response_model=List[AttendanceResponse])
def list_student_attendance(
    student_id: str,
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[AttendanceResponse]:
    records = unwrap(AttendanceService(db).list_for_student(student_id, start_date, end_date))
    return [AttendanceResponse.model_validate(r) for r in records]


@router.get("/student/{student_id}/stats", response_model=AttendanceStats)
def student_attendance_stats(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> AttendanceStats:
    return unwrap(AttendanceService(db).stats_for_student(student_id))


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
def mark_attendance(
    payload: AttendanceCreate,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> AttendanceResponse:
    """Mark a day; 201 for a new record, 200 when the day was already marked."""
    result = AttendanceService(db).mark(auth, payload)
    record = unwrap(result)
    if not result.metadata.get("created"):
        response.status_code = status.HTTP_200_OK
    return AttendanceResponse.model_validate(record)


@router.post("/bulk", response_model=BulkOperationResponse, status_code=status.HTTP_201_CREATED)
def mark_attendance_bulk(
    payload: AttendanceBulkCreate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> BulkOperationResponse:
    return unwrap(AttendanceService(db).mark_bulk(auth, payload))


@router.put("/{record_id}", response_model=AttendanceResponse)
def update_attendance(
    record_id: str,
    payload: AttendanceUpdate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> AttendanceResponse:
    record = unwrap(AttendanceService(db).update_record(auth, record_id, payload))
    return AttendanceResponse.model_validate(record)


@router.delete("/{record_id}", response_model=MessageResponse)
def delete_attendance(
    record_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MessageResponse:
    unwrap(AttendanceService(db).delete_by_id(record_id))
    return MessageResponse(message="Attendance record deleted successfully")
