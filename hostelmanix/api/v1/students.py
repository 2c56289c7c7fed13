"""
Student directory endpoints.

Static paths (``/me``, ``/by-student-id``, ``/room``) are declared
before ``/{student_pk}`` so they are not captured by it.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.student import (
    StudentCreate,
    StudentResponse,
    StudentSelfUpdate,
    StudentUpdate,
)
from hostelmanix.services.student import StudentService

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse])
def list_students(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[StudentResponse]:
    students = unwrap(StudentService(db).list_students())
    return [StudentResponse.model_validate(s) for s in students]


@router.get("/me", response_model=StudentResponse)
def read_my_profile(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> StudentResponse:
    student = unwrap(StudentService(db).get_for_user(auth.user_id))
    return StudentResponse.model_validate(student)


@router.put("/me", response_model=StudentResponse)
def update_my_profile(
    payload: StudentSelfUpdate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> StudentResponse:
    student = unwrap(StudentService(db).update_self(auth.user_id, payload))
    return StudentResponse.model_validate(student)


@router.get("/by-student-id/{student_id}", response_model=StudentResponse)
def read_by_student_id(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> StudentResponse:
    student = unwrap(StudentService(db).get_by_student_id(student_id))
    return StudentResponse.model_validate(student)


@router.get("/room/{room_id}", response_model=List[StudentResponse])
def list_students_in_room(
    room_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[StudentResponse]:
    students = unwrap(StudentService(db).list_by_room(room_id))
    return [StudentResponse.model_validate(s) for s in students]


@router.get("/{student_pk}", response_model=StudentResponse)
def read_student(
    student_pk: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> StudentResponse:
    student = unwrap(StudentService(db).get_by_id(student_pk))
    return StudentResponse.model_validate(student)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreate,
    response: Response,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> StudentResponse:
    """Create a profile; a requested room is attached on a best effort basis."""
    student = unwrap(StudentService(db).create_student(payload), response)
    return StudentResponse.model_validate(student)


@router.put("/{student_pk}", response_model=StudentResponse)
def update_student(
    student_pk: str,
    payload: StudentUpdate,
    response: Response,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> StudentResponse:
    student = unwrap(StudentService(db).update_student(student_pk, payload), response)
    return StudentResponse.model_validate(student)


@router.delete("/{student_pk}", response_model=MessageResponse)
def delete_student(
    student_pk: str,
    response: Response,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(StudentService(db).delete_student(student_pk), response)
    return MessageResponse(message="Student deleted successfully")
