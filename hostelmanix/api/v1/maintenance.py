"""
Maintenance request endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from hostelmanix.services.maintenance import MaintenanceService

router = APIRouter(prefix="/maintenance", tags=["Maintenance"])


@router.get("", response_model=List[MaintenanceResponse])
def list_requests(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[MaintenanceResponse]:
    return [MaintenanceResponse.model_validate(r) for r in unwrap(MaintenanceService(db).list_all())]


@router.get("/student/{student_id}", response_model=List[MaintenanceResponse])
def list_student_requests(
    student_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[MaintenanceResponse]:
    requests = unwrap(MaintenanceService(db).list_for_student(student_id))
    return [MaintenanceResponse.model_validate(r) for r in requests]


@router.get("/{request_id}", response_model=MaintenanceResponse)
def read_request(
    request_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MaintenanceResponse:
    return MaintenanceResponse.model_validate(unwrap(MaintenanceService(db).get_by_id(request_id)))


@router.post("", response_model=MaintenanceResponse, status_code=status.HTTP_201_CREATED)
def raise_request(
    payload: MaintenanceCreate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MaintenanceResponse:
    return MaintenanceResponse.model_validate(unwrap(MaintenanceService(db).raise_request(auth, payload)))


@router.put("/{request_id}", response_model=MaintenanceResponse)
def update_request(
    request_id: str,
    payload: MaintenanceUpdate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MaintenanceResponse:
    request = unwrap(MaintenanceService(db).update_request(admin, request_id, payload))
    return MaintenanceResponse.model_validate(request)


@router.delete("/{request_id}", response_model=MessageResponse)
def delete_request(
    request_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(MaintenanceService(db).delete_by_id(request_id))
    return MessageResponse(message="Maintenance request deleted successfully")
