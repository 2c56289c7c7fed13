"""
Room directory endpoints, plus the admin consistency tools.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.room import (
    ConsistencyReport,
    ReconcileReport,
    RoomCreate,
    RoomResponse,
    RoomUpdate,
)
from hostelmanix.services.room import RoomAssignmentService, RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[RoomResponse]:
    service = RoomService(db)
    return [service.to_response(room) for room in unwrap(service.list_rooms())]


@router.get("/consistency", response_model=ConsistencyReport)
def check_consistency(
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> ConsistencyReport:
    """Rooms whose membership disagrees with student room pointers."""
    return unwrap(RoomAssignmentService(db).find_drift())


@router.post("/reconcile", response_model=ReconcileReport)
def reconcile_rooms(
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> ReconcileReport:
    """Rebuild room membership from student room pointers."""
    return unwrap(RoomAssignmentService(db).reconcile())


@router.get("/number/{room_number}", response_model=RoomResponse)
def read_room_by_number(
    room_number: int,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> RoomResponse:
    service = RoomService(db)
    return service.to_response(unwrap(service.get_by_number(room_number)))


@router.get("/{room_id}", response_model=RoomResponse)
def read_room(
    room_id: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> RoomResponse:
    service = RoomService(db)
    return service.to_response(unwrap(service.get_by_id(room_id)))


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    payload: RoomCreate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> RoomResponse:
    service = RoomService(db)
    return service.to_response(unwrap(service.create_room(payload)))


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str,
    payload: RoomUpdate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> RoomResponse:
    service = RoomService(db)
    return service.to_response(unwrap(service.update_room(room_id, payload)))


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(
    room_id: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(RoomService(db).delete_room(room_id))
    return MessageResponse(message="Room deleted successfully")
