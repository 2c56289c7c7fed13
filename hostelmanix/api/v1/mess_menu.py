"""
Mess menu endpoints. Reads are open to any logged in user, writes to admins.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db, require_admin
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.mess_menu import MessMenuResponse, MessMenuUpdate, MessMenuUpsert
from hostelmanix.services.mess import MessMenuService

router = APIRouter(prefix="/mess-menu", tags=["Mess Menu"])


@router.get("", response_model=List[MessMenuResponse])
def list_menu(
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> List[MessMenuResponse]:
    """The week's menus, Monday first."""
    return [MessMenuResponse.model_validate(m) for m in unwrap(MessMenuService(db).list_week())]


@router.get("/{day}", response_model=MessMenuResponse)
def read_menu(
    day: str,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MessMenuResponse:
    return MessMenuResponse.model_validate(unwrap(MessMenuService(db).get_day(day)))


@router.post("", response_model=MessMenuResponse, status_code=status.HTTP_201_CREATED)
def save_menu(
    payload: MessMenuUpsert,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessMenuResponse:
    """Create or replace the menu for a day."""
    return MessMenuResponse.model_validate(unwrap(MessMenuService(db).upsert(payload)))


@router.put("/{day}", response_model=MessMenuResponse)
def update_menu(
    day: str,
    payload: MessMenuUpdate,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessMenuResponse:
    return MessMenuResponse.model_validate(unwrap(MessMenuService(db).update_day(day, payload)))


@router.delete("/{day}", response_model=MessageResponse)
def delete_menu(
    day: str,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
) -> MessageResponse:
    unwrap(MessMenuService(db).delete_day(day))
    return MessageResponse(message="Menu deleted successfully")
