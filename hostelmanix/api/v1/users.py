"""
Endpoints for the caller's own login profile.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_auth_context, get_db
from hostelmanix.api.responses import unwrap
from hostelmanix.core.security import AuthContext
from hostelmanix.schemas.common.response import MessageResponse
from hostelmanix.schemas.user import ChangePasswordRequest, UserResponse, UserSelfUpdate
from hostelmanix.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserResponse)
def read_me(db: Session = Depends(get_db), auth: AuthContext = Depends(get_auth_context)) -> UserResponse:
    user = unwrap(UserService(db).get_by_id(auth.user_id))
    return UserResponse.model_validate(user)


@router.put("/me", response_model=UserResponse)
def update_me(
    payload: UserSelfUpdate,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> UserResponse:
    user = unwrap(UserService(db).update_profile(auth.user_id, payload))
    return UserResponse.model_validate(user)


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    payload: ChangePasswordRequest,
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
) -> MessageResponse:
    unwrap(UserService(db).change_password(auth, payload))
    return MessageResponse(message="Password updated")
