"""
Authentication endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hostelmanix.api.deps import get_db, get_optional_auth_context
from hostelmanix.api.responses import unwrap
from hostelmanix.core.exceptions import AuthenticationError, AuthorizationError
from hostelmanix.core.security import AuthContext
from hostelmanix.models.enums import UserRole
from hostelmanix.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from hostelmanix.services.auth import AuthenticationService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Exchange a username or student id plus password for a session token."""
    return unwrap(AuthenticationService(db).login(payload))


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    auth: Optional[AuthContext] = Depends(get_optional_auth_context),
) -> RegisterResponse:
    """
    Create a login.

    Open to anyone until the first login exists, then restricted to admins.
    """
    service = AuthenticationService(db)
    if not service.registration_open():
        if auth is None:
            raise AuthenticationError("No token provided")
        if not auth.is_admin:
            raise AuthorizationError("Admin access required", required_role=UserRole.ADMIN.value)

    user = unwrap(service.register(payload))
    return RegisterResponse(message="User created successfully", user_id=user.id)
