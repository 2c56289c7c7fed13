"""
FastAPI dependencies: database session and request-scoped identity.

The bearer token is decoded once per request into an ``AuthContext``
which endpoints pass explicitly to the services that need it.
"""

from typing import Generator, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hostelmanix.config.database import get_db_session
from hostelmanix.config.logging import get_logger
from hostelmanix.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    TokenExpiredError,
)
from hostelmanix.core.security import AuthContext, get_jwt_manager
from hostelmanix.models.enums import UserRole

logger = get_logger(__name__)

security = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """Database session for one request."""
    yield from get_db_session()


def get_optional_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[AuthContext]:
    """Identity of the caller, or None when no bearer token was sent."""
    if credentials is None:
        return None

    try:
        claims = get_jwt_manager().verify_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError:
        raise InvalidTokenError()

    try:
        return AuthContext.from_claims(claims)
    except (KeyError, ValueError) as e:
        logger.warning(f"Token carried unusable claims: {e}")
        raise InvalidTokenError()


def get_auth_context(
    context: Optional[AuthContext] = Depends(get_optional_auth_context),
) -> AuthContext:
    """Identity of the caller; a valid bearer token is required."""
    if context is None:
        raise AuthenticationError("No token provided")
    return context


def require_admin(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
    """Identity of the caller, who must be an admin."""
    if not context.is_admin:
        raise AuthorizationError("Admin access required", required_role=UserRole.ADMIN.value)
    return context


__all__ = [
    "get_db",
    "get_auth_context",
    "get_optional_auth_context",
    "require_admin",
]
