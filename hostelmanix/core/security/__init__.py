"""Security module for authentication and authorization."""

from functools import lru_cache

from hostelmanix.config.settings import settings
from hostelmanix.core.security.auth_context import AuthContext
from hostelmanix.core.security.jwt_handler import JWTManager
from hostelmanix.core.security.password_hasher import PasswordHasher


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.PASSWORD_BCRYPT_ROUNDS)


@lru_cache()
def get_jwt_manager() -> JWTManager:
    return JWTManager(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_days=settings.ACCESS_TOKEN_EXPIRE_DAYS,
    )


__all__ = [
    "AuthContext",
    "JWTManager",
    "PasswordHasher",
    "get_jwt_manager",
    "get_password_hasher",
]
