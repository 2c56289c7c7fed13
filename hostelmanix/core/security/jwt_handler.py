"""
JWT token management utilities.

Handles session token creation and validation.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

logger = logging.getLogger(__name__)


class JWTManager:
    """
    JWT token manager for authentication.

    Issues signed session tokens carrying the caller's user id, role and
    linked student id, and validates them on the way back in.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_ACCESS_TOKEN_EXPIRE_DAYS = 7

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: str = DEFAULT_ALGORITHM,
        access_token_expire_days: int = DEFAULT_ACCESS_TOKEN_EXPIRE_DAYS,
    ):
        self.secret_key = secret_key or secrets.token_urlsafe(32)
        self.algorithm = algorithm
        self.access_token_expire_days = access_token_expire_days

    def create_access_token(
        self,
        user_id: str,
        additional_claims: Optional[Dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create JWT access token.

        Args:
            user_id: User identifier
            additional_claims: Additional claims to include
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(days=self.access_token_expire_days))

        payload = {
            "user_id": str(user_id),
            "token_type": "access",
            "iat": now,
            "exp": expire,
            "jti": secrets.token_hex(16),
        }

        if additional_claims:
            payload.update(additional_claims)

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user {user_id}")
        return token

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Raises:
            jwt.ExpiredSignatureError: If token is expired
            jwt.InvalidTokenError: If token is invalid
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm]
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token verification failed: token expired")
            raise
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {e}")
            raise

        if payload.get("token_type") != "access" or not payload.get("user_id"):
            raise jwt.InvalidTokenError("Not an access token")

        return payload
