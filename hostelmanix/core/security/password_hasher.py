"""
Password hashing and verification utilities.

Provides secure password hashing using bcrypt with configurable rounds.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Handle password hashing and verification using bcrypt.
    """

    DEFAULT_ROUNDS = 12
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Initialize password hasher.

        Args:
            rounds: Number of bcrypt rounds (4-31, default 12)

        Raises:
            ValueError: If rounds is outside valid range
        """
        if not (self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS):
            raise ValueError(
                f"Rounds must be between {self.MIN_ROUNDS} and {self.MAX_ROUNDS}, got {rounds}"
            )

        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a password with salt.

        Raises:
            ValueError: If password is empty
            TypeError: If password is not a string
        """
        if not isinstance(password, str):
            raise TypeError("Password must be a string")

        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches hash, False otherwise (including
            empty input or an unparseable hash)
        """
        if not password or not hashed_password:
            return False

        try:
            return bcrypt.checkpw(
                password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError as e:
            logger.warning(f"Error verifying password: {e}")
            return False
