"""Request-scoped authentication context."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from hostelmanix.models.enums import UserRole


@dataclass(frozen=True)
class AuthContext:
    """
    Identity of the caller for a single request.

    Built once from the bearer token at the API boundary and passed down
    to services explicitly; never mutated afterwards.
    """

    user_id: str
    role: UserRole
    student_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "AuthContext":
        return cls(
            user_id=str(claims["user_id"]),
            role=UserRole(claims.get("role", UserRole.STUDENT.value)),
            student_id=claims.get("student_id"),
        )

    def to_claims(self) -> Dict[str, Any]:
        return {"role": self.role.value, "student_id": self.student_id}
