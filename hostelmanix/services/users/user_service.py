"""
User profile service.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.core.security import AuthContext, get_password_hasher
from hostelmanix.core.security.password_hasher import PasswordHasher
from hostelmanix.models.user import User
from hostelmanix.repositories.user_repository import UserRepository
from hostelmanix.schemas.user import ChangePasswordRequest, UserSelfUpdate
from hostelmanix.services.base import BaseService, ServiceResult


class UserService(BaseService[User, UserRepository]):

    resource_name = "User"

    def __init__(self, db_session: Session, password_hasher: Optional[PasswordHasher] = None):
        super().__init__(UserRepository(db_session), db_session)
        self.password_hasher = password_hasher or get_password_hasher()

    def update_profile(self, user_id: str, payload: UserSelfUpdate) -> ServiceResult[User]:
        user = self.repository.find_by_id(user_id)
        if not user:
            return ServiceResult.not_found("User", user_id)

        changes = payload.changes()
        email = changes.get("email")
        if email:
            existing = self.repository.find_by_email(email)
            if existing and existing.id != user.id:
                return ServiceResult.conflict("Email already in use", details={"email": email})

        try:
            self.repository.update(user, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update user profile", user_id)
        return ServiceResult.success(user, message="Profile updated successfully")

    def change_password(self, auth: AuthContext, payload: ChangePasswordRequest) -> ServiceResult[bool]:
        """
        Replace the caller's password.

        Students must prove the current password; admins may reset
        without it.
        """
        user = self.repository.find_by_id(auth.user_id)
        if not user:
            return ServiceResult.not_found("User", auth.user_id)

        if not auth.is_admin and not self.password_hasher.verify(
            payload.current_password or "", user.password_hash
        ):
            return ServiceResult.unauthorized("Current password incorrect")

        try:
            self.repository.update(user, {"password_hash": self.password_hasher.hash(payload.new_password)})
        except DatabaseError as e:
            return self._handle_exception(e, "change password", user.id)

        self._logger.info(f"Password changed for user {user.id}")
        return ServiceResult.success(True, message="Password updated")
