"""
User repository: credential lookups.
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.enums import UserRole
from hostelmanix.models.user import User
from hostelmanix.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):

    def __init__(self, session: Session):
        super().__init__(User, session)

    def find_by_login_and_role(self, login: str, role: UserRole) -> Optional[User]:
        """
        Find a user by username or linked student id within a role.

        Username matches are preferred when both could apply.
        """
        try:
            stmt = (
                select(User)
                .where(User.role == role)
                .where(or_(User.username == login, User.student_id == login))
                .order_by((User.username == login).desc())
                .limit(1)
            )
            return self.db.scalars(stmt).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Login lookup failed: {str(e)}", table="users") from e

    def find_by_username(self, username: str) -> Optional[User]:
        return self.find_one_by(username=username)

    def find_by_student_id(self, student_id: str) -> Optional[User]:
        return self.find_one_by(student_id=student_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.find_one_by(email=email)
