"""
Student directory.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.student import Student
from hostelmanix.repositories.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Keyed store of student profiles."""

    def __init__(self, session: Session):
        super().__init__(Student, session)

    def find_by_student_id(self, student_id: str) -> Optional[Student]:
        """Look up by the external student identifier."""
        return self.find_one_by(student_id=student_id)

    def find_by_user_id(self, user_id: str) -> Optional[Student]:
        return self.find_one_by(user_id=user_id)

    def find_by_email(self, email: str) -> Optional[Student]:
        return self.find_one_by(email=email)

    def list_all(self) -> List[Student]:
        return self.find_all(Student.created_at)

    def list_by_room(self, room_id: str) -> List[Student]:
        """Students whose room pointer equals ``room_id``."""
        return self.find_all(Student.created_at, room_id=room_id)

    def list_assigned(self) -> List[Student]:
        """Every student that currently points at some room."""
        try:
            stmt = (
                select(Student)
                .where(Student.room_id.is_not(None))
                .order_by(Student.created_at, Student.id)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"List assigned students failed: {str(e)}", table="students") from e
