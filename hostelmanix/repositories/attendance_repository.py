"""
Attendance records repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.attendance import AttendanceRecord
from hostelmanix.repositories.base_repository import BaseRepository


class AttendanceRepository(BaseRepository[AttendanceRecord]):

    def __init__(self, session: Session):
        super().__init__(AttendanceRecord, session)

    def find_for_day(self, student_pk: str, day: date) -> Optional[AttendanceRecord]:
        """The record for one student on one calendar date, if any."""
        return self.find_one_by(student_id=student_pk, date=day)

    def list_filtered(
        self,
        student_pk: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        """
        Records newest date first.

        Args:
            student_pk: Internal student id to restrict to
            start_date: Inclusive lower bound
            end_date: Inclusive upper bound
        """
        try:
            stmt = select(AttendanceRecord)
            if student_pk:
                stmt = stmt.where(AttendanceRecord.student_id == student_pk)
            if start_date:
                stmt = stmt.where(AttendanceRecord.date >= start_date)
            if end_date:
                stmt = stmt.where(AttendanceRecord.date <= end_date)
            stmt = stmt.order_by(AttendanceRecord.date.desc(), AttendanceRecord.created_at.desc())
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Attendance query failed: {str(e)}", table="attendance_records") from e
