"""
Attendance service.

A student has at most one attendance record per calendar date. Marking a
day that is already marked overwrites it, so the latest status wins.
"""

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError, DuplicateEntryError
from hostelmanix.core.security import AuthContext
from hostelmanix.models.attendance import AttendanceRecord
from hostelmanix.models.enums import AttendanceStatus
from hostelmanix.models.student import Student
from hostelmanix.repositories.attendance_repository import AttendanceRepository
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.schemas.attendance import (
    AttendanceBulkCreate,
    AttendanceCreate,
    AttendanceStats,
    AttendanceUpdate,
)
from hostelmanix.schemas.common.response import BulkItemResult, BulkOperationResponse
from hostelmanix.services.base import BaseService, ServiceResult

CREATED = "created"
UPDATED = "updated"


class AttendanceService(BaseService[AttendanceRecord, AttendanceRepository]):

    resource_name = "Attendance record"

    def __init__(self, db_session: Session):
        super().__init__(AttendanceRepository(db_session), db_session)
        self.student_repository = StudentRepository(db_session)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_records(
        self,
        student_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ServiceResult[List[AttendanceRecord]]:
        """
        All records, newest first.

        An unknown ``student_id`` filter is ignored rather than rejected.
        """
        student_pk = None
        if student_id:
            student = self.student_repository.find_by_student_id(student_id)
            if student:
                student_pk = student.id
        return ServiceResult.success(
            self.repository.list_filtered(student_pk, start_date, end_date)
        )

    def list_for_student(
        self,
        student_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ServiceResult[List[AttendanceRecord]]:
        student = self.student_repository.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)
        return ServiceResult.success(
            self.repository.list_filtered(student.id, start_date, end_date)
        )

    def stats_for_student(self, student_id: str) -> ServiceResult[AttendanceStats]:
        student = self.student_repository.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)

        records = self.repository.list_filtered(student.id)
        total = len(records)
        present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
        absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
        late = sum(1 for r in records if r.status == AttendanceStatus.LATE)
        rate = round(present / total * 100, 1) if total else 0.0

        return ServiceResult.success(
            AttendanceStats(total=total, present=present, absent=absent, late=late, rate=rate)
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def mark(self, auth: AuthContext, payload: AttendanceCreate) -> ServiceResult[AttendanceRecord]:
        """
        Upsert the record for (student, date).

        The result metadata carries ``created`` so the caller can tell a
        new record from an overwrite.
        """
        student = self.student_repository.find_by_student_id(payload.student_id)
        if not student:
            return ServiceResult.not_found("Student", payload.student_id)

        try:
            record, action = self._upsert(student, payload.date, payload.status, auth.user_id)
        except DatabaseError as e:
            return self._handle_exception(e, "mark attendance", payload.student_id)

        return ServiceResult.success(
            record,
            message=f"Attendance {action}",
            metadata={"created": action == CREATED},
        )

    def mark_bulk(self, auth: AuthContext, payload: AttendanceBulkCreate) -> ServiceResult[BulkOperationResponse]:
        """Mark each listed student; unknown students are reported and skipped."""
        results: List[BulkItemResult] = []
        for student_id in payload.student_ids:
            student = self.student_repository.find_by_student_id(student_id)
            if not student:
                results.append(BulkItemResult(key=student_id, success=False, error="Student not found"))
                continue
            try:
                record, action = self._upsert(student, payload.date, payload.status, auth.user_id)
            except DatabaseError as e:
                self._logger.error(f"Bulk attendance failed for {student_id}: {e.message}")
                results.append(BulkItemResult(key=student_id, success=False, error=e.message))
                continue
            results.append(
                BulkItemResult(key=student_id, success=True, action=action, record_id=record.id)
            )

        successful = sum(1 for r in results if r.success)
        self._logger.info(
            f"Bulk attendance for {payload.date}: {successful}/{len(results)} marked {payload.status.value}"
        )
        return ServiceResult.success(
            BulkOperationResponse(
                message="Bulk attendance marked",
                total=len(results),
                successful=successful,
                failed=len(results) - successful,
                results=results,
            )
        )

    def update_record(
        self,
        auth: AuthContext,
        record_id: str,
        payload: AttendanceUpdate,
    ) -> ServiceResult[AttendanceRecord]:
        record = self.repository.find_by_id(record_id)
        if not record:
            return ServiceResult.not_found(self.resource_name, record_id)

        changes = {key: value for key, value in payload.changes().items() if value is not None}
        changes["marked_by"] = auth.user_id
        try:
            self.repository.update(record, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update attendance", record_id)
        return ServiceResult.success(record, message="Attendance updated")

    def _upsert(
        self,
        student: Student,
        day: date,
        status: AttendanceStatus,
        marked_by: str,
    ) -> Tuple[AttendanceRecord, str]:
        existing = self.repository.find_for_day(student.id, day)
        if existing:
            self.repository.update(existing, {"status": status, "marked_by": marked_by})
            return existing, UPDATED

        record = AttendanceRecord(student_id=student.id, date=day, status=status, marked_by=marked_by)
        try:
            self.repository.create(record)
        except DuplicateEntryError:
            # Lost a race with a concurrent insert for the same day
            winner = self.repository.find_for_day(student.id, day)
            if winner is None:
                raise
            self.repository.update(winner, {"status": status, "marked_by": marked_by})
            return winner, UPDATED
        return record, CREATED
