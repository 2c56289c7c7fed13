"""
Student directory service.

Every write that changes a student's room pointer is followed by the
matching room update through ``RoomAssignmentService``. The student write
is committed first and stands on its own; if the room update fails the
result carries a ``room_sync_warning`` in its metadata.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.student import Student
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.repositories.user_repository import UserRepository
from hostelmanix.schemas.student import StudentCreate, StudentSelfUpdate, StudentUpdate
from hostelmanix.services.base.base_service import BaseService
from hostelmanix.services.base.service_result import ServiceResult
from hostelmanix.services.room.room_assignment_service import RoomAssignmentService, RoomSyncReport

ROOM_SYNC_WARNING = "room_sync_warning"

# Columns that cannot be cleared through an update
REQUIRED_FIELDS = ("student_id", "name")


class StudentService(BaseService[Student, StudentRepository]):

    resource_name = "Student"

    def __init__(self, db_session: Session):
        super().__init__(StudentRepository(db_session), db_session)
        self.user_repository = UserRepository(db_session)
        self.room_assignment = RoomAssignmentService(db_session)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_students(self) -> ServiceResult[List[Student]]:
        return ServiceResult.success(self.repository.list_all())

    def list_by_room(self, room_id: str) -> ServiceResult[List[Student]]:
        return ServiceResult.success(self.repository.list_by_room(room_id))

    def get_by_student_id(self, student_id: str) -> ServiceResult[Student]:
        student = self.repository.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)
        return ServiceResult.success(student)

    def get_for_user(self, user_id: str) -> ServiceResult[Student]:
        student = self.repository.find_by_user_id(user_id)
        if not student:
            return ServiceResult.not_found("Student", message="Student not found")
        return ServiceResult.success(student)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create_student(self, payload: StudentCreate) -> ServiceResult[Student]:
        """Create a profile and attach it to the requested room, if any."""
        if not self.user_repository.find_by_id(payload.user_id):
            return ServiceResult.not_found("User", payload.user_id)

        conflict = self._check_unique(
            student_id=payload.student_id,
            email=payload.email,
            user_id=payload.user_id,
        )
        if conflict:
            return conflict

        student = Student(**payload.model_dump())
        try:
            self.repository.create(student)
        except DatabaseError as e:
            return self._handle_exception(e, "create student", payload.student_id)

        self._logger.info(f"Created student {student.student_id} ({student.id}) room={student.room_id}")

        sync = self.room_assignment.assign_on_create(student.id, student.room_id)
        return self._with_sync(student, sync, "Student created successfully")

    def update_student(self, student_pk: str, payload: StudentUpdate) -> ServiceResult[Student]:
        """
        Apply an admin update.

        ``room_id`` is only considered when the client sent it: omitted
        keeps the current room, ``null`` unassigns.
        """
        student = self.repository.find_by_id(student_pk)
        if not student:
            return ServiceResult.not_found("Student", student_pk)

        changes = self._drop_cleared_required(payload.changes())
        conflict = self._check_unique(
            student_id=changes.get("student_id"),
            email=changes.get("email"),
            exclude_pk=student.id,
        )
        if conflict:
            return conflict

        old_room_id = student.room_id
        new_room_id = changes.get("room_id", old_room_id)
        try:
            self.repository.update(student, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update student", student_pk)

        self._logger.info(f"Updated student {student.student_id} ({student.id}) fields={sorted(changes)}")

        sync = self.room_assignment.reassign_on_update(student.id, old_room_id, new_room_id)
        self.repository.refresh(student)
        return self._with_sync(student, sync, "Student updated successfully")

    def update_self(self, user_id: str, payload: StudentSelfUpdate) -> ServiceResult[Student]:
        """Profile edit by the student themself; room and ids are not editable."""
        student = self.repository.find_by_user_id(user_id)
        if not student:
            return ServiceResult.not_found("Student", message="Student not found")

        changes = self._drop_cleared_required(payload.changes())
        conflict = self._check_unique(email=changes.get("email"), exclude_pk=student.id)
        if conflict:
            return conflict

        try:
            self.repository.update(student, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update student profile", student.id)
        return ServiceResult.success(student, message="Profile updated successfully")

    def delete_student(self, student_pk: str) -> ServiceResult[bool]:
        """Detach the student from their room, then delete the profile."""
        student = self.repository.find_by_id(student_pk)
        if not student:
            return ServiceResult.not_found("Student", student_pk)

        sync = self.room_assignment.detach_on_delete(student.id, student.room_id)
        try:
            self.repository.delete(student)
        except DatabaseError as e:
            return self._handle_exception(e, "delete student", student_pk)

        self._logger.info(f"Deleted student {student_pk}")
        return self._with_sync(True, sync, "Student deleted successfully")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_unique(
        self,
        student_id: Optional[str] = None,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
        exclude_pk: Optional[str] = None,
    ) -> Optional[ServiceResult]:
        checks = (
            ("student_id", student_id, self.repository.find_by_student_id),
            ("email", email, self.repository.find_by_email),
            ("user_id", user_id, self.repository.find_by_user_id),
        )
        for field_name, value, finder in checks:
            if value is None:
                continue
            existing = finder(value)
            if existing and existing.id != exclude_pk:
                return ServiceResult.conflict(
                    f"A student with this {field_name} already exists",
                    details={field_name: value},
                )
        return None

    @staticmethod
    def _drop_cleared_required(changes: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: value
            for key, value in changes.items()
            if not (key in REQUIRED_FIELDS and value is None)
        }

    @staticmethod
    def _with_sync(data, sync: ServiceResult[RoomSyncReport], message: str) -> ServiceResult:
        result = ServiceResult.success(data, message=message)
        if not sync.is_success:
            result.add_metadata(
                ROOM_SYNC_WARNING,
                {"message": sync.error.message, **(sync.error.details or {})},
            )
        return result
