"""
Leave application service.
"""

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.core.security import AuthContext
from hostelmanix.models.base import utcnow
from hostelmanix.models.leave import Leave
from hostelmanix.repositories.ticket_repositories import LeaveRepository
from hostelmanix.schemas.leave import LeaveCreate, LeaveReview
from hostelmanix.services.base import ServiceResult
from hostelmanix.services.base.ticket_service import TicketService


class LeaveService(TicketService[Leave]):

    resource_name = "Leave"

    def __init__(self, db_session: Session):
        super().__init__(LeaveRepository(db_session), db_session)

    def apply(self, auth: AuthContext, payload: LeaveCreate) -> ServiceResult[Leave]:
        """
        File a leave for the caller's student profile.

        Older clients send the student id as ``hostel_no``; it is used
        when the login has no linked profile.
        """
        student = self._caller_student(auth)
        if not student:
            student = self.student_repository.find_by_student_id(payload.hostel_no)
        if not student:
            return ServiceResult.not_found("Student", message="Student not found")

        leave = Leave(**payload.model_dump(), student_id=student.id, applied_on=utcnow())
        try:
            self.repository.create(leave)
        except DatabaseError as e:
            return self._handle_exception(e, "apply for leave", student.student_id)

        self._logger.info(f"Leave {leave.id} filed for student {student.student_id} ({leave.days} days)")
        return ServiceResult.success(leave, message="Leave applied successfully")

    def review(self, auth: AuthContext, leave_id: str, payload: LeaveReview) -> ServiceResult[Leave]:
        leave = self.repository.find_by_id(leave_id)
        if not leave:
            return ServiceResult.not_found(self.resource_name, leave_id)

        changes = {key: value for key, value in payload.changes().items() if value is not None}
        changes.update(reviewed_by=auth.user_id, reviewed_at=utcnow())
        try:
            self.repository.update(leave, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "review leave", leave_id)

        self._logger.info(f"Leave {leave.id} reviewed by {auth.user_id}: {leave.status.value}")
        return ServiceResult.success(leave, message="Leave updated successfully")
