"""
Complaint service.
"""

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.core.security import AuthContext
from hostelmanix.models.base import utcnow
from hostelmanix.models.complaint import Complaint
from hostelmanix.models.enums import ComplaintStatus
from hostelmanix.repositories.ticket_repositories import ComplaintRepository
from hostelmanix.schemas.complaint import ComplaintCreate, ComplaintUpdate
from hostelmanix.services.base import ServiceResult
from hostelmanix.services.base.ticket_service import TicketService


class ComplaintService(TicketService[Complaint]):

    resource_name = "Complaint"

    def __init__(self, db_session: Session):
        super().__init__(ComplaintRepository(db_session), db_session)

    def submit(self, auth: AuthContext, payload: ComplaintCreate) -> ServiceResult[Complaint]:
        student = self._caller_student(auth)
        if not student:
            return ServiceResult.not_found("Student", message="Student not found")

        complaint = Complaint(**payload.model_dump(), student_id=student.id, submitted_at=utcnow())
        try:
            self.repository.create(complaint)
        except DatabaseError as e:
            return self._handle_exception(e, "submit complaint", student.student_id)

        self._logger.info(f"Complaint {complaint.id} submitted by {student.student_id}")
        return ServiceResult.success(complaint, message="Complaint submitted successfully")

    def update_complaint(
        self,
        auth: AuthContext,
        complaint_id: str,
        payload: ComplaintUpdate,
    ) -> ServiceResult[Complaint]:
        """Admin update; resolving stamps who resolved it and when."""
        complaint = self.repository.find_by_id(complaint_id)
        if not complaint:
            return ServiceResult.not_found(self.resource_name, complaint_id)

        changes = {key: value for key, value in payload.changes().items() if value is not None}
        if changes.get("status") == ComplaintStatus.RESOLVED:
            changes.update(resolved_at=utcnow(), resolved_by=auth.user_id)
        try:
            self.repository.update(complaint, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update complaint", complaint_id)
        return ServiceResult.success(complaint, message="Complaint updated successfully")
