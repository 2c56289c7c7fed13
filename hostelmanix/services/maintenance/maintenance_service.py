"""
Maintenance request service.
"""

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.core.security import AuthContext
from hostelmanix.models.base import utcnow
from hostelmanix.models.enums import MaintenanceStatus
from hostelmanix.models.maintenance import MaintenanceRequest
from hostelmanix.repositories.ticket_repositories import MaintenanceRepository
from hostelmanix.schemas.maintenance import MaintenanceCreate, MaintenanceUpdate
from hostelmanix.services.base import ServiceResult
from hostelmanix.services.base.ticket_service import TicketService


class MaintenanceService(TicketService[MaintenanceRequest]):

    resource_name = "Maintenance request"

    def __init__(self, db_session: Session):
        super().__init__(MaintenanceRepository(db_session), db_session)

    def raise_request(self, auth: AuthContext, payload: MaintenanceCreate) -> ServiceResult[MaintenanceRequest]:
        student = self._caller_student(auth)
        if not student:
            return ServiceResult.not_found("Student", message="Student not found")

        request = MaintenanceRequest(**payload.model_dump(), student_id=student.id, date=utcnow())
        try:
            self.repository.create(request)
        except DatabaseError as e:
            return self._handle_exception(e, "raise maintenance request", student.student_id)

        self._logger.info(
            f"Maintenance request {request.id} for room {request.room} "
            f"({request.problem_type.value}) by {student.student_id}"
        )
        return ServiceResult.success(request, message="Maintenance request submitted successfully")

    def update_request(
        self,
        auth: AuthContext,
        request_id: str,
        payload: MaintenanceUpdate,
    ) -> ServiceResult[MaintenanceRequest]:
        request = self.repository.find_by_id(request_id)
        if not request:
            return ServiceResult.not_found(self.resource_name, request_id)

        changes = {key: value for key, value in payload.changes().items() if value is not None}
        if changes.get("status") == MaintenanceStatus.RESOLVED:
            changes.update(resolved_at=utcnow(), resolved_by=auth.user_id)
        try:
            self.repository.update(request, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update maintenance request", request_id)
        return ServiceResult.success(request, message="Maintenance request updated successfully")
