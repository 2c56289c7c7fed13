"""
Fee service.
"""

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.fee import Fee
from hostelmanix.repositories.ticket_repositories import FeeRepository
from hostelmanix.schemas.fee import FeeCreate, FeeUpdate
from hostelmanix.services.base import ServiceResult
from hostelmanix.services.base.ticket_service import TicketService


class FeeService(TicketService[Fee]):

    resource_name = "Fee"

    def __init__(self, db_session: Session):
        super().__init__(FeeRepository(db_session), db_session)

    def create_fee(self, payload: FeeCreate) -> ServiceResult[Fee]:
        if not self.student_repository.find_by_id(payload.student_id):
            return ServiceResult.not_found("Student", payload.student_id)

        fee = Fee(**payload.model_dump())
        try:
            self.repository.create(fee)
        except DatabaseError as e:
            return self._handle_exception(e, "create fee", payload.student_id)

        self._logger.info(f"Fee {fee.id} of {fee.amount} created for student {fee.student_id}")
        return ServiceResult.success(fee, message="Fee created successfully")

    def update_fee(self, fee_id: str, payload: FeeUpdate) -> ServiceResult[Fee]:
        fee = self.repository.find_by_id(fee_id)
        if not fee:
            return ServiceResult.not_found(self.resource_name, fee_id)

        changes = payload.changes()
        # amount, due date and status are required columns
        for key in ("amount", "due_date", "status"):
            if key in changes and changes[key] is None:
                del changes[key]
        try:
            self.repository.update(fee, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update fee", fee_id)
        return ServiceResult.success(fee, message="Fee updated successfully")
