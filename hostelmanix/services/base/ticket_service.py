"""
Shared behaviour for student-keyed ticket collections.
"""

from typing import List, Optional, TypeVar

from sqlalchemy.orm import Session

from hostelmanix.core.security import AuthContext
from hostelmanix.models.student import Student
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.repositories.ticket_repositories import TicketRepository
from hostelmanix.services.base.base_service import BaseService
from hostelmanix.services.base.service_result import ServiceResult

TTicket = TypeVar("TTicket")


class TicketService(BaseService[TTicket, TicketRepository]):
    """
    Listing, per-student lookup and deletion for a ticket collection.

    Per-student lookups take the external student id.
    """

    def __init__(self, repository: TicketRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.student_repository = StudentRepository(db_session)

    def list_all(self) -> ServiceResult[List[TTicket]]:
        return ServiceResult.success(self.repository.list_all())

    def list_for_student(self, student_id: str) -> ServiceResult[List[TTicket]]:
        student = self.student_repository.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)
        return ServiceResult.success(self.repository.find_by_student(student.id))

    def _caller_student(self, auth: AuthContext) -> Optional[Student]:
        """Profile linked to the calling login, if any."""
        return self.student_repository.find_by_user_id(auth.user_id)
