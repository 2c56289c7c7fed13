"""
Repositories for the student-keyed ticket collections.

Leaves, complaints, maintenance requests and fees share the same access
pattern: list everything newest first, or list one student's records.
"""

from typing import List, Type

from sqlalchemy.orm import Session

from hostelmanix.models.complaint import Complaint
from hostelmanix.models.fee import Fee
from hostelmanix.models.leave import Leave
from hostelmanix.models.maintenance import MaintenanceRequest
from hostelmanix.repositories.base_repository import BaseRepository, ModelType


class TicketRepository(BaseRepository[ModelType]):
    """Student-keyed collection ordered by creation time."""

    def __init__(self, model: Type[ModelType], session: Session):
        super().__init__(model, session)

    def list_all(self) -> List[ModelType]:
        return self.find_all(self.model.created_at.desc())

    def find_by_student(self, student_pk: str) -> List[ModelType]:
        return self.find_all(self.model.created_at.desc(), student_id=student_pk)


class LeaveRepository(TicketRepository[Leave]):

    def __init__(self, session: Session):
        super().__init__(Leave, session)


class ComplaintRepository(TicketRepository[Complaint]):

    def __init__(self, session: Session):
        super().__init__(Complaint, session)


class MaintenanceRepository(TicketRepository[MaintenanceRequest]):

    def __init__(self, session: Session):
        super().__init__(MaintenanceRequest, session)


class FeeRepository(TicketRepository[Fee]):

    def __init__(self, session: Session):
        super().__init__(Fee, session)
