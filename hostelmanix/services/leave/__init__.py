"""Leave services."""

from hostelmanix.services.leave.leave_service import LeaveService

__all__ = ["LeaveService"]
