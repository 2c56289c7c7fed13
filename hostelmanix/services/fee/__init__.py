"""Fee services."""

from hostelmanix.services.fee.fee_service import FeeService

__all__ = ["FeeService"]
