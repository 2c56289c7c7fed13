"""Maintenance services."""

from hostelmanix.services.maintenance.maintenance_service import MaintenanceService

__all__ = ["MaintenanceService"]
