"""Attendance services."""

from hostelmanix.services.attendance.attendance_service import AttendanceService

__all__ = ["AttendanceService"]
