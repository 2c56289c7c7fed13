"""
Database models package.

Importing this package registers every model with ``Base.metadata``.
"""

from hostelmanix.models.base import Base, BaseModel, TimestampModel
from hostelmanix.models.enums import (
    AcademicYear,
    AttendanceStatus,
    ComplaintCategory,
    ComplaintStatus,
    FeeStatus,
    LeaveStatus,
    MaintenanceCategory,
    MaintenanceStatus,
    RoomStatus,
    UserRole,
    Weekday,
)
from hostelmanix.models.user import User
from hostelmanix.models.student import Student
from hostelmanix.models.room import Room
from hostelmanix.models.attendance import AttendanceRecord
from hostelmanix.models.leave import Leave
from hostelmanix.models.complaint import Complaint
from hostelmanix.models.maintenance import MaintenanceRequest
from hostelmanix.models.fee import Fee
from hostelmanix.models.mess_menu import MessMenu

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "AcademicYear",
    "AttendanceStatus",
    "ComplaintCategory",
    "ComplaintStatus",
    "FeeStatus",
    "LeaveStatus",
    "MaintenanceCategory",
    "MaintenanceStatus",
    "RoomStatus",
    "UserRole",
    "Weekday",
    "User",
    "Student",
    "Room",
    "AttendanceRecord",
    "Leave",
    "Complaint",
    "MaintenanceRequest",
    "Fee",
    "MessMenu",
]
