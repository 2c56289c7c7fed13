"""
Database enums mirroring schema enums.

Provides the fixed value sets stored in the database and accepted
by the API schemas.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    ADMIN = "admin"
    STUDENT = "student"


class RoomStatus(str, enum.Enum):
    """Room occupancy status."""
    VACANT = "vacant"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class AcademicYear(str, enum.Enum):
    """Academic year of a student."""
    FIRST = "1st Year"
    SECOND = "2nd Year"
    THIRD = "3rd Year"
    FOURTH = "4th Year"
    OTHER = "Other"


class AttendanceStatus(str, enum.Enum):
    """Daily attendance status."""
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class LeaveStatus(str, enum.Enum):
    """Leave application review status."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ComplaintStatus(str, enum.Enum):
    """Complaint lifecycle status."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class ComplaintCategory(str, enum.Enum):
    """Complaint categories."""
    ROOM_MAINTENANCE = "room-maintenance"
    FOOD_QUALITY = "food-quality"
    STAFF_BEHAVIOR = "staff-behavior"
    WIFI_ELECTRICITY = "wifi-electricity"
    OTHER = "other"


class MaintenanceStatus(str, enum.Enum):
    """Maintenance request lifecycle status."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class MaintenanceCategory(str, enum.Enum):
    """Maintenance problem types."""
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    FURNITURE = "furniture"
    OTHER = "other"


class FeeStatus(str, enum.Enum):
    """Fee payment status."""
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class Weekday(str, enum.Enum):
    """Days of the mess menu week, in calendar order."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def order(self) -> int:
        return list(Weekday).index(self)
