"""Data access layer."""

from hostelmanix.repositories.attendance_repository import AttendanceRepository
from hostelmanix.repositories.base_repository import BaseRepository
from hostelmanix.repositories.mess_menu_repository import MessMenuRepository
from hostelmanix.repositories.room_repository import RoomRepository
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.repositories.ticket_repositories import (
    ComplaintRepository,
    FeeRepository,
    LeaveRepository,
    MaintenanceRepository,
    TicketRepository,
)
from hostelmanix.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "StudentRepository",
    "RoomRepository",
    "AttendanceRepository",
    "TicketRepository",
    "LeaveRepository",
    "ComplaintRepository",
    "MaintenanceRepository",
    "FeeRepository",
    "MessMenuRepository",
]
