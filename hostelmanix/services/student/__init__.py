"""Student services."""

from hostelmanix.services.student.student_service import ROOM_SYNC_WARNING, StudentService

__all__ = ["ROOM_SYNC_WARNING", "StudentService"]
