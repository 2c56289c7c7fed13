"""Room services."""

from hostelmanix.services.room.room_assignment_service import (
    RoomAssignmentService,
    RoomSyncReport,
    RoomSyncStep,
)
from hostelmanix.services.room.room_service import RoomService

__all__ = [
    "RoomAssignmentService",
    "RoomService",
    "RoomSyncReport",
    "RoomSyncStep",
]
