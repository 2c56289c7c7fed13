"""
Room directory service.

Admins manage the physical attributes of rooms here. Membership and the
fields derived from it are owned by ``RoomAssignmentService``.
"""

from typing import List

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.room import Room
from hostelmanix.repositories.room_repository import RoomRepository
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from hostelmanix.schemas.summary import StudentBrief
from hostelmanix.services.base.base_service import BaseService
from hostelmanix.services.base.service_result import ServiceResult


class RoomService(BaseService[Room, RoomRepository]):

    resource_name = "Room"

    def __init__(self, db_session: Session):
        super().__init__(RoomRepository(db_session), db_session)
        self.student_repository = StudentRepository(db_session)

    def list_rooms(self) -> ServiceResult[List[Room]]:
        return ServiceResult.success(self.repository.list_all())

    def get_by_number(self, room_number: int) -> ServiceResult[Room]:
        room = self.repository.find_by_room_number(room_number)
        if not room:
            return ServiceResult.not_found("Room", str(room_number))
        return ServiceResult.success(room)

    def create_room(self, payload: RoomCreate) -> ServiceResult[Room]:
        if self.repository.find_by_room_number(payload.room_number):
            return ServiceResult.conflict(
                f"Room number {payload.room_number} already exists",
                details={"room_number": payload.room_number},
            )
        room = Room(**payload.model_dump(), occupants=0, student_ids=[])
        try:
            self.repository.create(room)
        except DatabaseError as e:
            return self._handle_exception(e, "create room", payload.room_number)
        return ServiceResult.success(room, message="Room created successfully")

    def update_room(self, room_id: str, payload: RoomUpdate) -> ServiceResult[Room]:
        room = self.repository.find_by_id(room_id)
        if not room:
            return ServiceResult.not_found("Room", room_id)

        changes = payload.changes()
        number = changes.get("room_number")
        if number is not None and number != room.room_number:
            if self.repository.find_by_room_number(number):
                return ServiceResult.conflict(
                    f"Room number {number} already exists",
                    details={"room_number": number},
                )
        # Columns are not nullable; an explicit null means "leave as is"
        changes = {key: value for key, value in changes.items() if value is not None}
        try:
            self.repository.update(room, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update room", room_id)
        return ServiceResult.success(room, message="Room updated successfully")

    def delete_room(self, room_id: str) -> ServiceResult[bool]:
        """
        Delete a room.

        Students pointing at it keep their pointer; the consistency check
        reports them as dangling.
        """
        room = self.repository.find_by_id(room_id)
        if room and room.student_ids:
            self._logger.warning(
                f"Deleting room {room.room_number} with {len(room.student_ids)} listed student(s)"
            )
        return self.delete_by_id(room_id)

    def to_response(self, room: Room) -> RoomResponse:
        """Room with its listed students populated in list order."""
        response = RoomResponse.model_validate(room)
        students = self.student_repository.find_by_ids(room.student_ids or [])
        response.students = [StudentBrief.model_validate(s) for s in students]
        return response
