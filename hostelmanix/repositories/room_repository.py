"""
Room directory.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostelmanix.models.room import Room
from hostelmanix.repositories.base_repository import BaseRepository


class RoomRepository(BaseRepository[Room]):
    """Keyed store of rooms."""

    def __init__(self, session: Session):
        super().__init__(Room, session)

    def find_by_room_number(self, room_number: int) -> Optional[Room]:
        return self.find_one_by(room_number=room_number)

    def list_all(self) -> List[Room]:
        return self.find_all(Room.room_number)
