"""
Mess menu repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostelmanix.models.enums import Weekday
from hostelmanix.models.mess_menu import MessMenu
from hostelmanix.repositories.base_repository import BaseRepository


class MessMenuRepository(BaseRepository[MessMenu]):

    def __init__(self, session: Session):
        super().__init__(MessMenu, session)

    def find_by_day(self, day: Weekday) -> Optional[MessMenu]:
        return self.find_one_by(day=day)

    def list_week(self) -> List[MessMenu]:
        """Menus in calendar order, Monday first."""
        return sorted(self.find_all(), key=lambda menu: menu.day.order)
