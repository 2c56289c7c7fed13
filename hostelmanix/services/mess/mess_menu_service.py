"""
Mess menu service: one menu per weekday.
"""

from typing import List

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.enums import Weekday
from hostelmanix.models.mess_menu import MessMenu
from hostelmanix.repositories.mess_menu_repository import MessMenuRepository
from hostelmanix.schemas.mess_menu import MessMenuUpdate, MessMenuUpsert
from hostelmanix.services.base import BaseService, ServiceResult


class MessMenuService(BaseService[MessMenu, MessMenuRepository]):

    resource_name = "Menu"

    def __init__(self, db_session: Session):
        super().__init__(MessMenuRepository(db_session), db_session)

    def list_week(self) -> ServiceResult[List[MessMenu]]:
        return ServiceResult.success(self.repository.list_week())

    def get_day(self, day: str) -> ServiceResult[MessMenu]:
        weekday = self._parse_day(day)
        menu = self.repository.find_by_day(weekday) if weekday else None
        if not menu:
            return ServiceResult.not_found("Menu", day, message="Menu not found for this day")
        return ServiceResult.success(menu)

    def upsert(self, payload: MessMenuUpsert) -> ServiceResult[MessMenu]:
        meals = payload.model_dump(exclude={"day"})
        menu = self.repository.find_by_day(payload.day)
        try:
            if menu:
                self.repository.update(menu, meals)
            else:
                menu = self.repository.create(MessMenu(day=payload.day, **meals))
        except DatabaseError as e:
            return self._handle_exception(e, "save mess menu", payload.day.value)

        self._logger.info(f"Mess menu saved for {payload.day.value}")
        return ServiceResult.success(menu, message="Menu saved successfully")

    def update_day(self, day: str, payload: MessMenuUpdate) -> ServiceResult[MessMenu]:
        found = self.get_day(day)
        if not found:
            return found

        menu = found.data
        changes = {key: value for key, value in payload.changes().items() if value is not None}
        try:
            self.repository.update(menu, changes)
        except DatabaseError as e:
            return self._handle_exception(e, "update mess menu", day)
        return ServiceResult.success(menu, message="Menu updated successfully")

    def delete_day(self, day: str) -> ServiceResult[bool]:
        found = self.get_day(day)
        if not found:
            return found

        try:
            self.repository.delete(found.data)
        except DatabaseError as e:
            return self._handle_exception(e, "delete mess menu", day)
        return ServiceResult.success(True, message="Menu deleted successfully")

    @staticmethod
    def _parse_day(day: str):
        try:
            return Weekday(day.strip().lower())
        except ValueError:
            return None
