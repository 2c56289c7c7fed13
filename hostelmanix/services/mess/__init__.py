"""Mess services."""

from hostelmanix.services.mess.mess_menu_service import MessMenuService

__all__ = ["MessMenuService"]
