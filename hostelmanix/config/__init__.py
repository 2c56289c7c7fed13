"""
Configuration package for the hostel management API.

Contains environment settings, database connections and logging setup.
"""

from hostelmanix.config.settings import settings
from hostelmanix.config.database import get_db_session, get_db_context

__all__ = ['settings', 'get_db_session', 'get_db_context']
