"""Database initialization utilities."""

from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from hostelmanix.config.database import engine as default_engine
from hostelmanix.config.logging import get_logger
from hostelmanix.models import Base

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create any missing tables.

    Suitable for development and tests; existing tables are left as they are.
    """
    bind = bind or default_engine
    existing_tables = set(inspect(bind).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing_tables]

    if not missing:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")
        return

    Base.metadata.create_all(bind=bind)
    logger.info(f"Created tables: {', '.join(sorted(missing))}")
