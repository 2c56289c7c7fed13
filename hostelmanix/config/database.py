"""
Database connection settings for the hostel management API.
Provides SQLAlchemy session management and connection pooling.
"""

import sqlite3
import time
from contextlib import contextmanager
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from hostelmanix.config.logging import get_logger
from hostelmanix.config.settings import settings

logger = get_logger(__name__)

SLOW_QUERY_SECONDS = 0.5


def engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured backend"""
    if settings.is_sqlite():
        return {
            "echo": settings.DB_ECHO,
            "connect_args": {"check_same_thread": False, **settings.DB_CONNECT_ARGS},
        }
    return {
        "pool_pre_ping": True,  # Check connection before using it
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_POOL_OVERFLOW,
        "pool_recycle": 3600,   # Recycle connections after 1 hour
        "echo": settings.DB_ECHO,
        "connect_args": settings.DB_CONNECT_ARGS,
    }


engine = create_engine(settings.get_database_url(), **engine_options())

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE clauses unless foreign keys are switched on"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - start timer"""
    conn.info.setdefault('query_start_time', []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - stop timer and log if slow query"""
    total_time = time.time() - conn.info['query_start_time'].pop()

    if total_time > SLOW_QUERY_SECONDS:
        logger.warning(
            f"Slow query detected ({total_time:.4f}s): {statement[:100]}..."
        )


def get_db_session() -> Generator[Session, None, None]:
    """Get database session with automatic cleanup"""
    session = SessionLocal()
    try:
        yield session
    except Exception as e:
        logger.error(f"Database session error: {str(e)}")
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Context manager for database sessions"""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception as e:
        logger.error(f"Database context error: {str(e)}")
        session.rollback()
        raise
    finally:
        session.close()
