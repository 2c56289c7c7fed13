"""
Base repository with standardized CRUD operations and error handling.

Provides the foundation for all domain repositories. Storage failures are
re-raised as application exceptions after the session has been rolled
back, so callers never see a half-failed session.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hostelmanix.config.logging import get_logger
from hostelmanix.core.exceptions import DatabaseError, DuplicateEntryError
from hostelmanix.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model class.

    Provides CRUD operations and transaction handling for all domain
    repositories.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self):
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction():
                repository.create(entity, commit=False)
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Transaction rollback on integrity error: {e.orig}")
            raise DuplicateEntryError(
                f"{self.model.__name__} violates a uniqueness constraint",
                table=self.model.__tablename__,
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {str(e)}", exc_info=True)
            raise DatabaseError(f"Transaction failed: {str(e)}", table=self.model.__tablename__) from e

    def commit(self) -> None:
        """Commit current transaction."""
        with self.transaction():
            pass

    def rollback(self) -> None:
        """Rollback current transaction."""
        self.db.rollback()

    # ==================== Create Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Persist a new entity.

        Raises:
            DuplicateEntryError: If a unique key is already taken
            DatabaseError: On any other storage failure
        """
        with self.transaction() if commit else self._flushing():
            self.db.add(entity)

        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """Find entity by primary key, or None."""
        if not id:
            return None
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Find by ID failed: {str(e)}", table=self.model.__tablename__) from e

    def find_one_by(self, **criteria: Any) -> Optional[ModelType]:
        """Find the first entity whose columns equal the given values."""
        try:
            stmt = select(self.model).filter_by(**criteria).limit(1)
            return self.db.scalars(stmt).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Find one failed: {str(e)}", table=self.model.__tablename__) from e

    def find_all(self, *order_by: Any, **criteria: Any) -> List[ModelType]:
        """
        Find all entities matching the given column values.

        Args:
            order_by: Column expressions to sort by
            criteria: Equality filters
        """
        try:
            stmt = select(self.model).filter_by(**criteria)
            if order_by:
                stmt = stmt.order_by(*order_by)
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Find all failed: {str(e)}", table=self.model.__tablename__) from e

    def find_by_ids(self, ids: Sequence[str]) -> List[ModelType]:
        """Entities with the given ids, in the order of ``ids``; unknown ids are skipped."""
        if not ids:
            return []
        try:
            rows = self.db.scalars(select(self.model).where(self.model.id.in_(list(ids)))).all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Find by IDs failed: {str(e)}", table=self.model.__tablename__) from e
        by_id = {row.id: row for row in rows}
        return [by_id[i] for i in ids if i in by_id]

    def count(self, **criteria: Any) -> int:
        try:
            stmt = select(func.count()).select_from(self.model).filter_by(**criteria)
            return self.db.scalar(stmt) or 0
        except SQLAlchemyError as e:
            raise DatabaseError(f"Count failed: {str(e)}", table=self.model.__tablename__) from e

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Apply ``data`` to an entity and persist it.

        Keys that are not attributes of the model are ignored.
        """
        with self.transaction() if commit else self._flushing():
            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)

        logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType, commit: bool = True) -> None:
        """Hard delete an entity."""
        entity_id = entity.id
        with self.transaction() if commit else self._flushing():
            self.db.delete(entity)

        logger.info(f"Deleted {self.model.__name__} with id: {entity_id}")

    # ==================== Utility Operations ====================

    def refresh(self, entity: ModelType) -> ModelType:
        """Reload an entity's state from the database."""
        self.db.refresh(entity)
        return entity

    @contextmanager
    def _flushing(self):
        """Like ``transaction`` but only flushes, leaving the commit to the caller."""
        try:
            yield self.db
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                f"{self.model.__name__} violates a uniqueness constraint",
                table=self.model.__tablename__,
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(f"Flush failed: {str(e)}", table=self.model.__tablename__) from e
