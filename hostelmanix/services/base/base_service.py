"""
Base service class providing common functionality for all services.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostelmanix.config.logging import get_logger
from hostelmanix.core.exceptions import BaseAppException, DatabaseError, DuplicateEntryError
from hostelmanix.repositories.base_repository import BaseRepository
from hostelmanix.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Consistent error handling via ServiceResult
    - Lookup helpers returning not-found results
    """

    resource_name = "Resource"

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(f"hostelmanix.services.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert an exception raised below the service into a failed result.

        Uniqueness violations become ``CONFLICT`` and are logged as warnings;
        anything else is logged with its traceback.
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        error_code = self._map_exception_to_error_code(exception)

        if error_code == ErrorCode.CONFLICT:
            self._logger.warning(f"Conflict during {operation}: {exception}", extra=context)
            return ServiceResult.conflict(
                message=getattr(exception, "message", str(exception)),
                details={"entity_ref": context["entity_ref"]},
            )

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )
        return ServiceResult.failure(
            ServiceError(
                code=error_code,
                message=f"Failed to {operation}",
                details={
                    "error": str(exception),
                    "entity_ref": context["entity_ref"],
                },
                severity=ErrorSeverity.CRITICAL,
            )
        )

    def _map_exception_to_error_code(self, exception: Exception) -> ErrorCode:
        """Map exception types to service error codes."""
        exception_mapping = (
            (DuplicateEntryError, ErrorCode.CONFLICT),
            (DatabaseError, ErrorCode.DATABASE_ERROR),
            (SQLAlchemyError, ErrorCode.DATABASE_ERROR),
            (ValueError, ErrorCode.VALIDATION_ERROR),
            (BaseAppException, ErrorCode.OPERATION_FAILED),
        )
        for exc_type, error_code in exception_mapping:
            if isinstance(exception, exc_type):
                return error_code

        return ErrorCode.INTERNAL_ERROR

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, entity_id: str) -> ServiceResult[TModel]:
        """Retrieve an entity by primary key."""
        entity = self.repository.find_by_id(entity_id)
        if not entity:
            return ServiceResult.not_found(self.resource_name, entity_id)
        return ServiceResult.success(entity)

    def delete_by_id(self, entity_id: str) -> ServiceResult[bool]:
        """Hard delete an entity by primary key."""
        entity = self.repository.find_by_id(entity_id)
        if not entity:
            return ServiceResult.not_found(self.resource_name, entity_id)
        try:
            self.repository.delete(entity)
        except DatabaseError as e:
            return self._handle_exception(e, f"delete {self.resource_name.lower()}", entity_id)
        return ServiceResult.success(True, message=f"{self.resource_name} deleted successfully")
