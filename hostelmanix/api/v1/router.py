"""
API v1 router: aggregates every endpoint module.
"""

from fastapi import APIRouter

from hostelmanix.api.v1 import (
    attendance,
    auth,
    complaints,
    fees,
    leaves,
    maintenance,
    mess_menu,
    rooms,
    students,
    users,
)
from hostelmanix.config.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

for module in (auth, users, students, rooms, attendance, leaves, complaints, maintenance, fees, mess_menu):
    router.include_router(module.router)


@router.get("/health", tags=["Health"])
def health_check() -> dict:
    return {"status": "OK", "message": "HostelManix API is running"}


logger.debug(f"API v1 router assembled with {len(router.routes)} routes")
