"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthCheckResponse)
async def health_check(response: Response, session: AsyncSession = Depends(get_db_session)):
    """Database and Redis status; 503 when the database is unreachable.

    A missing Redis only degrades the service (logout revocation is skipped).
    """
    report = await HealthService(session).get_health_status()
    if report.status == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report


@router.get("/database", response_model=Dict[str, Any])
async def database_health(response: Response, session: AsyncSession = Depends(get_db_session)):
    check = await HealthService(session).check_database_health()
    if not check["connected"]:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return check


@router.get("/redis", response_model=Dict[str, Any])
async def redis_health():
    # no database session needed for the Redis probe
    return await HealthService().check_redis_health()
