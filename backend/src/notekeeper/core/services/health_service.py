"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ... import __version__
from ..redis_client import get_redis_client
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: Optional[AsyncSession] = None):
        self.session = session

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status.

        The database is required; Redis only backs token revocation, so
        losing it degrades the service instead of failing it.
        """
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        if not db_health["connected"]:
            overall_status = "unhealthy"
        elif not redis_health["connected"]:
            overall_status = "degraded"
        else:
            overall_status = "healthy"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            version=__version__,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        try:
            start_time = time.perf_counter()
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
            response_time = (time.perf_counter() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except Exception as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": None,
            }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection used for the token blacklist."""
        client = get_redis_client()
        if not client.is_connected:
            return {
                "connected": False,
                "status": "unavailable",
                "error": "Redis not connected",
                "response_time_ms": None,
            }
        try:
            start_time = time.perf_counter()
            await client.ping()
            response_time = (time.perf_counter() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except Exception as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": None,
            }
