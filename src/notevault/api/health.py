"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


def _health_service(request: Request, session: AsyncSession) -> HealthService:
    return HealthService(session, getattr(request.app.state, "redis", None))


@router.get("", response_model=HealthCheckResponse)
async def health_check(request: Request, session: AsyncSession = Depends(get_db_session)):
    """Get overall system health status."""
    return await _health_service(request, session).get_health_status()


@router.get("/database", response_model=Dict[str, Any])
async def database_health(request: Request, session: AsyncSession = Depends(get_db_session)):
    """Check database connectivity."""
    return await _health_service(request, session).check_database_health()


@router.get("/redis", response_model=Dict[str, Any])
async def redis_health(request: Request, session: AsyncSession = Depends(get_db_session)):
    """Check Redis connectivity."""
    return await _health_service(request, session).check_redis_health()
