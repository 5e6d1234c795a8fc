"""
Health check route for load balancers and monitoring.
"""
from fastapi import APIRouter

from .. import __version__
from ..config import get_settings
from ..database import check_database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health_check():
    """Report service status and database connectivity."""
    settings = get_settings()
    database_ok = check_database()
    return {
        "status": "healthy" if database_ok else "degraded",
        "environment": settings.environment,
        "version": __version__,
        "database": "ok" if database_ok else "unavailable",
    }
