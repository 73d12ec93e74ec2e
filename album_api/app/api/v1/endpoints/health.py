"""
Health check endpoint.

Used by monitoring and load balancers; always answers 200 with the
service name and version from settings.
"""

from typing import Dict

from fastapi import APIRouter

from album_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def health_check() -> Dict[str, str]:
    return {
        "status": "healthy",
        "service": settings.project_name,
        "version": settings.api_version,
    }
