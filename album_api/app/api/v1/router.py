"""
Top‑level router for version 1 of the API.

This router aggregates the album and health routers.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import albums, health

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(albums.router, prefix="/albums", tags=["albums"])
