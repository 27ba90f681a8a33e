"""API routes for Jira Notifier."""

from typing import Any, Dict

from fastapi import APIRouter

from ..config import settings


# Main API router
api_router = APIRouter()


@api_router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }
