"""Health check endpoint."""

from fastapi import APIRouter

from moodlens.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    """Return API health status and the zone used for day bucketing."""
    return {"status": "ok", "timezone": settings.display_timezone}
