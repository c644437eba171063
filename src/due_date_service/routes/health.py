"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Return service health and which date recognizer is active."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "recognizer": "dateparser" if settings.recognizer_enabled else "phrases-only",
    }
