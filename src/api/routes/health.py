"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter

from src.search.discovery import format_timestamp

router = APIRouter()


@router.get("/")
async def root_status() -> dict[str, str]:
    """Liveness probe with the current server time."""
    return {"status": "ok", "time": format_timestamp(datetime.now(UTC))}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check."""
    return {"status": "healthy", "service": "record-search"}
