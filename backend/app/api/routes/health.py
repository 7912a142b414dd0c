"""Health check endpoint."""

import time

from fastapi import APIRouter

from backend.app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check.

    Returns:
        200 OK always, with the current unix time
    """
    return HealthResponse(status="ok", timestamp=int(time.time()))
