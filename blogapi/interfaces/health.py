"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
