"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
A GET 200, so the envelope middleware passes it through untouched.
"""

from fastapi import APIRouter, Request

from gateway.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return health status and the version of the running app's settings."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
