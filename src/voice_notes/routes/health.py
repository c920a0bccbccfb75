"""Liveness endpoint."""

from fastapi import APIRouter

from voice_notes.response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Simple health check endpoint."""
    return HealthResponse(status="ok")
