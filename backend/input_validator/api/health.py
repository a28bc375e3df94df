"""Health check endpoint."""

from fastapi import APIRouter

from input_validator.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check. The service has no dependencies to probe."""
    return HealthResponse(ok=True)
