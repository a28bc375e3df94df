"""API response models."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Client or server error payload."""

    error: str


class HealthResponse(BaseModel):
    """Liveness check response."""

    ok: bool = True
