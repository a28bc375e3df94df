"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from input_validator.api.health import router as health_router
from input_validator.api.validate import router as validate_router

api_router = APIRouter()

# Validation
api_router.include_router(validate_router, tags=["Validation"])

# Health check is exported separately — mounted at app root (no /api prefix)
root_router = APIRouter()
root_router.include_router(health_router, tags=["Health"])
