"""Validation API — run one input through the rule chain."""

from fastapi import APIRouter

import structlog

from input_validator.models.requests import ValidateRequest
from input_validator.models.responses import ErrorResponse
from input_validator.validators import ValidationResult, validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/validate",
    response_model=ValidationResult,
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid \"value\" field"}},
)
async def validate_input(payload: ValidateRequest):
    """Validate a candidate input.

    Rule violations are a normal 200 result with ``valid=false``. A body
    without a string ``value`` is rejected with 400 before any rule runs.
    """
    return validation_engine.validate(payload.value)
