"""Input Validator — deterministic rules for candidate input strings.

Usage:
    from input_validator.validators import validation_engine

    result = validation_engine.validate(value)
    if not result.valid:
        # result.reasons holds ReasonCode values, e.g. ["too_short", "no_digit"]
"""

from input_validator.validators.engine import ValidationEngine, validation_engine, validate
from input_validator.validators.models import ValidationResult, ReasonCode
from input_validator.validators.base import BaseRule

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "ValidationResult",
    "ReasonCode",
    "BaseRule",
]
