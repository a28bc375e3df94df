"""API request models."""

from pydantic import BaseModel, Field, StrictStr


class ValidateRequest(BaseModel):
    """Candidate input to run through the validation rules."""

    # Strict: numbers, booleans and null are malformed, not coerced
    value: StrictStr = Field(
        ...,
        description="Raw input string, validated untrimmed",
        examples=["longenough1"],
    )
