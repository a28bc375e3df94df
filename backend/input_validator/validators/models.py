"""Validation models — reason codes and the result structure.

All validation is deterministic: same input → same output.
"""

from enum import Enum
from pydantic import BaseModel, Field


class ReasonCode(str, Enum):
    """Machine-readable tags naming why an input failed validation."""

    TOO_SHORT = "too_short"
    NO_DIGIT = "no_digit"


class ValidationResult(BaseModel):
    """Outcome of running every rule against one input.

    Serialized with camelCase keys (``wordCount``, ``letterCount``).
    """

    valid: bool = Field(description="True iff no rule reported a reason")
    reasons: list[ReasonCode] = Field(
        default_factory=list,
        description="Reason codes in rule evaluation order",
    )
    word_count: int = Field(default=0, ge=0, alias="wordCount")
    letter_count: int = Field(default=0, ge=0, alias="letterCount")

    model_config = {"populate_by_name": True, "use_enum_values": True}

    @classmethod
    def build(
        cls, reasons: list[ReasonCode], word_count: int, letter_count: int
    ) -> "ValidationResult":
        """Build a result; validity is derived from the reasons list."""
        return cls(
            valid=not reasons,
            reasons=reasons,
            word_count=word_count,
            letter_count=letter_count,
        )
