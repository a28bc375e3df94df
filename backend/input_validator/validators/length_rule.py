"""Length rule — input must be longer than eight characters."""

from typing import Optional

from input_validator.validators.base import BaseRule
from input_validator.validators.models import ReasonCode

# Inputs of this length or shorter are rejected
MIN_LENGTH_EXCLUSIVE = 8


class MinLengthRule(BaseRule):
    """Counts every character, whitespace and punctuation included. No trimming."""

    def __init__(self, min_length_exclusive: int = MIN_LENGTH_EXCLUSIVE):
        self.min_length_exclusive = min_length_exclusive

    @property
    def name(self) -> str:
        return "MinLengthRule"

    def check(self, value: str) -> Optional[ReasonCode]:
        if len(value) <= self.min_length_exclusive:
            return ReasonCode.TOO_SHORT
        return None
