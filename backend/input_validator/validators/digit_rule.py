"""Digit rule — input must contain at least one ASCII digit."""

from typing import Optional

from input_validator.validators.base import BaseRule
from input_validator.validators.models import ReasonCode


def is_ascii_digit(ch: str) -> bool:
    # str.isdigit() would accept Unicode digits such as "٣"
    return "0" <= ch <= "9"


class DigitRule(BaseRule):
    """Any character in 0-9 satisfies the rule; Unicode digits do not."""

    @property
    def name(self) -> str:
        return "DigitRule"

    def check(self, value: str) -> Optional[ReasonCode]:
        if any(is_ascii_digit(ch) for ch in value):
            return None
        return ReasonCode.NO_DIGIT
