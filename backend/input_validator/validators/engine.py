"""Validation Engine — runs every rule in order and produces a ValidationResult.

Usage:
    engine = ValidationEngine()
    result = engine.validate("longenough1")
    if not result.valid:
        # result.reasons lists the violated rules
"""

import time
from typing import Optional

import structlog

from input_validator.validators.base import BaseRule
from input_validator.validators.metrics import count_letters, count_words
from input_validator.validators.models import ReasonCode, ValidationResult

from input_validator.validators.length_rule import MinLengthRule
from input_validator.validators.digit_rule import DigitRule

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates the rule chain.

    Reason codes appear in the order the rules run, so the default chain
    always reports ``too_short`` before ``no_digit``.
    """

    def __init__(self, rules: Optional[list[BaseRule]] = None):
        """Initialize with default rules or a custom list.

        Args:
            rules: Optional list of rules. If None, uses all defaults.
        """
        self.rules = rules if rules is not None else self._default_rules()

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        """Create the default rule chain in execution order."""
        return [
            MinLengthRule(),  # Length check runs first
            DigitRule(),
        ]

    def validate(self, value: str) -> ValidationResult:
        """Run all rules against the input and build the result.

        Args:
            value: Raw candidate input, not trimmed

        Returns:
            ValidationResult with validity, reasons and text metrics
        """
        start_time = time.perf_counter()

        reasons: list[ReasonCode] = []
        for rule in self.rules:
            reason = rule.check(value)
            if reason is not None:
                reasons.append(reason)

        result = ValidationResult.build(
            reasons=reasons,
            word_count=count_words(value),
            letter_count=count_letters(value),
        )

        logger.info(
            "validation_complete",
            valid=result.valid,
            reasons=result.reasons,
            length=len(value),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result

    def add_rule(self, rule: BaseRule) -> None:
        """Append a custom rule to the chain."""
        self.rules.append(rule)

    def remove_rule(self, rule_name: str) -> None:
        """Remove a rule by name."""
        self.rules = [r for r in self.rules if r.name != rule_name]


# Module-level singleton
validation_engine = ValidationEngine()


def validate(value: str) -> ValidationResult:
    """Validate with the default engine."""
    return validation_engine.validate(value)
