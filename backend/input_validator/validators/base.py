"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Optional

from input_validator.validators.models import ReasonCode


class BaseRule(ABC):
    """Abstract base for all input rules.

    Contract:
        - check() is deterministic and total: it never raises for a str
        - check() returns the ReasonCode it reports, or None when satisfied
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(self, value: str) -> Optional[ReasonCode]:
        """Check the raw, untrimmed input.

        Args:
            value: Candidate input string

        Returns:
            ReasonCode if the rule is violated, otherwise None
        """
        ...
