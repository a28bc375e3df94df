"""Form state controller — input value, in-flight flag and last result.

Rendering is left to the caller: it reads the state and supplies callbacks
for the two side effects the form needs (an alert and returning focus to
the input).
"""

from typing import Callable, Optional

import structlog

from input_validator.client.api_client import TransportFailure, ValidationClient
from input_validator.validators.models import ValidationResult

logger = structlog.get_logger()

ALERT_MESSAGE = "An error occurred while validating. Please try again."
INVALID_HINT = "Must be > 8 characters and include at least one number."


class ValidationForm:
    """UI state for the validation form."""

    def __init__(
        self,
        client: ValidationClient,
        on_alert: Callable[[str], None],
        on_focus: Optional[Callable[[], None]] = None,
    ):
        self.client = client
        self.on_alert = on_alert
        self.on_focus = on_focus or (lambda: None)

        self.input_value = ""
        self.is_loading = False
        self.result: Optional[ValidationResult] = None

    @property
    def can_submit(self) -> bool:
        """Mirrors the submit button: disabled while loading or when empty."""
        return not self.is_loading and bool(self.input_value)

    def set_input(self, value: str) -> None:
        if self.is_loading:
            return
        self.input_value = value

    def submit(self) -> Optional[ValidationResult]:
        """Send the current input and update state.

        Returns:
            The result, or None if nothing was sent or the request failed
        """
        if self.is_loading:
            return None

        self.is_loading = True
        self.result = None
        try:
            result = self.client.validate(self.input_value)
            self.result = result
            if not result.valid:
                self.input_value = ""
                self.on_focus()
            return result
        except TransportFailure as e:
            logger.error("validation_error", error=str(e))
            self.on_alert(ALERT_MESSAGE)
            return None
        finally:
            self.is_loading = False
