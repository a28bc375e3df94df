"""Form client for the validation endpoint."""

from input_validator.client.api_client import TransportFailure, ValidationClient
from input_validator.client.form import ALERT_MESSAGE, INVALID_HINT, ValidationForm

__all__ = [
    "TransportFailure",
    "ValidationClient",
    "ValidationForm",
    "ALERT_MESSAGE",
    "INVALID_HINT",
]
