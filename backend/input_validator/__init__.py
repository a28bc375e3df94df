"""Input Validator — text input validation service and form client."""

__version__ = "1.0.0"
