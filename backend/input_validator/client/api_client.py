"""HTTP client for the validation endpoint."""

from typing import Optional

import httpx
import structlog

from input_validator.config import get_settings
from input_validator.validators.models import ValidationResult

logger = structlog.get_logger()


class TransportFailure(Exception):
    """The endpoint could not be reached or did not return a result."""


class ValidationClient:
    """Synchronous client for ``POST /api/validate``.

    One request per call, no retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS
        self._http = http_client or httpx.Client(timeout=self.timeout)

    def validate(self, value: str) -> ValidationResult:
        """Send one input for validation.

        Raises:
            TransportFailure: on network errors, non-2xx responses or an
                unparseable body
        """
        url = f"{self.base_url}/api/validate"
        try:
            response = self._http.post(url, json={"value": value})
            response.raise_for_status()
            return ValidationResult.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error("validation_request_failed", url=url, error=str(e), error_type=type(e).__name__)
            raise TransportFailure(str(e)) from e
        except ValueError as e:
            # Invalid JSON or a body that is not a ValidationResult
            logger.error("validation_response_invalid", url=url, error=str(e))
            raise TransportFailure(f"Invalid response from {url}") from e

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ValidationClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
