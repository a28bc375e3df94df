"""Tests for the HTTP client used by the form."""

import json

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from input_validator.client import TransportFailure, ValidationClient
from input_validator.config import Settings
from input_validator.main import create_app

MOCK_API_URL = "http://validator.test"


class TestValidationClient:
    @respx.mock
    def test_returns_result(self):
        route = respx.post(f"{MOCK_API_URL}/api/validate").mock(
            return_value=httpx.Response(
                200,
                json={"valid": True, "reasons": [], "wordCount": 2, "letterCount": 8},
            )
        )
        with ValidationClient(base_url=MOCK_API_URL) as client:
            result = client.validate("two words9")

        assert result.valid is True
        assert result.word_count == 2
        assert result.letter_count == 8
        assert route.called
        assert json.loads(route.calls.last.request.content) == {"value": "two words9"}

    @respx.mock
    def test_trailing_slash_in_base_url(self):
        route = respx.post(f"{MOCK_API_URL}/api/validate").mock(
            return_value=httpx.Response(
                200,
                json={"valid": False, "reasons": ["too_short", "no_digit"], "wordCount": 1, "letterCount": 5},
            )
        )
        with ValidationClient(base_url=f"{MOCK_API_URL}/") as client:
            result = client.validate("short")
        assert route.called
        assert result.reasons == ["too_short", "no_digit"]

    @respx.mock
    def test_server_error_raises_transport_failure(self):
        respx.post(f"{MOCK_API_URL}/api/validate").mock(return_value=httpx.Response(500))
        with ValidationClient(base_url=MOCK_API_URL) as client:
            with pytest.raises(TransportFailure):
                client.validate("longenough1")

    @respx.mock
    def test_client_error_raises_transport_failure(self):
        respx.post(f"{MOCK_API_URL}/api/validate").mock(
            return_value=httpx.Response(400, json={"error": "Missing or invalid \"value\" field"})
        )
        with ValidationClient(base_url=MOCK_API_URL) as client:
            with pytest.raises(TransportFailure):
                client.validate("longenough1")

    @respx.mock
    def test_connection_error_raises_transport_failure(self):
        respx.post(f"{MOCK_API_URL}/api/validate").mock(side_effect=httpx.ConnectError("refused"))
        with ValidationClient(base_url=MOCK_API_URL) as client:
            with pytest.raises(TransportFailure):
                client.validate("longenough1")

    @respx.mock
    def test_timeout_raises_transport_failure(self):
        respx.post(f"{MOCK_API_URL}/api/validate").mock(side_effect=httpx.ReadTimeout("slow"))
        with ValidationClient(base_url=MOCK_API_URL) as client:
            with pytest.raises(TransportFailure):
                client.validate("longenough1")

    @respx.mock
    def test_invalid_body_raises_transport_failure(self):
        respx.post(f"{MOCK_API_URL}/api/validate").mock(
            return_value=httpx.Response(200, content=b"<html>not json</html>")
        )
        with ValidationClient(base_url=MOCK_API_URL) as client:
            with pytest.raises(TransportFailure):
                client.validate("longenough1")

    def test_defaults_from_settings(self, monkeypatch):
        monkeypatch.setenv("API_URL", "http://configured.test:9000")
        monkeypatch.setenv("CLIENT_TIMEOUT_SECONDS", "2.5")
        with ValidationClient() as client:
            assert client.base_url == "http://configured.test:9000"
            assert client.timeout == 2.5


class TestAgainstApp:
    """End-to-end through the real application, in process."""

    @pytest.fixture
    def client(self):
        app = create_app(Settings(ENVIRONMENT="development"))
        with TestClient(app) as http:
            yield ValidationClient(base_url="http://testserver", http_client=http)

    def test_short(self, client):
        result = client.validate("short")
        assert result.model_dump(by_alias=True) == {
            "valid": False,
            "reasons": ["too_short", "no_digit"],
            "wordCount": 1,
            "letterCount": 5,
        }

    def test_long_enough(self, client):
        result = client.validate("longenough1")
        assert result.valid is True
        assert result.letter_count == 10
