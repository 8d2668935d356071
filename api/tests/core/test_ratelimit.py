"""Unit tests for core.ratelimit module."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from slowapi.errors import RateLimitExceeded

from core.ratelimit import rate_limit_exceeded_handler


def _make_rate_limit_exc(
    detail: str = "5 per 1 minute", retry_after: int = 30
) -> RateLimitExceeded:
    """Create a RateLimitExceeded with a mock Limit object."""
    mock_limit = MagicMock()
    mock_limit.error_message = None
    mock_limit.limit = detail
    exc = RateLimitExceeded(mock_limit)
    object.__setattr__(exc, "retry_after", retry_after)
    return exc


def _make_request() -> Request:
    request = MagicMock(spec=Request)
    request.client.host = "10.0.0.1"
    request.headers = {}
    request.url.path = "/admins/login"
    return request


@pytest.mark.unit
class TestRateLimitExceededHandler:
    def test_returns_envelope_shaped_429(self):
        response = rate_limit_exceeded_handler(_make_request(), _make_rate_limit_exc())

        assert response.status_code == 429
        body = json.loads(response.body)
        assert body["statusCode"] == 429
        assert "message" in body

    def test_sets_retry_after_header(self):
        response = rate_limit_exceeded_handler(
            _make_request(), _make_rate_limit_exc(retry_after=42)
        )

        assert response.headers["Retry-After"] == "42"
