# tests/managers/test_rate_limiter.py
"""Tests for bloglist/managers/rate_limiter.py module."""

from unittest.mock import MagicMock, patch

import orjson

from bloglist.managers.metrics import metrics_manager
from bloglist.managers.rate_limiter import (
    close_limiter,
    get_identifier,
    limiter,
    rate_limit_exceeded_handler,
)


class TestGetIdentifier:
    def test_returns_api_key_when_present(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = "test-api-key-123"

        assert get_identifier(request) == "apikey:test-api-key-123"

    def test_returns_ip_when_no_api_key(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = None

        with patch(
            "bloglist.managers.rate_limiter.get_remote_address",
            return_value="192.168.1.100",
        ):
            assert get_identifier(request) == "ip:192.168.1.100"


def test_limiter_disabled_in_tests() -> None:
    assert limiter.enabled is False


async def test_close_limiter() -> None:
    await close_limiter()


async def test_rate_limit_exceeded_handler() -> None:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/blogs"
    exc = MagicMock()
    exc.detail = "10 per 1 minute"
    hits_before = metrics_manager.get_metrics()["rate_limit_hits"]

    with patch("bloglist.managers.rate_limiter._rate_limit_exceeded_handler") as mock_handler:
        mock_handler.return_value.headers = {"retry-after": "60"}
        response = await rate_limit_exceeded_handler(request, exc)

    assert response.status_code == 429
    assert orjson.loads(response.body) == {
        "detail": "Rate limit exceeded",
        "allowed_requests": "10 per 1 minute",
        "retry_after": "60 seconds",
    }
    assert metrics_manager.get_metrics()["rate_limit_hits"] == hits_before + 1
