"""Tests for the eVatR HTTP client.

Covers:
- URL construction (sorted, URL-encoded query appended to the base endpoint)
- Successful fetch returns the raw body
- Timeout, transport errors and HTTP errors become ServiceUnreachableError
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from evatr.errors import ServiceUnreachableError
from evatr.integrations.bzst.client import EvatrClient

BASE_URL = "https://evatr.example.test/evatrRPC"

# ── Helpers ──────────────────────────────────────────────────────────


def _make_response(content: bytes, status_code: int = 200) -> MagicMock:
    """Build a mock httpx.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.raise_for_status = MagicMock()  # no-op for 200
    return resp


def _patch_http(mock_client_cls: MagicMock, get: MagicMock) -> MagicMock:
    mock_http = MagicMock()
    mock_http.get = get
    mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_http)
    mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)
    return mock_http


# ── Tests ────────────────────────────────────────────────────────────


class TestBuildUrl:
    def test_query_is_sorted_and_encoded(self):
        client = EvatrClient(base_url=BASE_URL)
        url = client.build_url({"UstId_2": "LU26375245", "UstId_1": "DE123456789", "Firmenname": "A & B"})
        assert url == (
            f"{BASE_URL}?Firmenname=A+%26+B&UstId_1=DE123456789&UstId_2=LU26375245"
        )

    def test_trailing_question_mark_in_base_url(self):
        client = EvatrClient(base_url=BASE_URL + "?")
        assert client.build_url({"UstId_1": "DE1"}) == f"{BASE_URL}?UstId_1=DE1"

    def test_defaults_from_settings(self):
        client = EvatrClient()
        assert client.build_url({}).startswith("https://evatr.bff-online.de/evatrRPC?")


class TestFetch:
    def test_returns_raw_body(self):
        client = EvatrClient(base_url=BASE_URL, timeout=3.0)

        with patch("httpx.Client") as mock_client_cls:
            mock_http = _patch_http(mock_client_cls, MagicMock(return_value=_make_response(b"<params/>")))
            body = client.fetch({"UstId_1": "DE123456789", "UstId_2": "LU26375245"})

        assert body == b"<params/>"
        mock_http.get.assert_called_once_with(f"{BASE_URL}?UstId_1=DE123456789&UstId_2=LU26375245")
        timeout = mock_client_cls.call_args.kwargs["timeout"]
        assert timeout.read == 3.0

    def test_timeout_raises_service_unreachable(self):
        client = EvatrClient(base_url=BASE_URL)

        with patch("httpx.Client") as mock_client_cls:
            _patch_http(mock_client_cls, MagicMock(side_effect=httpx.ReadTimeout("timeout")))
            with pytest.raises(ServiceUnreachableError) as exc_info:
                client.fetch({"UstId_1": "DE123456789"})

        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    def test_connect_error_raises_service_unreachable(self):
        client = EvatrClient(base_url=BASE_URL)

        with patch("httpx.Client") as mock_client_cls:
            _patch_http(mock_client_cls, MagicMock(side_effect=httpx.ConnectError("refused")))
            with pytest.raises(ServiceUnreachableError):
                client.fetch({"UstId_1": "DE123456789"})

    def test_http_error_raises_service_unreachable(self):
        client = EvatrClient(base_url=BASE_URL)
        request = httpx.Request("GET", BASE_URL)
        error_response = httpx.Response(503, request=request)
        response = _make_response(b"", status_code=503)
        response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError("unavailable", request=request, response=error_response),
        )

        with patch("httpx.Client") as mock_client_cls:
            _patch_http(mock_client_cls, MagicMock(return_value=response))
            with pytest.raises(ServiceUnreachableError):
                client.fetch({"UstId_1": "DE123456789"})


class TestFetchWithMockTransport:
    """End-to-end through httpx without patching, via MockTransport."""

    def test_round_trip(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"<params/>")

        real_client = httpx.Client

        def client_factory(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        client = EvatrClient(base_url=BASE_URL)
        with patch("httpx.Client", side_effect=client_factory):
            body = client.fetch({"UstId_1": "DE123456789", "UstId_2": "LU26375245"})

        assert body == b"<params/>"
        assert len(seen) == 1
        assert seen[0].url.params["UstId_2"] == "LU26375245"
