"""Tests for the HTTP transports with a mocked aiohttp session."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from gmocoin.errors import TransportError, UrlError
from gmocoin.signing import canonical_json
from gmocoin.transport import AiohttpClient, InMemoryClient, RawResponse


def create_async_response(status=200, text=""):
    """Create a mock async response."""
    resp = AsyncMock()
    resp.status = status
    resp.text = AsyncMock(return_value=text)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def create_session(resp=None, side_effect=None):
    session = MagicMock()
    session.request = MagicMock(return_value=resp, side_effect=side_effect)
    session.close = AsyncMock()
    return session


class TestAiohttpClient:
    @pytest.mark.asyncio
    async def test_get_passes_status_and_body_through(self):
        session = create_session(create_async_response(503, "<html>maintenance</html>"))
        client = AiohttpClient(session=session)

        raw = await client.get("https://api.coin.z.com/public/v1/status", {})

        assert raw == RawResponse(503, "<html>maintenance</html>")
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://api.coin.z.com/public/v1/status")
        assert kwargs["data"] is None

        await client.close()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_post_sends_canonical_json(self):
        session = create_session(create_async_response(200, "{}"))
        client = AiohttpClient(session=session, proxy="http://proxy:8080")
        body = {"orderId": 637000}

        await client.post("https://api.coin.z.com/private/v1/cancelOrder", {"API-KEY": "k"}, body)

        args, kwargs = session.request.call_args
        assert args[0] == "POST"
        assert kwargs["data"] == canonical_json(body)
        assert kwargs["headers"] == {"API-KEY": "k"}
        assert kwargs["proxy"] == "http://proxy:8080"

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self):
        session = create_session(side_effect=aiohttp.ClientConnectionError("connection refused"))
        client = AiohttpClient(session=session)

        with pytest.raises(TransportError):
            await client.get("https://api.coin.z.com/public/v1/status", {})

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        session = create_session(side_effect=asyncio.TimeoutError())
        client = AiohttpClient(session=session, timeout_seconds=0.5)

        with pytest.raises(TransportError, match="timed out"):
            await client.get("https://api.coin.z.com/public/v1/status", {})

    @pytest.mark.asyncio
    async def test_invalid_url_is_url_error(self):
        session = create_session(side_effect=aiohttp.InvalidURL("not a url"))
        client = AiohttpClient(session=session)

        with pytest.raises(UrlError):
            await client.get("not a url", {})

    @pytest.mark.asyncio
    async def test_close_without_session(self):
        client = AiohttpClient()
        await client.close()
        assert client.session is None


class TestInMemoryClient:
    @pytest.mark.asyncio
    async def test_records_requests(self):
        client = InMemoryClient(body_text='{"status":0}')

        raw = await client.post("https://example.test/v1/order", {"API-KEY": "k"}, {"size": "1"})

        assert raw == RawResponse(200, '{"status":0}')
        assert client.last_request.method == "POST"
        assert client.last_request.json_body == {"size": "1"}

    @pytest.mark.asyncio
    async def test_fail_raises_transport_error(self):
        client = InMemoryClient(fail=True)

        with pytest.raises(TransportError):
            await client.get("https://example.test/v1/status", {})
        assert len(client.requests) == 1
