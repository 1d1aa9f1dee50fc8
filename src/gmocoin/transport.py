"""HTTP transport capability and its implementations.

Endpoint functions only see the :class:`HttpClient` protocol. The body is
never interpreted here: status code and text are passed through verbatim.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp

from .errors import TransportError, UrlError
from .signing import canonical_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status code and body text exactly as received."""

    http_status_code: int
    body_text: str


class HttpClient(Protocol):
    """Minimal HTTP capability used by every endpoint."""

    async def get(self, url: str, headers: dict[str, str]) -> RawResponse:
        """Send a GET request and return the raw response."""
        ...

    async def post(self, url: str, headers: dict[str, str], json_body: Any) -> RawResponse:
        """Send a POST request with a JSON body and return the raw response."""
        ...


class AiohttpClient:
    """Network-backed client over a lazily created ``aiohttp.ClientSession``."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        proxy: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.proxy = proxy
        self.session = session

    async def __aenter__(self) -> AiohttpClient:
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self.session = aiohttp.ClientSession(timeout=timeout)
        return self.session

    async def get(self, url: str, headers: dict[str, str]) -> RawResponse:
        return await self._send("GET", url, headers, None)

    async def post(self, url: str, headers: dict[str, str], json_body: Any) -> RawResponse:
        return await self._send("POST", url, headers, canonical_json(json_body))

    async def _send(self, method: str, url: str, headers: dict[str, str], data: str | None) -> RawResponse:
        session = await self._ensure_session()
        try:
            async with session.request(method, url, headers=headers, data=data, proxy=self.proxy) as resp:
                body_text = await resp.text()
                return RawResponse(resp.status, body_text)
        except aiohttp.InvalidURL as e:
            raise UrlError(f"Invalid URL {url}: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out after {self.timeout_seconds}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    async def close(self) -> None:
        """Close the underlying session."""
        if self.session:
            await self.session.close()
            self.session = None


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    json_body: Any = None


@dataclass
class InMemoryClient:
    """Test double returning a programmed response or failing on demand."""

    http_status_code: int = 200
    body_text: str = ""
    fail: bool = False
    requests: list[RecordedRequest] = field(default_factory=list)

    async def get(self, url: str, headers: dict[str, str]) -> RawResponse:
        self.requests.append(RecordedRequest("GET", url, dict(headers)))
        return self._result()

    async def post(self, url: str, headers: dict[str, str], json_body: Any) -> RawResponse:
        self.requests.append(RecordedRequest("POST", url, dict(headers), json_body))
        return self._result()

    def _result(self) -> RawResponse:
        if self.fail:
            raise TransportError("simulated transport failure")
        return RawResponse(self.http_status_code, self.body_text)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]
