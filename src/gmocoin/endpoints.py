"""Endpoint origins, paths and the shared request pipeline.

Each endpoint module builds its parameters and hands them to one of
:func:`public_get`, :func:`private_get` or :func:`private_post`, which compose
URL building, signing, transport and envelope decoding.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Mapping, TypeVar
from urllib.parse import urlencode, urlsplit

from .errors import GmoCoinError, UnknownError, UrlError
from .response import RestResponse, decode
from .signing import Credentials, get_headers_for, post_headers_for
from .transport import HttpClient, RawResponse

logger = logging.getLogger(__name__)

PUBLIC_ENDPOINT = "https://api.coin.z.com/public"
PRIVATE_ENDPOINT = "https://api.coin.z.com/private"

STATUS_PATH = "/v1/status"
TICKER_PATH = "/v1/ticker"
ORDERBOOKS_PATH = "/v1/orderbooks"
TRADES_PATH = "/v1/trades"

MARGIN_PATH = "/v1/account/margin"
ASSETS_PATH = "/v1/account/assets"
ORDERS_PATH = "/v1/orders"
ACTIVE_ORDERS_PATH = "/v1/activeOrders"
EXECUTIONS_PATH = "/v1/executions"
LATEST_EXECUTIONS_PATH = "/v1/latestExecutions"
OPEN_POSITIONS_PATH = "/v1/openPositions"
POSITION_SUMMARY_PATH = "/v1/positionSummary"
ORDER_PATH = "/v1/order"
CHANGE_ORDER_PATH = "/v1/changeOrder"
CHANGE_LOSSCUT_PRICE_PATH = "/v1/changeLosscutPrice"
CANCEL_ORDER_PATH = "/v1/cancelOrder"
CANCEL_ORDERS_PATH = "/v1/cancelOrders"
CANCEL_BULK_ORDER_PATH = "/v1/cancelBulkOrder"
CLOSE_ORDER_PATH = "/v1/closeOrder"
CLOSE_BULK_ORDER_PATH = "/v1/closeBulkOrder"

ResponseT = TypeVar("ResponseT", bound=RestResponse)


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(base_url: str, path: str, params: Mapping[str, Any] | None = None) -> str:
    """Join base URL, path and an urlencoded query. ``None`` values are dropped.

    Raises:
        UrlError: If the base URL is not absolute http(s) or the path is relative
    """
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlError(f"Base URL must be an absolute http(s) URL: {base_url!r}")
    if not path.startswith("/"):
        raise UrlError(f"Endpoint path must start with '/': {path!r}")

    url = f"{base_url.rstrip('/')}{path}"
    query = {key: _query_value(value) for key, value in (params or {}).items() if value is not None}
    if query:
        url = f"{url}?{urlencode(query, safe=',')}"
    return url


async def _send(call: Awaitable[RawResponse], method: str, url: str) -> RawResponse:
    try:
        return await call
    except GmoCoinError:
        raise
    except Exception as e:
        logger.error(f"Unexpected transport failure on {method} {url}: {e}")
        raise UnknownError(f"{method} {url} failed unexpectedly: {e}") from e


async def public_get(
    http_client: HttpClient,
    base_url: str,
    path: str,
    response_cls: type[ResponseT],
    params: Mapping[str, Any] | None = None,
) -> ResponseT:
    url = build_url(base_url, path, params)
    logger.debug("GET %s", url)
    raw = await _send(http_client.get(url, {}), "GET", url)
    return decode(raw, response_cls)


async def private_get(
    http_client: HttpClient,
    credentials: Credentials,
    base_url: str,
    path: str,
    response_cls: type[ResponseT],
    params: Mapping[str, Any] | None = None,
) -> ResponseT:
    url = build_url(base_url, path, params)
    headers = get_headers_for(credentials, path)
    logger.debug("GET %s (signed)", url)
    raw = await _send(http_client.get(url, headers), "GET", url)
    return decode(raw, response_cls)


async def private_post(
    http_client: HttpClient,
    credentials: Credentials,
    base_url: str,
    path: str,
    response_cls: type[ResponseT],
    body: dict[str, Any],
) -> ResponseT:
    url = build_url(base_url, path)
    headers = post_headers_for(credentials, path, body)
    logger.debug("POST %s (signed)", url)
    raw = await _send(http_client.post(url, headers, body), "POST", url)
    return decode(raw, response_cls)
