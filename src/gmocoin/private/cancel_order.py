"""Single order cancellation endpoint."""

from __future__ import annotations

from ..coercion import id_to_wire_int
from ..endpoints import CANCEL_ORDER_PATH, PRIVATE_ENDPOINT, private_post
from ..response import EmptyResponse
from ..signing import Credentials
from ..transport import HttpClient


async def request_cancel_order(
    http_client: HttpClient,
    credentials: Credentials,
    order_id: str,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> EmptyResponse:
    body = {"orderId": id_to_wire_int(order_id)}
    return await private_post(http_client, credentials, base_url, CANCEL_ORDER_PATH, EmptyResponse, body)
