"""Order change endpoint."""

from __future__ import annotations

from typing import Any

from ..coercion import id_to_wire_int
from ..endpoints import CHANGE_ORDER_PATH, PRIVATE_ENDPOINT, private_post
from ..response import EmptyResponse
from ..signing import Credentials
from ..transport import HttpClient
from .params import wire_positive_decimal


def build_change_order_parameters(order_id: str, price: int, losscut_price: int | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {
        "orderId": id_to_wire_int(order_id),
        "price": wire_positive_decimal("price", price),
    }
    if losscut_price is not None:
        body["losscutPrice"] = wire_positive_decimal("losscut_price", losscut_price)
    return body


async def request_change_order(
    http_client: HttpClient,
    credentials: Credentials,
    order_id: str,
    price: int,
    losscut_price: int | None = None,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> EmptyResponse:
    body = build_change_order_parameters(order_id, price, losscut_price)
    return await private_post(http_client, credentials, base_url, CHANGE_ORDER_PATH, EmptyResponse, body)
