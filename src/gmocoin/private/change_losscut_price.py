"""Loss-cut price change endpoint."""

from __future__ import annotations

from typing import Any

from ..coercion import id_to_wire_int
from ..endpoints import CHANGE_LOSSCUT_PRICE_PATH, PRIVATE_ENDPOINT, private_post
from ..response import EmptyResponse
from ..signing import Credentials
from ..transport import HttpClient
from .params import wire_positive_decimal


def build_change_losscut_price_parameters(position_id: str, losscut_price: int) -> dict[str, Any]:
    return {
        "positionId": id_to_wire_int(position_id),
        "losscutPrice": wire_positive_decimal("losscut_price", losscut_price),
    }


async def request_change_losscut_price(
    http_client: HttpClient,
    credentials: Credentials,
    position_id: str,
    losscut_price: int,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> EmptyResponse:
    body = build_change_losscut_price_parameters(position_id, losscut_price)
    return await private_post(
        http_client, credentials, base_url, CHANGE_LOSSCUT_PRICE_PATH, EmptyResponse, body
    )
