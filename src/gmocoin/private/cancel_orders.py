"""Multiple order cancellation endpoint.

Partial failure is a normal outcome: the result lists the identifiers that
were cancelled and, separately, one structured failure per rejected id.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from ..coercion import WireIdList, id_to_wire_int
from ..endpoints import CANCEL_ORDERS_PATH, PRIVATE_ENDPOINT, private_post
from ..models import CancelFailure
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient
from .params import order_id_batch

MAX_CANCEL_ORDER_IDS = 10


class CancelOrdersData(BaseModel):
    failed: list[CancelFailure] = Field(default_factory=list)
    success: WireIdList = Field(default_factory=list)

    model_config = {"frozen": True}


class CancelOrders(Envelope):
    data: CancelOrdersData = Field(default_factory=CancelOrdersData)


class CancelOrdersResponse(RestResponse[CancelOrders]):
    body_model = CancelOrders

    @property
    def success(self) -> list[str]:
        return self.body.data.success

    @property
    def failed(self) -> list[CancelFailure]:
        return self.body.data.failed

    @property
    def all_succeeded(self) -> bool:
        return not self.body.data.failed


def build_cancel_orders_parameters(order_ids: Sequence[str]) -> dict[str, list[int]]:
    ids = order_id_batch(order_ids, MAX_CANCEL_ORDER_IDS)
    return {"orderIds": [id_to_wire_int(order_id) for order_id in ids]}


async def request_cancel_orders(
    http_client: HttpClient,
    credentials: Credentials,
    order_ids: Sequence[str],
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> CancelOrdersResponse:
    body = build_cancel_orders_parameters(order_ids)
    return await private_post(
        http_client, credentials, base_url, CANCEL_ORDERS_PATH, CancelOrdersResponse, body
    )
