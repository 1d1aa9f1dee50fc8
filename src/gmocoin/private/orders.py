"""Order information endpoint."""

from __future__ import annotations

from typing import Sequence

from pydantic import Field

from ..endpoints import ORDERS_PATH, PRIVATE_ENDPOINT, private_get
from ..models import ListData, Order
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient
from .params import order_id_batch

MAX_ORDER_IDS = 10


class Orders(Envelope):
    data: ListData[Order] = Field(default_factory=ListData[Order])


class OrdersResponse(RestResponse[Orders]):
    body_model = Orders

    @property
    def orders(self) -> list[Order]:
        return self.body.data.items

    def order(self, order_id: str) -> Order | None:
        for item in self.body.data.items:
            if item.order_id == str(order_id):
                return item
        return None


async def request_orders(
    http_client: HttpClient,
    credentials: Credentials,
    order_ids: Sequence[str],
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> OrdersResponse:
    """Fetch up to ten orders by identifier."""
    ids = order_id_batch(order_ids, MAX_ORDER_IDS)
    joined = ",".join(str(order_id) for order_id in ids)
    return await private_get(
        http_client, credentials, base_url, ORDERS_PATH, OrdersResponse, {"orderId": joined}
    )
