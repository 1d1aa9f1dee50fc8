"""Active order list endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import ACTIVE_ORDERS_PATH, PRIVATE_ENDPOINT, private_get
from ..enums import Symbol
from ..models import Order, PagedListData
from ..response import DEFAULT_COUNT, DEFAULT_PAGE, Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class ActiveOrders(Envelope):
    data: PagedListData[Order] = Field(default_factory=PagedListData[Order])


class ActiveOrdersResponse(RestResponse[ActiveOrders]):
    body_model = ActiveOrders

    @property
    def active_orders(self) -> list[Order]:
        return self.body.data.items

    @property
    def current_page(self) -> int:
        return self.body.data.pagination.current_page

    @property
    def count(self) -> int:
        return self.body.data.pagination.count


async def request_active_orders(
    http_client: HttpClient,
    credentials: Credentials,
    symbol: Symbol | str,
    page: int = DEFAULT_PAGE,
    count: int = DEFAULT_COUNT,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> ActiveOrdersResponse:
    params = {"symbol": Symbol(symbol), "page": page, "count": count}
    return await private_get(
        http_client, credentials, base_url, ACTIVE_ORDERS_PATH, ActiveOrdersResponse, params
    )
