"""Trade history endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import PUBLIC_ENDPOINT, TRADES_PATH, public_get
from ..enums import Symbol
from ..models import PagedListData, Trade
from ..response import DEFAULT_COUNT, DEFAULT_PAGE, Envelope, RestResponse
from ..transport import HttpClient


class Trades(Envelope):
    data: PagedListData[Trade] = Field(default_factory=PagedListData[Trade])


class TradesResponse(RestResponse[Trades]):
    body_model = Trades

    @property
    def trades(self) -> list[Trade]:
        return self.body.data.items

    @property
    def current_page(self) -> int:
        return self.body.data.pagination.current_page

    @property
    def count(self) -> int:
        return self.body.data.pagination.count


async def request_trades(
    http_client: HttpClient,
    symbol: Symbol | str,
    page: int = DEFAULT_PAGE,
    count: int = DEFAULT_COUNT,
    *,
    base_url: str = PUBLIC_ENDPOINT,
) -> TradesResponse:
    params = {"symbol": Symbol(symbol), "page": page, "count": count}
    return await public_get(http_client, base_url, TRADES_PATH, TradesResponse, params)
