"""Order book endpoint."""

from __future__ import annotations

from pydantic import BaseModel

from ..endpoints import ORDERBOOKS_PATH, PUBLIC_ENDPOINT, public_get
from ..enums import Symbol
from ..models import PriceAndSize
from ..response import Envelope, RestResponse
from ..transport import HttpClient


class OrderbooksData(BaseModel):
    asks: list[PriceAndSize]
    bids: list[PriceAndSize]
    symbol: str

    model_config = {"frozen": True}


class Orderbooks(Envelope):
    data: OrderbooksData


class OrderbooksResponse(RestResponse[Orderbooks]):
    body_model = Orderbooks

    @property
    def asks(self) -> list[PriceAndSize]:
        return self.body.data.asks

    @property
    def bids(self) -> list[PriceAndSize]:
        return self.body.data.bids

    @property
    def symbol(self) -> str:
        return self.body.data.symbol

    @property
    def best_ask(self) -> PriceAndSize | None:
        return self.asks[0] if self.asks else None

    @property
    def best_bid(self) -> PriceAndSize | None:
        return self.bids[0] if self.bids else None


async def request_orderbooks(
    http_client: HttpClient,
    symbol: Symbol | str,
    *,
    base_url: str = PUBLIC_ENDPOINT,
) -> OrderbooksResponse:
    params = {"symbol": Symbol(symbol)}
    return await public_get(http_client, base_url, ORDERBOOKS_PATH, OrderbooksResponse, params)
