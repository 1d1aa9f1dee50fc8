"""Trading capacity endpoint."""

from __future__ import annotations

from ..coercion import WireInt
from ..endpoints import MARGIN_PATH, PRIVATE_ENDPOINT, private_get
from ..models import WireModel
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class MarginData(WireModel):
    actual_profit_loss: WireInt
    available_amount: WireInt
    margin: WireInt
    profit_loss: WireInt


class Margin(Envelope):
    data: MarginData


class MarginResponse(RestResponse[Margin]):
    body_model = Margin

    @property
    def actual_profit_loss(self) -> int:
        """Total market value of the account in JPY."""
        return self.body.data.actual_profit_loss

    @property
    def available_amount(self) -> int:
        """Trading capacity in JPY."""
        return self.body.data.available_amount

    @property
    def margin(self) -> int:
        """Margin held by open positions."""
        return self.body.data.margin

    @property
    def profit_loss(self) -> int:
        """Unrealized profit and loss."""
        return self.body.data.profit_loss


async def request_margin(
    http_client: HttpClient,
    credentials: Credentials,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> MarginResponse:
    return await private_get(http_client, credentials, base_url, MARGIN_PATH, MarginResponse)
