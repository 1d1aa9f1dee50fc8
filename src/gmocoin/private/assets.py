"""Asset balance endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import ASSETS_PATH, PRIVATE_ENDPOINT, private_get
from ..models import Asset
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class Assets(Envelope):
    data: list[Asset] = Field(default_factory=list)


class AssetsResponse(RestResponse[Assets]):
    body_model = Assets

    @property
    def assets(self) -> list[Asset]:
        return self.body.data

    def asset(self, symbol: str) -> Asset | None:
        for item in self.body.data:
            if item.symbol.upper() == symbol.upper():
                return item
        return None

    @property
    def total_as_jpy(self) -> float:
        return sum(item.amount_as_jpy for item in self.body.data)


async def request_assets(
    http_client: HttpClient,
    credentials: Credentials,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> AssetsResponse:
    return await private_get(http_client, credentials, base_url, ASSETS_PATH, AssetsResponse)
