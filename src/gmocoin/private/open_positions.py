"""Open position list endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import OPEN_POSITIONS_PATH, PRIVATE_ENDPOINT, private_get
from ..enums import Symbol
from ..models import PagedListData, Position
from ..response import DEFAULT_COUNT, DEFAULT_PAGE, Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class OpenPositions(Envelope):
    data: PagedListData[Position] = Field(default_factory=PagedListData[Position])


class OpenPositionsResponse(RestResponse[OpenPositions]):
    body_model = OpenPositions

    @property
    def open_positions(self) -> list[Position]:
        return self.body.data.items

    @property
    def current_page(self) -> int:
        return self.body.data.pagination.current_page

    @property
    def count(self) -> int:
        return self.body.data.pagination.count

    def position(self, position_id: str) -> Position | None:
        for item in self.body.data.items:
            if item.position_id == str(position_id):
                return item
        return None


async def request_open_positions(
    http_client: HttpClient,
    credentials: Credentials,
    symbol: Symbol | str,
    page: int = DEFAULT_PAGE,
    count: int = DEFAULT_COUNT,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> OpenPositionsResponse:
    params = {"symbol": Symbol(symbol), "page": page, "count": count}
    return await private_get(
        http_client, credentials, base_url, OPEN_POSITIONS_PATH, OpenPositionsResponse, params
    )
