"""Latest executions endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import LATEST_EXECUTIONS_PATH, PRIVATE_ENDPOINT, private_get
from ..enums import Symbol
from ..models import Execution, PagedListData
from ..response import DEFAULT_COUNT, DEFAULT_PAGE, Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class LatestExecutions(Envelope):
    data: PagedListData[Execution] = Field(default_factory=PagedListData[Execution])


class LatestExecutionsResponse(RestResponse[LatestExecutions]):
    body_model = LatestExecutions

    @property
    def latest_executions(self) -> list[Execution]:
        return self.body.data.items

    @property
    def current_page(self) -> int:
        return self.body.data.pagination.current_page

    @property
    def count(self) -> int:
        return self.body.data.pagination.count


async def request_latest_executions(
    http_client: HttpClient,
    credentials: Credentials,
    symbol: Symbol | str,
    page: int = DEFAULT_PAGE,
    count: int = DEFAULT_COUNT,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> LatestExecutionsResponse:
    params = {"symbol": Symbol(symbol), "page": page, "count": count}
    return await private_get(
        http_client, credentials, base_url, LATEST_EXECUTIONS_PATH, LatestExecutionsResponse, params
    )
