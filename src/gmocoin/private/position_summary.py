"""Position summary endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import POSITION_SUMMARY_PATH, PRIVATE_ENDPOINT, private_get
from ..enums import Symbol
from ..models import ListData, PositionSummaryEntry
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class PositionSummary(Envelope):
    data: ListData[PositionSummaryEntry] = Field(default_factory=ListData[PositionSummaryEntry])


class PositionSummaryResponse(RestResponse[PositionSummary]):
    body_model = PositionSummary

    @property
    def position_summaries(self) -> list[PositionSummaryEntry]:
        return self.body.data.items


async def request_position_summary(
    http_client: HttpClient,
    credentials: Credentials,
    symbol: Symbol | str | None = None,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> PositionSummaryResponse:
    """Fetch per-side position totals for ``symbol``, or for all symbols."""
    params = {"symbol": Symbol(symbol) if symbol is not None else None}
    return await private_get(
        http_client, credentials, base_url, POSITION_SUMMARY_PATH, PositionSummaryResponse, params
    )
