"""Latest rate endpoint."""

from __future__ import annotations

from datetime import datetime

from ..endpoints import PUBLIC_ENDPOINT, TICKER_PATH, public_get
from ..enums import Symbol
from ..errors import EmptyResponseError
from ..models import TickerEntry
from ..response import Envelope, RestResponse
from ..transport import HttpClient


class Ticker(Envelope):
    data: list[TickerEntry]


class TickerResponse(RestResponse[Ticker]):
    """Ticker list. The scalar accessors read the first entry.

    When requested for one symbol the list has exactly one entry; the
    scalar accessors raise :class:`EmptyResponseError` if it is empty.
    """

    body_model = Ticker

    @property
    def tickers(self) -> list[TickerEntry]:
        return self.body.data

    def ticker(self, symbol: Symbol | str) -> TickerEntry:
        wanted = Symbol(symbol).to_wire_string()
        for entry in self.body.data:
            if entry.symbol == wanted:
                return entry
        raise EmptyResponseError(f"No ticker entry for {wanted}")

    def _first(self) -> TickerEntry:
        if not self.body.data:
            raise EmptyResponseError("Ticker response has no entries")
        return self.body.data[0]

    @property
    def ask(self) -> int:
        return self._first().ask

    @property
    def bid(self) -> int:
        return self._first().bid

    @property
    def high(self) -> int:
        return self._first().high

    @property
    def last(self) -> int:
        return self._first().last

    @property
    def low(self) -> int:
        return self._first().low

    @property
    def symbol(self) -> str:
        return self._first().symbol

    @property
    def timestamp(self) -> datetime:
        return self._first().timestamp

    @property
    def volume(self) -> float:
        return self._first().volume


async def request_ticker(
    http_client: HttpClient,
    symbol: Symbol | str | None = None,
    *,
    base_url: str = PUBLIC_ENDPOINT,
) -> TickerResponse:
    """Fetch the latest rate for ``symbol``, or for every symbol when omitted."""
    params = {"symbol": Symbol(symbol) if symbol is not None else None}
    return await public_get(http_client, base_url, TICKER_PATH, TickerResponse, params)
