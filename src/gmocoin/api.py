"""Public and private API facades.

Both objects only bind an :class:`HttpClient` (and, for private calls, the
credentials and base URL) and forward to the endpoint functions. The short
methods fill in the usual defaults; the ``*_with_options`` variants expose
every parameter the endpoint takes.
"""

from __future__ import annotations

from typing import Sequence

from .config import load_credentials
from .endpoints import PRIVATE_ENDPOINT, PUBLIC_ENDPOINT
from .enums import ExecutionType, SettleType, Side, Symbol, TimeInForce
from .private import (
    ActiveOrdersResponse,
    AssetsResponse,
    CancelBulkOrderResponse,
    CancelOrdersResponse,
    ExecutionsResponse,
    LatestExecutionsResponse,
    MarginResponse,
    OpenPositionsResponse,
    OrderResponse,
    OrdersResponse,
    PositionSummaryResponse,
    request_active_orders,
    request_assets,
    request_cancel_bulk_order,
    request_cancel_order,
    request_cancel_orders,
    request_change_losscut_price,
    request_change_order,
    request_close_bulk_order,
    request_close_order,
    request_executions_with_execution_id,
    request_executions_with_order_id,
    request_latest_executions,
    request_margin,
    request_open_positions,
    request_order,
    request_orders,
    request_position_summary,
)
from .public import (
    OrderbooksResponse,
    StatusResponse,
    TickerResponse,
    TradesResponse,
    request_orderbooks,
    request_status,
    request_ticker,
    request_trades,
)
from .response import DEFAULT_COUNT, DEFAULT_PAGE, EmptyResponse
from .settings import Settings
from .signing import Credentials
from .transport import AiohttpClient, HttpClient


def _client_from_settings(settings: Settings) -> AiohttpClient:
    return AiohttpClient(timeout_seconds=settings.http.timeout_seconds, proxy=settings.http.proxy)


class _Facade:
    """Owns the bound client's lifecycle; usable as ``async with``."""

    http_client: HttpClient

    async def close(self) -> None:
        """Close the HTTP client if it holds resources (test doubles need not)."""
        close = getattr(self.http_client, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class PublicAPI(_Facade):
    """Market data endpoints. No credentials needed."""

    def __init__(self, http_client: HttpClient, *, base_url: str = PUBLIC_ENDPOINT):
        self.http_client = http_client
        self.base_url = base_url

    @classmethod
    def from_settings(cls, settings: Settings) -> PublicAPI:
        return cls(_client_from_settings(settings), base_url=settings.endpoints.public)

    async def status(self) -> StatusResponse:
        return await request_status(self.http_client, base_url=self.base_url)

    async def ticker(self, symbol: Symbol | str | None = None) -> TickerResponse:
        return await request_ticker(self.http_client, symbol, base_url=self.base_url)

    async def orderbooks(self, symbol: Symbol | str) -> OrderbooksResponse:
        return await request_orderbooks(self.http_client, symbol, base_url=self.base_url)

    async def trades(self, symbol: Symbol | str) -> TradesResponse:
        return await request_trades(self.http_client, symbol, base_url=self.base_url)

    async def trades_with_options(
        self, symbol: Symbol | str, page: int = DEFAULT_PAGE, count: int = DEFAULT_COUNT
    ) -> TradesResponse:
        return await request_trades(self.http_client, symbol, page, count, base_url=self.base_url)


class PrivateAPI(_Facade):
    """Signed account and trading endpoints."""

    def __init__(
        self,
        http_client: HttpClient,
        credentials: Credentials,
        *,
        base_url: str = PRIVATE_ENDPOINT,
    ):
        self.http_client = http_client
        self.credentials = credentials
        self.base_url = base_url

    @classmethod
    def from_settings(cls, settings: Settings) -> PrivateAPI:
        """Build a network-backed facade.

        Raises:
            CredentialError: If neither settings nor environment hold credentials
        """
        credentials = load_credentials(settings)
        return cls(_client_from_settings(settings), credentials, base_url=settings.endpoints.private)

    async def margin(self) -> MarginResponse:
        return await request_margin(self.http_client, self.credentials, base_url=self.base_url)

    async def assets(self) -> AssetsResponse:
        return await request_assets(self.http_client, self.credentials, base_url=self.base_url)

    async def orders(self, order_ids: Sequence[str]) -> OrdersResponse:
        return await request_orders(self.http_client, self.credentials, order_ids, base_url=self.base_url)

    async def active_orders(self, symbol: Symbol | str) -> ActiveOrdersResponse:
        return await request_active_orders(
            self.http_client, self.credentials, symbol, base_url=self.base_url
        )

    async def active_orders_with_options(
        self, symbol: Symbol | str, page: int = DEFAULT_PAGE, count: int = DEFAULT_COUNT
    ) -> ActiveOrdersResponse:
        return await request_active_orders(
            self.http_client, self.credentials, symbol, page, count, base_url=self.base_url
        )

    async def executions_with_order_id(self, order_id: str) -> ExecutionsResponse:
        return await request_executions_with_order_id(
            self.http_client, self.credentials, order_id, base_url=self.base_url
        )

    async def executions_with_execution_id(self, execution_id: str) -> ExecutionsResponse:
        return await request_executions_with_execution_id(
            self.http_client, self.credentials, execution_id, base_url=self.base_url
        )

    async def latest_executions(self, symbol: Symbol | str) -> LatestExecutionsResponse:
        return await request_latest_executions(
            self.http_client, self.credentials, symbol, base_url=self.base_url
        )

    async def latest_executions_with_options(
        self, symbol: Symbol | str, page: int = DEFAULT_PAGE, count: int = DEFAULT_COUNT
    ) -> LatestExecutionsResponse:
        return await request_latest_executions(
            self.http_client, self.credentials, symbol, page, count, base_url=self.base_url
        )

    async def open_positions(self, symbol: Symbol | str) -> OpenPositionsResponse:
        return await request_open_positions(
            self.http_client, self.credentials, symbol, base_url=self.base_url
        )

    async def open_positions_with_options(
        self, symbol: Symbol | str, page: int = DEFAULT_PAGE, count: int = DEFAULT_COUNT
    ) -> OpenPositionsResponse:
        return await request_open_positions(
            self.http_client, self.credentials, symbol, page, count, base_url=self.base_url
        )

    async def position_summary(self, symbol: Symbol | str | None = None) -> PositionSummaryResponse:
        return await request_position_summary(
            self.http_client, self.credentials, symbol, base_url=self.base_url
        )

    async def order(
        self,
        execution_type: ExecutionType | str,
        symbol: Symbol | str,
        side: Side | str,
        size: float,
        price: int | None = None,
    ) -> OrderResponse:
        """Place an order with the default time-in-force (FAS for LIMIT, FAK otherwise)."""
        return await request_order(
            self.http_client,
            self.credentials,
            execution_type,
            symbol,
            side,
            size,
            price=price,
            base_url=self.base_url,
        )

    async def order_with_options(
        self,
        execution_type: ExecutionType | str,
        symbol: Symbol | str,
        side: Side | str,
        size: float,
        price: int | None,
        time_in_force: TimeInForce | str,
        losscut_price: int | None = None,
    ) -> OrderResponse:
        return await request_order(
            self.http_client,
            self.credentials,
            execution_type,
            symbol,
            side,
            size,
            price=price,
            time_in_force=time_in_force,
            losscut_price=losscut_price,
            base_url=self.base_url,
        )

    async def change_order(self, order_id: str, price: int) -> EmptyResponse:
        return await request_change_order(
            self.http_client, self.credentials, order_id, price, base_url=self.base_url
        )

    async def change_order_with_options(self, order_id: str, price: int, losscut_price: int) -> EmptyResponse:
        return await request_change_order(
            self.http_client, self.credentials, order_id, price, losscut_price, base_url=self.base_url
        )

    async def change_losscut_price(self, position_id: str, losscut_price: int) -> EmptyResponse:
        return await request_change_losscut_price(
            self.http_client, self.credentials, position_id, losscut_price, base_url=self.base_url
        )

    async def cancel_order(self, order_id: str) -> EmptyResponse:
        return await request_cancel_order(self.http_client, self.credentials, order_id, base_url=self.base_url)

    async def cancel_orders(self, order_ids: Sequence[str]) -> CancelOrdersResponse:
        return await request_cancel_orders(
            self.http_client, self.credentials, order_ids, base_url=self.base_url
        )

    async def cancel_bulk_order(self, symbols: Sequence[Symbol | str]) -> CancelBulkOrderResponse:
        return await request_cancel_bulk_order(
            self.http_client, self.credentials, symbols, base_url=self.base_url
        )

    async def cancel_bulk_order_with_options(
        self,
        symbols: Sequence[Symbol | str],
        side: Side | str | None = None,
        settle_type: SettleType | str | None = None,
        desc: bool = False,
    ) -> CancelBulkOrderResponse:
        return await request_cancel_bulk_order(
            self.http_client,
            self.credentials,
            symbols,
            side,
            settle_type,
            desc,
            base_url=self.base_url,
        )

    async def close_order(
        self,
        execution_type: ExecutionType | str,
        symbol: Symbol | str,
        side: Side | str,
        size: float,
        position_id: str,
        price: int | None = None,
        time_in_force: TimeInForce | str | None = None,
    ) -> OrderResponse:
        return await request_close_order(
            self.http_client,
            self.credentials,
            execution_type,
            symbol,
            side,
            size,
            position_id,
            price=price,
            time_in_force=time_in_force,
            base_url=self.base_url,
        )

    async def close_bulk_order(
        self,
        execution_type: ExecutionType | str,
        symbol: Symbol | str,
        side: Side | str,
        size: float,
        price: int | None = None,
        time_in_force: TimeInForce | str | None = None,
    ) -> OrderResponse:
        return await request_close_bulk_order(
            self.http_client,
            self.credentials,
            execution_type,
            symbol,
            side,
            size,
            price=price,
            time_in_force=time_in_force,
            base_url=self.base_url,
        )
