"""Settlement order endpoints: close one position, or close by size in bulk."""

from __future__ import annotations

from typing import Any

from ..coercion import id_to_wire_int
from ..endpoints import CLOSE_BULK_ORDER_PATH, CLOSE_ORDER_PATH, PRIVATE_ENDPOINT, private_post
from ..enums import ExecutionType, Side, Symbol, TimeInForce, default_time_in_force
from ..signing import Credentials
from ..transport import HttpClient
from .order import OrderResponse
from .params import wire_order_price, wire_positive_decimal


def _base_close_parameters(
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    price: int | None,
    time_in_force: TimeInForce | str | None,
) -> dict[str, Any]:
    execution_type = ExecutionType(execution_type)
    tif = TimeInForce(time_in_force) if time_in_force is not None else default_time_in_force(execution_type)
    wire_price = wire_order_price(execution_type, price)

    body: dict[str, Any] = {
        "symbol": Symbol(symbol).to_wire_string(),
        "side": Side(side).to_wire_string(),
        "executionType": execution_type.to_wire_string(),
        "timeInForce": tif.to_wire_string(),
    }
    if wire_price is not None:
        body["price"] = wire_price
    return body


def build_close_order_parameters(
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    position_id: str,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
) -> dict[str, Any]:
    body = _base_close_parameters(execution_type, symbol, side, price, time_in_force)
    body["settlePosition"] = [
        {
            "positionId": id_to_wire_int(position_id),
            "size": wire_positive_decimal("size", size),
        }
    ]
    return body


def build_close_bulk_order_parameters(
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
) -> dict[str, Any]:
    body = _base_close_parameters(execution_type, symbol, side, price, time_in_force)
    body["size"] = wire_positive_decimal("size", size)
    return body


async def request_close_order(
    http_client: HttpClient,
    credentials: Credentials,
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    position_id: str,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
    base_url: str = PRIVATE_ENDPOINT,
) -> OrderResponse:
    """Close ``size`` of one position. ``side`` is the closing side."""
    body = build_close_order_parameters(
        execution_type, symbol, side, size, position_id, price=price, time_in_force=time_in_force
    )
    return await private_post(http_client, credentials, base_url, CLOSE_ORDER_PATH, OrderResponse, body)


async def request_close_bulk_order(
    http_client: HttpClient,
    credentials: Credentials,
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
    base_url: str = PRIVATE_ENDPOINT,
) -> OrderResponse:
    """Close ``size`` across open positions of ``symbol`` on the opposite side."""
    body = build_close_bulk_order_parameters(
        execution_type, symbol, side, size, price=price, time_in_force=time_in_force
    )
    return await private_post(
        http_client, credentials, base_url, CLOSE_BULK_ORDER_PATH, OrderResponse, body
    )
