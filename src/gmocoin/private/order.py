"""New order endpoint."""

from __future__ import annotations

from typing import Any

from ..coercion import WireId
from ..endpoints import ORDER_PATH, PRIVATE_ENDPOINT, private_post
from ..enums import ExecutionType, Side, Symbol, TimeInForce, default_time_in_force
from ..errors import OrderParameterError
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient
from .params import wire_order_price, wire_positive_decimal


class OrderResult(Envelope):
    data: WireId


class OrderResponse(RestResponse[OrderResult]):
    body_model = OrderResult

    @property
    def order_id(self) -> str:
        return self.body.data


def build_order_parameters(
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
    losscut_price: int | None = None,
) -> dict[str, Any]:
    """Build the JSON body for a new order.

    Numbers are sent as decimal strings. LIMIT and STOP orders require
    ``price``; MARKET orders must not carry one.

    Raises:
        OrderParameterError: If the price rule is violated, size/price is not positive,
            or a loss-cut price is given for a spot symbol
    """
    execution_type = ExecutionType(execution_type)
    symbol = Symbol(symbol)
    if losscut_price is not None and not symbol.is_leveraged:
        raise OrderParameterError(f"losscut_price only applies to leveraged symbols, not {symbol}")
    tif = TimeInForce(time_in_force) if time_in_force is not None else default_time_in_force(execution_type)
    wire_price = wire_order_price(execution_type, price)

    body: dict[str, Any] = {
        "symbol": symbol.to_wire_string(),
        "side": Side(side).to_wire_string(),
        "executionType": execution_type.to_wire_string(),
        "timeInForce": tif.to_wire_string(),
        "size": wire_positive_decimal("size", size),
    }
    if wire_price is not None:
        body["price"] = wire_price
    if losscut_price is not None:
        body["losscutPrice"] = wire_positive_decimal("losscut_price", losscut_price)
    return body


async def request_order(
    http_client: HttpClient,
    credentials: Credentials,
    execution_type: ExecutionType | str,
    symbol: Symbol | str,
    side: Side | str,
    size: float,
    *,
    price: int | None = None,
    time_in_force: TimeInForce | str | None = None,
    losscut_price: int | None = None,
    base_url: str = PRIVATE_ENDPOINT,
) -> OrderResponse:
    body = build_order_parameters(
        execution_type,
        symbol,
        side,
        size,
        price=price,
        time_in_force=time_in_force,
        losscut_price=losscut_price,
    )
    return await private_post(http_client, credentials, base_url, ORDER_PATH, OrderResponse, body)
