"""Bulk cancellation endpoint: cancel every order matching the filters."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import Field

from ..coercion import WireIdList
from ..endpoints import CANCEL_BULK_ORDER_PATH, PRIVATE_ENDPOINT, private_post
from ..enums import SettleType, Side, Symbol
from ..errors import OrderParameterError
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class CancelBulkOrder(Envelope):
    data: WireIdList = Field(default_factory=list)


class CancelBulkOrderResponse(RestResponse[CancelBulkOrder]):
    body_model = CancelBulkOrder

    @property
    def order_ids(self) -> list[str]:
        return self.body.data


def build_cancel_bulk_order_parameters(
    symbols: Sequence[Symbol | str],
    side: Side | str | None = None,
    settle_type: SettleType | str | None = None,
    desc: bool = False,
) -> dict[str, Any]:
    if isinstance(symbols, str):
        raise OrderParameterError(f"symbols must be a list of symbols, got the string {symbols!r}")
    if not symbols:
        raise OrderParameterError("At least one symbol is required")
    body: dict[str, Any] = {"symbols": [Symbol(symbol).to_wire_string() for symbol in symbols]}
    if side is not None:
        body["side"] = Side(side).to_wire_string()
    if settle_type is not None:
        body["settleType"] = SettleType(settle_type).to_wire_string()
    body["desc"] = desc
    return body


async def request_cancel_bulk_order(
    http_client: HttpClient,
    credentials: Credentials,
    symbols: Sequence[Symbol | str],
    side: Side | str | None = None,
    settle_type: SettleType | str | None = None,
    desc: bool = False,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> CancelBulkOrderResponse:
    body = build_cancel_bulk_order_parameters(symbols, side, settle_type, desc)
    return await private_post(
        http_client, credentials, base_url, CANCEL_BULK_ORDER_PATH, CancelBulkOrderResponse, body
    )
