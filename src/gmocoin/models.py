"""Payload models shared by several endpoints.

Attribute names are snake_case; the camelCase wire names come from the alias
generator. Prices are JPY integers, sizes floats, identifiers strings.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .coercion import WireFloat, WireId, WireInt, WireTimestamp
from .enums import ExecutionType, SettleType, Side, TimeInForce

CANCEL_TYPE_NONE = "NONE"


class WireModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }


class Pagination(WireModel):
    """Page metadata. Zero-valued when the exchange omits it on empty results."""

    current_page: WireInt = 0
    count: WireInt = 0


class Trade(WireModel):
    price: WireInt
    side: Side
    size: WireFloat
    timestamp: WireTimestamp


class Order(WireModel):
    """Order as returned by the order query endpoints.

    ``cancel_type`` is only sent for CANCELLING, CANCELED and EXPIRED orders;
    it reads ``"NONE"`` otherwise.
    """

    root_order_id: WireId
    order_id: WireId
    symbol: str
    side: Side
    order_type: str
    execution_type: ExecutionType
    settle_type: SettleType
    size: WireFloat
    executed_size: WireFloat
    price: WireInt
    losscut_price: WireInt
    status: str
    cancel_type: str = CANCEL_TYPE_NONE
    time_in_force: TimeInForce
    timestamp: WireTimestamp

    @property
    def remaining_size(self) -> float:
        return self.size - self.executed_size

    @property
    def is_cancelled(self) -> bool:
        return self.cancel_type != CANCEL_TYPE_NONE


class Execution(WireModel):
    execution_id: WireId
    order_id: WireId
    position_id: WireId | None = None
    symbol: str
    side: Side
    settle_type: SettleType
    size: WireFloat
    price: WireInt
    loss_gain: WireInt
    fee: WireInt
    timestamp: WireTimestamp


class Position(WireModel):
    position_id: WireId
    symbol: str
    side: Side
    size: WireFloat
    ordered_size: WireFloat = Field(alias="orderdSize")
    price: WireInt
    loss_gain: WireInt
    leverage: WireInt
    losscut_price: WireInt
    timestamp: WireTimestamp


class PositionSummaryEntry(WireModel):
    average_position_rate: WireFloat
    position_loss_gain: WireInt
    side: Side
    sum_order_quantity: WireFloat
    sum_position_quantity: WireFloat
    symbol: str


class Asset(WireModel):
    amount: WireFloat
    available: WireFloat
    conversion_rate: WireFloat
    symbol: str

    @property
    def amount_as_jpy(self) -> float:
        return self.amount * self.conversion_rate

    @property
    def available_as_jpy(self) -> float:
        return self.available * self.conversion_rate


class PriceAndSize(WireModel):
    price: WireInt
    size: WireFloat


class TickerEntry(WireModel):
    ask: WireInt
    bid: WireInt
    high: WireInt
    last: WireInt
    low: WireInt
    symbol: str
    timestamp: WireTimestamp
    volume: WireFloat


class CancelFailure(BaseModel):
    """One rejected identifier in a multi-cancel result."""

    message_code: str
    message_string: str
    order_id: WireId = Field(alias="orderId")

    model_config = {"populate_by_name": True, "frozen": True}


ItemT = TypeVar("ItemT")


class ListData(BaseModel, Generic[ItemT]):
    """``data`` block holding only ``list``; an empty ``{}`` means no items."""

    items: list[ItemT] = Field(default_factory=list, alias="list")

    model_config = {"populate_by_name": True, "frozen": True}


class PagedListData(ListData[ItemT], Generic[ItemT]):
    """``data`` block holding ``pagination`` and ``list``."""

    pagination: Pagination = Field(default_factory=Pagination)
