"""Closed enumerations for request parameters and response fields."""

from __future__ import annotations

from enum import Enum


class _WireEnum(str, Enum):
    """String enum whose value is the exact wire representation."""

    def to_wire_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Symbol(_WireEnum):
    """Tradable symbols. Bare currency codes are spot, ``*_JPY`` are leveraged."""

    BTC = "BTC"
    ETH = "ETH"
    BCH = "BCH"
    LTC = "LTC"
    XRP = "XRP"
    BTC_JPY = "BTC_JPY"
    ETH_JPY = "ETH_JPY"
    BCH_JPY = "BCH_JPY"
    LTC_JPY = "LTC_JPY"
    XRP_JPY = "XRP_JPY"

    @property
    def is_leveraged(self) -> bool:
        return self.value.endswith("_JPY")


class Side(_WireEnum):
    BUY = "BUY"
    SELL = "SELL"


class ExecutionType(_WireEnum):
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP = "STOP"

    @property
    def requires_price(self) -> bool:
        return self is not ExecutionType.MARKET


class TimeInForce(_WireEnum):
    """Execution quantity condition. SOK is post-only."""

    FAK = "FAK"
    FAS = "FAS"
    FOK = "FOK"
    SOK = "SOK"


class SettleType(_WireEnum):
    OPEN = "OPEN"
    CLOSE = "CLOSE"


class ExchangeStatus(_WireEnum):
    """Exchange state. PREOPEN covers the 30 minutes around weekly maintenance."""

    OPEN = "OPEN"
    PREOPEN = "PREOPEN"
    MAINTENANCE = "MAINTENANCE"


def default_time_in_force(execution_type: ExecutionType | str) -> TimeInForce:
    """Time-in-force used when the caller does not choose one."""
    if ExecutionType(execution_type) is ExecutionType.LIMIT:
        return TimeInForce.FAS
    return TimeInForce.FAK
