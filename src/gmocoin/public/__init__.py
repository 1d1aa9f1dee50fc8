"""Public (unauthenticated) market data endpoints."""

from .orderbooks import OrderbooksResponse, request_orderbooks
from .status import StatusResponse, request_status
from .ticker import TickerResponse, request_ticker
from .trades import TradesResponse, request_trades

__all__ = [
    "OrderbooksResponse",
    "StatusResponse",
    "TickerResponse",
    "TradesResponse",
    "request_orderbooks",
    "request_status",
    "request_ticker",
    "request_trades",
]
