"""Private (signed) endpoints: account, orders, executions and positions."""

from .active_orders import ActiveOrdersResponse, request_active_orders
from .assets import AssetsResponse, request_assets
from .cancel_bulk_order import CancelBulkOrderResponse, request_cancel_bulk_order
from .cancel_order import request_cancel_order
from .cancel_orders import CancelOrdersResponse, request_cancel_orders
from .change_losscut_price import request_change_losscut_price
from .change_order import request_change_order
from .close_order import request_close_bulk_order, request_close_order
from .executions import (
    ExecutionsResponse,
    request_executions,
    request_executions_with_execution_id,
    request_executions_with_order_id,
)
from .latest_executions import LatestExecutionsResponse, request_latest_executions
from .margin import MarginResponse, request_margin
from .open_positions import OpenPositionsResponse, request_open_positions
from .order import OrderResponse, request_order
from .orders import OrdersResponse, request_orders
from .position_summary import PositionSummaryResponse, request_position_summary

__all__ = [
    "ActiveOrdersResponse",
    "AssetsResponse",
    "CancelBulkOrderResponse",
    "CancelOrdersResponse",
    "ExecutionsResponse",
    "LatestExecutionsResponse",
    "MarginResponse",
    "OpenPositionsResponse",
    "OrderResponse",
    "OrdersResponse",
    "PositionSummaryResponse",
    "request_active_orders",
    "request_assets",
    "request_cancel_bulk_order",
    "request_cancel_order",
    "request_cancel_orders",
    "request_change_losscut_price",
    "request_change_order",
    "request_close_bulk_order",
    "request_close_order",
    "request_executions",
    "request_executions_with_execution_id",
    "request_executions_with_order_id",
    "request_latest_executions",
    "request_margin",
    "request_open_positions",
    "request_order",
    "request_orders",
    "request_position_summary",
]
