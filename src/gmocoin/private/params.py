"""Validation and wire rendering of order parameters."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..coercion import to_wire_decimal
from ..enums import ExecutionType
from ..errors import OrderParameterError


def wire_positive_decimal(name: str, value: int | float | Decimal) -> str:
    """Render ``value`` as a decimal string, rejecting non-positive input."""
    try:
        text = to_wire_decimal(value)
    except (TypeError, ValueError) as exc:
        raise OrderParameterError(f"{name} must be a finite number, got {value!r}") from exc
    if Decimal(text) <= 0:
        raise OrderParameterError(f"{name} must be positive, got {value!r}")
    return text


def wire_order_price(execution_type: ExecutionType, price: int | None) -> str | None:
    """Apply the price rule: LIMIT and STOP need a price, MARKET must omit it."""
    if execution_type.requires_price:
        if price is None:
            raise OrderParameterError(f"{execution_type.value} order requires a price")
        return wire_positive_decimal("price", price)
    if price is not None:
        raise OrderParameterError("MARKET order must not specify a price")
    return None


def order_id_batch(order_ids: Sequence[str], limit: int) -> list[str]:
    """Check an id list sent in one request: 1 to ``limit`` ids, never a bare string.

    A single ``str`` is itself a sequence; accepting it would turn ``"123"``
    into the three ids ``1``, ``2`` and ``3``.
    """
    if isinstance(order_ids, (str, bytes)):
        raise OrderParameterError(f"order_ids must be a list of ids, got the string {order_ids!r}")
    ids = list(order_ids)
    if not ids:
        raise OrderParameterError("At least one order id is required")
    if len(ids) > limit:
        raise OrderParameterError(f"At most {limit} order ids per request, got {len(ids)}")
    return ids
