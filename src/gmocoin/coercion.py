"""Coercion helpers for the exchange's loosely-typed JSON.

GMO Coin sends most numbers as decimal strings, some as JSON numbers, and
identifiers as either. These helpers normalize them into native types and
are attached to pydantic fields through the ``Wire*`` annotated aliases.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Callable

from pydantic import BeforeValidator

from .errors import IdConversionError

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def coerce_number(value: Any, target: type = float) -> int | float:
    """Convert a JSON string or JSON number into ``target`` (int or float).

    Args:
        value: Decoded JSON value
        target: ``int`` or ``float``

    Returns:
        The numeric value

    Raises:
        TypeError: If value is not a string or number
        ValueError: If a string is not numeric, or a value does not fit target
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"expected JSON string or number, got {type(value).__name__}")

    if isinstance(value, str):
        text = value.strip()
        if target is int:
            if not _INT_PATTERN.fullmatch(text):
                raise ValueError(f"not an integer: {value!r}")
            return int(text)
        if not _FLOAT_PATTERN.fullmatch(text):
            raise ValueError(f"not a number: {value!r}")
        number = float(text)
    elif target is int:
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"not an integer: {value!r}")
            return int(value)
        return value
    else:
        number = float(value)

    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def coerce_int(value: Any) -> int:
    return coerce_number(value, int)


def coerce_float(value: Any) -> float:
    return coerce_number(value, float)


def coerce_id(value: Any) -> str:
    """Normalize an identifier sent as a JSON number or string to ``str``.

    The exchange announced a switch from numeric to string identifiers but
    still sends both, sometimes within one response.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"expected identifier as string or integer, got {type(value).__name__}")
    return str(value)


def coerce_id_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"expected list of identifiers, got {type(value).__name__}")
    return [coerce_id(item) for item in value]


def parse_exchange_timestamp(value: Any) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS.mmmZ`` into an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if not isinstance(value, str):
        raise TypeError(f"expected timestamp string, got {type(value).__name__}")
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        raise ValueError(f"wrong datetime format: {value!r}")
    try:
        parsed = datetime.strptime(value, _TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ValueError(f"wrong datetime format: {value!r}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def format_exchange_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def id_to_wire_int(identifier: str | int) -> int:
    """Convert a string identifier to the numeric form some endpoints require.

    Raises:
        IdConversionError: If the identifier is not a plain integer
    """
    if isinstance(identifier, bool):
        raise IdConversionError(f"invalid identifier: {identifier!r}")
    if isinstance(identifier, int):
        return identifier
    text = str(identifier).strip()
    if not _INT_PATTERN.fullmatch(text):
        raise IdConversionError(f"identifier is not numeric: {identifier!r}")
    return int(text)


def to_wire_decimal(value: int | float | Decimal | str) -> str:
    """Render a number as the plain decimal string request bodies expect.

    ``0.1 -> "0.1"``, ``1.0 -> "1"``, ``100 -> "100"``, never an exponent.
    """
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    try:
        number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"not a number: {value!r}") from exc
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    text = format(number.normalize(), "f")
    return "0" if text == "-0" else text


def _field(func: Callable[[Any], Any]) -> BeforeValidator:
    # pydantic only turns ValueError into a ValidationError
    def validate(value: Any) -> Any:
        try:
            return func(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    return BeforeValidator(validate)


WireInt = Annotated[int, _field(coerce_int)]
WireFloat = Annotated[float, _field(coerce_float)]
WireId = Annotated[str, _field(coerce_id)]
WireIdList = Annotated[list[str], _field(coerce_id_list)]
WireTimestamp = Annotated[datetime, _field(parse_exchange_timestamp)]
