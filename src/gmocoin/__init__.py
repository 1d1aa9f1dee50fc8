"""gmocoin: typed asyncio client for the GMO Coin REST API."""

from .api import PrivateAPI, PublicAPI
from .enums import ExecutionType, SettleType, Side, Symbol, TimeInForce
from .errors import (
    ApiError,
    CredentialError,
    DeserializationError,
    EmptyResponseError,
    GmoCoinError,
    IdConversionError,
    OrderParameterError,
    SerializationError,
    TransportError,
    UnknownError,
    UrlError,
)
from .settings import Settings
from .signing import Credentials
from .transport import AiohttpClient, HttpClient, InMemoryClient, RawResponse

__all__ = [
    "AiohttpClient",
    "ApiError",
    "CredentialError",
    "Credentials",
    "DeserializationError",
    "EmptyResponseError",
    "ExecutionType",
    "GmoCoinError",
    "HttpClient",
    "IdConversionError",
    "InMemoryClient",
    "OrderParameterError",
    "PrivateAPI",
    "PublicAPI",
    "RawResponse",
    "SerializationError",
    "Settings",
    "SettleType",
    "Side",
    "Symbol",
    "TimeInForce",
    "TransportError",
    "UnknownError",
    "UrlError",
]
