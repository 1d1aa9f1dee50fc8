"""Typed exception hierarchy for GMO Coin API calls.

Every failure raised by the library derives from :class:`GmoCoinError`, so
callers can catch one base class or match on the specific kind to decide
whether to retry, log, or surface the problem to a user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import ErrorMessage


class GmoCoinError(Exception):
    """Base class for all library errors."""


class TransportError(GmoCoinError):
    """Connection, DNS or timeout failure inside the HTTP transport."""


class UrlError(GmoCoinError):
    """An endpoint URL could not be composed or was rejected as malformed."""


class SerializationError(GmoCoinError):
    """A request body could not be encoded as JSON."""


class DeserializationError(GmoCoinError):
    """Response body is neither a valid success payload nor an error payload."""

    def __init__(self, message: str, *, http_status_code: int | None = None, body_text: str = ""):
        super().__init__(message)
        self.http_status_code = http_status_code
        self.body_text = body_text


class ApiError(GmoCoinError):
    """Business-level rejection reported by the exchange."""

    def __init__(
        self,
        status: int,
        messages: list[ErrorMessage],
        *,
        http_status_code: int | None = None,
    ):
        self.status = status
        self.messages = list(messages)
        self.http_status_code = http_status_code
        summary = "; ".join(f"{m.message_code}: {m.message_string}" for m in self.messages)
        super().__init__(f"API error (status={status}): {summary or 'no message'}")

    @property
    def message_codes(self) -> list[str]:
        return [m.message_code for m in self.messages]

    def has_code(self, code: str) -> bool:
        return code in self.message_codes


class IdConversionError(GmoCoinError, ValueError):
    """An identifier string cannot be converted to the numeric wire form."""


class CredentialError(GmoCoinError):
    """API credentials are missing or unusable."""


class EmptyResponseError(GmoCoinError):
    """A singleton accessor was used on a response with no elements."""


class OrderParameterError(GmoCoinError, ValueError):
    """Request parameters violate an endpoint rule (caller usage error)."""


class UnknownError(GmoCoinError):
    """Unanticipated failure that fits no other category."""
