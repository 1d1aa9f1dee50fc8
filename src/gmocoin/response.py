"""Response envelope decoding and error classification.

The exchange answers HTTP 200 for success and for most business failures,
telling them apart only by JSON shape::

    {"status": 0, "data": ..., "responsetime": "..."}
    {"status": 5, "messages": [{"message_code": ..., "message_string": ...}], ...}

:func:`decode` therefore tries the endpoint's success model first, then the
error model, and only then gives up with a deserialization error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError, field_validator

from .coercion import WireTimestamp
from .errors import ApiError, DeserializationError
from .transport import RawResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_COUNT = 100

_SNIPPET_LENGTH = 200


class ErrorMessage(BaseModel):
    message_code: str
    message_string: str

    model_config = {"frozen": True}


class ErrorResponse(BaseModel):
    """Business-level failure body."""

    status: int
    messages: list[ErrorMessage]
    responsetime: WireTimestamp | None = None

    model_config = {"frozen": True}

    @field_validator("status")
    @classmethod
    def _nonzero_status(cls, value: int) -> int:
        if value == 0:
            raise ValueError("error response must carry a nonzero status")
        return value


class Envelope(BaseModel):
    """Fields shared by every success body. Subclasses add ``data``."""

    status: int
    responsetime: WireTimestamp

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("status")
    @classmethod
    def _success_status(cls, value: int) -> int:
        if value != 0:
            raise ValueError(f"success response must carry status 0, got {value}")
        return value


BodyT = TypeVar("BodyT", bound=Envelope)
ResponseT = TypeVar("ResponseT", bound="RestResponse")


@dataclass(frozen=True)
class RestResponse(Generic[BodyT]):
    """Decoded result of one API call.

    Subclasses bind ``body_model`` and expose named accessors over the body
    so callers never depend on the raw JSON shape.
    """

    http_status_code: int
    body: BodyT

    body_model: ClassVar[type[Envelope]] = Envelope

    @property
    def responsetime(self) -> datetime:
        return self.body.responsetime


def decode(raw: RawResponse, response_cls: type[ResponseT]) -> ResponseT:
    """Decode a raw HTTP response into ``response_cls``.

    Raises:
        ApiError: The body is a well-formed exchange error
        DeserializationError: The body is neither a success nor an error body
    """
    try:
        body = response_cls.body_model.model_validate_json(raw.body_text)
    except ValidationError as success_exc:
        try:
            error = ErrorResponse.model_validate_json(raw.body_text)
        except ValidationError:
            snippet = raw.body_text[:_SNIPPET_LENGTH]
            logger.debug("Undecodable body for %s: %r", response_cls.__name__, snippet)
            raise DeserializationError(
                f"Cannot decode HTTP {raw.http_status_code} response as "
                f"{response_cls.body_model.__name__}: {success_exc.error_count()} validation error(s)",
                http_status_code=raw.http_status_code,
                body_text=raw.body_text,
            ) from success_exc
        logger.warning(
            "API error status=%s codes=%s",
            error.status,
            ",".join(m.message_code for m in error.messages),
        )
        raise ApiError(error.status, error.messages, http_status_code=raw.http_status_code) from None

    return response_cls(raw.http_status_code, body)


class EmptyResponse(RestResponse[Envelope]):
    """Acknowledgement without a ``data`` block (change and cancel endpoints)."""

    body_model = Envelope
