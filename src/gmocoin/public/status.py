"""Exchange status endpoint."""

from __future__ import annotations

from pydantic import BaseModel

from ..endpoints import PUBLIC_ENDPOINT, STATUS_PATH, public_get
from ..enums import ExchangeStatus
from ..response import Envelope, RestResponse
from ..transport import HttpClient


class StatusData(BaseModel):
    status: str

    model_config = {"frozen": True}


class Status(Envelope):
    data: StatusData


class StatusResponse(RestResponse[Status]):
    body_model = Status

    @property
    def status(self) -> str:
        """Exchange state as sent: OPEN, PREOPEN or MAINTENANCE."""
        return self.body.data.status

    def is_open(self) -> bool:
        return self.status == ExchangeStatus.OPEN.value

    def is_pre_open(self) -> bool:
        return self.status == ExchangeStatus.PREOPEN.value

    def is_maintenance(self) -> bool:
        return self.status == ExchangeStatus.MAINTENANCE.value


async def request_status(http_client: HttpClient, *, base_url: str = PUBLIC_ENDPOINT) -> StatusResponse:
    return await public_get(http_client, base_url, STATUS_PATH, StatusResponse)
