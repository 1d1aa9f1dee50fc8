"""Execution information endpoint."""

from __future__ import annotations

from pydantic import Field

from ..endpoints import EXECUTIONS_PATH, PRIVATE_ENDPOINT, private_get
from ..errors import OrderParameterError
from ..models import Execution, ListData
from ..response import Envelope, RestResponse
from ..signing import Credentials
from ..transport import HttpClient


class Executions(Envelope):
    data: ListData[Execution] = Field(default_factory=ListData[Execution])


class ExecutionsResponse(RestResponse[Executions]):
    body_model = Executions

    @property
    def executions(self) -> list[Execution]:
        return self.body.data.items

    @property
    def executed_size(self) -> float:
        return sum(item.size for item in self.body.data.items)


async def request_executions(
    http_client: HttpClient,
    credentials: Credentials,
    *,
    order_id: str | None = None,
    execution_id: str | None = None,
    base_url: str = PRIVATE_ENDPOINT,
) -> ExecutionsResponse:
    """Fetch executions by order id or by execution id (exactly one of them)."""
    if (order_id is None) == (execution_id is None):
        raise OrderParameterError("Specify exactly one of order_id or execution_id")
    params = {"orderId": order_id, "executionId": execution_id}
    return await private_get(
        http_client, credentials, base_url, EXECUTIONS_PATH, ExecutionsResponse, params
    )


async def request_executions_with_order_id(
    http_client: HttpClient,
    credentials: Credentials,
    order_id: str,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> ExecutionsResponse:
    return await request_executions(http_client, credentials, order_id=order_id, base_url=base_url)


async def request_executions_with_execution_id(
    http_client: HttpClient,
    credentials: Credentials,
    execution_id: str,
    *,
    base_url: str = PRIVATE_ENDPOINT,
) -> ExecutionsResponse:
    return await request_executions(http_client, credentials, execution_id=execution_id, base_url=base_url)
