"""Pytest configuration and fixtures."""

import json

import pytest

from gmocoin.signing import Credentials
from gmocoin.transport import InMemoryClient

RESPONSETIME = "2019-03-19T02:15:06.001Z"


def envelope(data, responsetime=RESPONSETIME) -> str:
    """Success body text around ``data``."""
    return json.dumps({"status": 0, "data": data, "responsetime": responsetime})


def error_body(status=5, code="ERR-5122", message="The request is invalid due to the status of the specified order.") -> str:
    return json.dumps(
        {
            "status": status,
            "messages": [{"message_code": code, "message_string": message}],
            "responsetime": RESPONSETIME,
        }
    )


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret."""
    return "test_api_secret_789012"


@pytest.fixture
def credentials(api_key, api_secret):
    return Credentials(api_key, api_secret)


@pytest.fixture
def client_factory():
    """Build an in-memory client answering with the given body."""

    def _make(body_text: str, http_status_code: int = 200) -> InMemoryClient:
        return InMemoryClient(http_status_code=http_status_code, body_text=body_text)

    return _make


@pytest.fixture
def sample_order():
    """Order as returned by the orders and activeOrders endpoints."""
    return {
        "rootOrderId": 123456789,
        "orderId": 123456789,
        "symbol": "BTC",
        "side": "BUY",
        "orderType": "NORMAL",
        "executionType": "LIMIT",
        "settleType": "OPEN",
        "size": "1",
        "executedSize": "0",
        "price": "840000",
        "losscutPrice": "0",
        "status": "ORDERED",
        "timeInForce": "FAS",
        "timestamp": "2019-03-19T01:07:24.217Z",
    }


@pytest.fixture
def sample_execution():
    return {
        "executionId": 72123911,
        "orderId": 123456789,
        "positionId": 1234567,
        "symbol": "BTC",
        "side": "BUY",
        "settleType": "OPEN",
        "size": "0.7361",
        "price": "877404",
        "lossGain": "0",
        "fee": "323",
        "timestamp": "2019-03-19T02:15:06.081Z",
    }


@pytest.fixture
def sample_position():
    return {
        "positionId": 1234567,
        "symbol": "BTC_JPY",
        "side": "BUY",
        "size": "0.22",
        "orderdSize": "0",
        "price": "876045",
        "lossGain": "14",
        "leverage": "4",
        "losscutPrice": "766540",
        "timestamp": "2019-03-19T02:15:06.094Z",
    }
