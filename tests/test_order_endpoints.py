"""Tests for the signed order, change, cancel and close endpoints."""

import hashlib
import hmac
import json

import pytest

from conftest import envelope, error_body
from gmocoin.enums import ExecutionType, SettleType, Side, Symbol, TimeInForce
from gmocoin.errors import ApiError, IdConversionError, OrderParameterError
from gmocoin.private import (
    request_cancel_bulk_order,
    request_cancel_order,
    request_cancel_orders,
    request_change_losscut_price,
    request_change_order,
    request_close_bulk_order,
    request_close_order,
    request_order,
)
from gmocoin.private.order import build_order_parameters
from gmocoin.signing import canonical_json

ACK = '{"status":0,"responsetime":"2019-03-19T01:07:24.557Z"}'


def assert_signed_post(request, api_secret, path):
    """The signature covers exactly the JSON text that goes on the wire."""
    timestamp = request.headers["API-TIMESTAMP"]
    message = f"{timestamp}POST{path}{canonical_json(request.json_body)}"
    expected = hmac.new(api_secret.encode(), message.encode(), hashlib.sha256).hexdigest()
    assert request.headers["API-SIGN"] == expected
    assert request.headers["Content-Type"] == "application/json"


class TestOrderParameters:
    def test_limit_order(self):
        body = build_order_parameters(ExecutionType.LIMIT, Symbol.BTC, Side.BUY, 0.1, price=1000000)

        assert body == {
            "symbol": "BTC",
            "side": "BUY",
            "executionType": "LIMIT",
            "timeInForce": "FAS",
            "size": "0.1",
            "price": "1000000",
        }

    def test_market_order_defaults_to_fak(self):
        body = build_order_parameters("MARKET", "BTC_JPY", "SELL", 1.0)

        assert body["timeInForce"] == "FAK"
        assert body["size"] == "1"
        assert "price" not in body

    def test_stop_order_defaults_to_fak(self):
        body = build_order_parameters(ExecutionType.STOP, Symbol.ETH, Side.SELL, 0.01, price=20000)

        assert body["timeInForce"] == "FAK"
        assert body["price"] == "20000"

    def test_explicit_time_in_force_and_losscut(self):
        body = build_order_parameters(
            ExecutionType.LIMIT,
            Symbol.BTC_JPY,
            Side.BUY,
            0.5,
            price=1000000,
            time_in_force=TimeInForce.SOK,
            losscut_price=900000,
        )

        assert body["timeInForce"] == "SOK"
        assert body["losscutPrice"] == "900000"

    def test_losscut_price_only_for_leveraged_symbols(self):
        assert Symbol.BTC_JPY.is_leveraged
        assert not Symbol.BTC.is_leveraged
        with pytest.raises(OrderParameterError, match="leveraged"):
            build_order_parameters(ExecutionType.LIMIT, Symbol.BTC, Side.BUY, 0.1, price=1000000, losscut_price=900000)
        with pytest.raises(OrderParameterError, match="leveraged"):
            build_order_parameters(ExecutionType.MARKET, "ETH", Side.SELL, 1, losscut_price=200000)

    @pytest.mark.parametrize("execution_type", [ExecutionType.LIMIT, ExecutionType.STOP])
    def test_price_required(self, execution_type):
        with pytest.raises(OrderParameterError):
            build_order_parameters(execution_type, Symbol.BTC, Side.BUY, 0.1)

    def test_market_must_not_have_price(self):
        with pytest.raises(OrderParameterError):
            build_order_parameters(ExecutionType.MARKET, Symbol.BTC, Side.BUY, 0.1, price=1000000)

    @pytest.mark.parametrize("size", [0, -1, float("nan"), float("inf")])
    def test_size_must_be_positive_and_finite(self, size):
        with pytest.raises(OrderParameterError):
            build_order_parameters(ExecutionType.MARKET, Symbol.BTC, Side.BUY, size)


class TestOrder:
    @pytest.mark.asyncio
    async def test_order(self, client_factory, credentials):
        client = client_factory(envelope("637000"))

        response = await request_order(client, credentials, ExecutionType.LIMIT, Symbol.BTC, Side.BUY, 0.1, price=1000000)

        request = client.last_request
        assert request.method == "POST"
        assert request.url == "https://api.coin.z.com/private/v1/order"
        assert_signed_post(request, credentials.api_secret, "/v1/order")
        assert response.order_id == "637000"

    @pytest.mark.asyncio
    async def test_numeric_order_id(self, client_factory, credentials):
        client = client_factory(envelope(637000))

        response = await request_order(client, credentials, "MARKET", "BTC", "BUY", 0.01)

        assert response.order_id == "637000"

    @pytest.mark.asyncio
    async def test_rejection(self, client_factory, credentials):
        client = client_factory(error_body(status=1, code="ERR-201", message="Trading margin is insufficient"))

        with pytest.raises(ApiError) as exc_info:
            await request_order(client, credentials, "MARKET", "BTC", "BUY", 100)
        assert exc_info.value.message_codes == ["ERR-201"]

    @pytest.mark.asyncio
    async def test_invalid_parameters_send_nothing(self, client_factory, credentials):
        client = client_factory(envelope("1"))

        with pytest.raises(OrderParameterError):
            await request_order(client, credentials, "LIMIT", "BTC", "BUY", 0.1)
        assert client.requests == []


class TestChangeOrder:
    @pytest.mark.asyncio
    async def test_change_order(self, client_factory, credentials):
        client = client_factory(ACK)

        response = await request_change_order(client, credentials, "2", 1200000)

        assert client.last_request.json_body == {"orderId": 2, "price": "1200000"}
        assert_signed_post(client.last_request, credentials.api_secret, "/v1/changeOrder")
        assert response.body.status == 0

    @pytest.mark.asyncio
    async def test_with_losscut_price(self, client_factory, credentials):
        client = client_factory(ACK)

        await request_change_order(client, credentials, "2", 1200000, 1000000)

        assert client.last_request.json_body == {"orderId": 2, "price": "1200000", "losscutPrice": "1000000"}

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, client_factory, credentials):
        client = client_factory(ACK)

        with pytest.raises(IdConversionError):
            await request_change_order(client, credentials, "abc", 1200000)
        assert client.requests == []


class TestChangeLosscutPrice:
    @pytest.mark.asyncio
    async def test_change_losscut_price(self, client_factory, credentials):
        client = client_factory(ACK)

        await request_change_losscut_price(client, credentials, "1234567", 766540)

        request = client.last_request
        assert request.url == "https://api.coin.z.com/private/v1/changeLosscutPrice"
        assert request.json_body == {"positionId": 1234567, "losscutPrice": "766540"}
        assert_signed_post(request, credentials.api_secret, "/v1/changeLosscutPrice")


class TestCancelOrder:
    @pytest.mark.asyncio
    async def test_cancel_order(self, client_factory, credentials):
        client = client_factory(ACK)

        await request_cancel_order(client, credentials, "637000")

        assert client.last_request.json_body == {"orderId": 637000}
        assert canonical_json(client.last_request.json_body) == '{"orderId":637000}'

    @pytest.mark.asyncio
    async def test_cancel_rejected(self, client_factory, credentials):
        client = client_factory(error_body(status=1, code="ERR-5122"))

        with pytest.raises(ApiError):
            await request_cancel_order(client, credentials, "637000")

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, client_factory, credentials):
        with pytest.raises(IdConversionError):
            await request_cancel_order(client_factory(ACK), credentials, "ord-1")


class TestCancelOrders:
    @pytest.mark.asyncio
    async def test_partial_failure_is_data(self, client_factory, credentials):
        data = {
            "failed": [
                {"message_code": "ERR-5122", "message_string": "The request is invalid.", "orderId": 1},
                {"message_code": "ERR-5122", "message_string": "The request is invalid.", "orderId": 2},
            ],
            "success": [3, 4],
        }
        client = client_factory(envelope(data))

        response = await request_cancel_orders(client, credentials, ["1", "2", "3", "4"])

        assert client.last_request.json_body == {"orderIds": [1, 2, 3, 4]}
        assert_signed_post(client.last_request, credentials.api_secret, "/v1/cancelOrders")
        assert response.success == ["3", "4"]
        assert [f.order_id for f in response.failed] == ["1", "2"]
        assert response.failed[0].message_code == "ERR-5122"
        assert not response.all_succeeded

    @pytest.mark.asyncio
    async def test_all_succeeded(self, client_factory, credentials):
        client = client_factory(envelope({"success": ["5"]}))

        response = await request_cancel_orders(client, credentials, ["5"])

        assert response.failed == []
        assert response.all_succeeded

    @pytest.mark.asyncio
    async def test_id_limits(self, client_factory, credentials):
        client = client_factory(envelope({}))

        with pytest.raises(OrderParameterError):
            await request_cancel_orders(client, credentials, [])
        with pytest.raises(OrderParameterError):
            await request_cancel_orders(client, credentials, [str(i) for i in range(11)])

    @pytest.mark.asyncio
    async def test_single_string_is_not_an_id_list(self, client_factory, credentials):
        client = client_factory(envelope({}))

        with pytest.raises(OrderParameterError, match="list of ids"):
            await request_cancel_orders(client, credentials, "123")
        assert client.requests == []


class TestCancelBulkOrder:
    @pytest.mark.asyncio
    async def test_cancel_bulk_order(self, client_factory, credentials):
        client = client_factory(envelope([637000, 637002]))

        response = await request_cancel_bulk_order(client, credentials, [Symbol.BTC, Symbol.BTC_JPY])

        assert client.last_request.json_body == {"symbols": ["BTC", "BTC_JPY"], "desc": False}
        assert_signed_post(client.last_request, credentials.api_secret, "/v1/cancelBulkOrder")
        assert response.order_ids == ["637000", "637002"]

    @pytest.mark.asyncio
    async def test_with_filters(self, client_factory, credentials):
        client = client_factory(envelope([]))

        response = await request_cancel_bulk_order(
            client, credentials, ["BTC_JPY"], Side.SELL, SettleType.CLOSE, True
        )

        assert client.last_request.json_body == {
            "symbols": ["BTC_JPY"],
            "side": "SELL",
            "settleType": "CLOSE",
            "desc": True,
        }
        assert '"desc":true' in canonical_json(client.last_request.json_body)
        assert response.order_ids == []

    @pytest.mark.asyncio
    async def test_requires_symbols(self, client_factory, credentials):
        with pytest.raises(OrderParameterError):
            await request_cancel_bulk_order(client_factory(envelope([])), credentials, [])

    @pytest.mark.asyncio
    async def test_single_string_is_not_a_symbol_list(self, client_factory, credentials):
        client = client_factory(envelope([]))

        with pytest.raises(OrderParameterError, match="list of symbols"):
            await request_cancel_bulk_order(client, credentials, "BTC")
        with pytest.raises(OrderParameterError, match="list of symbols"):
            await request_cancel_bulk_order(client, credentials, Symbol.BTC_JPY)
        assert client.requests == []


class TestCloseOrders:
    @pytest.mark.asyncio
    async def test_close_order(self, client_factory, credentials):
        client = client_factory(envelope("637018"))

        response = await request_close_order(
            client, credentials, ExecutionType.LIMIT, Symbol.BTC_JPY, Side.SELL, 0.01, "1234567", price=1000000
        )

        body = client.last_request.json_body
        assert client.last_request.url == "https://api.coin.z.com/private/v1/closeOrder"
        assert body == {
            "symbol": "BTC_JPY",
            "side": "SELL",
            "executionType": "LIMIT",
            "timeInForce": "FAS",
            "price": "1000000",
            "settlePosition": [{"positionId": 1234567, "size": "0.01"}],
        }
        assert_signed_post(client.last_request, credentials.api_secret, "/v1/closeOrder")
        assert response.order_id == "637018"

    @pytest.mark.asyncio
    async def test_close_order_market_rejects_price(self, client_factory, credentials):
        with pytest.raises(OrderParameterError):
            await request_close_order(
                client_factory(envelope("1")), credentials, "MARKET", "BTC_JPY", "SELL", 0.01, "1", price=1
            )

    @pytest.mark.asyncio
    async def test_close_bulk_order(self, client_factory, credentials):
        client = client_factory(envelope(637020))

        response = await request_close_bulk_order(client, credentials, "MARKET", "BTC_JPY", "BUY", 0.5)

        assert client.last_request.url == "https://api.coin.z.com/private/v1/closeBulkOrder"
        assert json.loads(canonical_json(client.last_request.json_body)) == {
            "symbol": "BTC_JPY",
            "side": "BUY",
            "executionType": "MARKET",
            "timeInForce": "FAK",
            "size": "0.5",
        }
        assert response.order_id == "637020"
