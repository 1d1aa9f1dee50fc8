"""Tests for numeric, identifier and timestamp coercion."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from gmocoin.coercion import (
    coerce_float,
    coerce_id,
    coerce_id_list,
    coerce_int,
    format_exchange_timestamp,
    id_to_wire_int,
    parse_exchange_timestamp,
    to_wire_decimal,
)
from gmocoin.errors import IdConversionError
from gmocoin.models import Order


class TestNumbers:
    def test_string_and_number_give_same_int(self):
        assert coerce_int("750760") == coerce_int(750760) == 750760

    def test_string_and_number_give_same_float(self):
        assert coerce_float("194785.8484") == coerce_float(194785.8484)
        assert coerce_float("1") == coerce_float(1) == 1.0

    def test_int_target_accepts_integral_float(self):
        assert coerce_int(2.0) == 2

    @pytest.mark.parametrize("value", ["1.5", 1.5, "abc", ""])
    def test_int_target_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            coerce_int(value)

    @pytest.mark.parametrize("value", ["abc", "nan", "1,000", "inf"])
    def test_float_target_rejects_non_numeric_strings(self, value):
        with pytest.raises(ValueError):
            coerce_float(value)

    @pytest.mark.parametrize("value", [None, True, [1], {"a": 1}])
    def test_non_scalar_shapes_are_type_errors(self, value):
        with pytest.raises(TypeError):
            coerce_float(value)


class TestIdentifiers:
    def test_number_becomes_string(self):
        assert coerce_id(637000) == "637000"

    def test_string_kept(self):
        assert coerce_id("637000") == "637000"

    def test_mixed_list(self):
        assert coerce_id_list([637000, "637002"]) == ["637000", "637002"]

    @pytest.mark.parametrize("value", [1.5, None, False])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(TypeError):
            coerce_id(value)

    def test_id_to_wire_int(self):
        assert id_to_wire_int("637000") == 637000
        assert id_to_wire_int(637000) == 637000

    @pytest.mark.parametrize("value", ["abc", "12a", "", "1.0"])
    def test_id_to_wire_int_rejects_non_numeric(self, value):
        with pytest.raises(IdConversionError):
            id_to_wire_int(value)

    def test_id_conversion_error_is_value_error(self):
        with pytest.raises(ValueError):
            id_to_wire_int("abc")

    def test_model_accepts_numeric_and_string_ids(self, sample_order):
        numeric = Order.model_validate(sample_order)
        textual = Order.model_validate({**sample_order, "rootOrderId": "123456789", "orderId": "123456789"})
        assert numeric.order_id == textual.order_id == "123456789"
        assert numeric.root_order_id == "123456789"


class TestTimestamps:
    def test_parse(self):
        parsed = parse_exchange_timestamp("2019-03-19T02:15:06.001Z")
        assert parsed == datetime(2019, 3, 19, 2, 15, 6, 1000, tzinfo=timezone.utc)
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize(
        "value",
        [
            "2019-03-19T02:15:06Z",
            "2019-03-19 02:15:06.001Z",
            "2019-03-19T02:15:06.001",
            "2019-03-19T02:15:06.001+09:00",
            "2019-13-19T02:15:06.001Z",
            "",
        ],
    )
    def test_parse_rejects_other_formats(self, value):
        with pytest.raises(ValueError):
            parse_exchange_timestamp(value)

    def test_parse_rejects_non_string(self):
        with pytest.raises(TypeError):
            parse_exchange_timestamp(1552961706001)

    def test_format(self):
        value = datetime(2018, 3, 30, 12, 34, 56, 789000, tzinfo=timezone.utc)
        assert format_exchange_timestamp(value) == "2018-03-30T12:34:56.789Z"


class TestWireDecimal:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.1, "0.1"),
            (1.0, "1"),
            (100, "100"),
            (1e-8, "0.00000001"),
            (Decimal("0.0100"), "0.01"),
            (637000, "637000"),
        ],
    )
    def test_rendering(self, value, expected):
        assert to_wire_decimal(value) == expected

    @pytest.mark.parametrize("value", [float("inf"), float("nan"), "abc"])
    def test_rejects_non_finite(self, value):
        with pytest.raises(ValueError):
            to_wire_decimal(value)
