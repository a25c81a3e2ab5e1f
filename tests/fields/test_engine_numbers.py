"""Tests for integer, decimal and double coercion."""

import datetime as dt
from decimal import Decimal

import pytest

from excel_records.fields import Coerced, CoercionFailure


class TestCoerceInt:
    @pytest.mark.parametrize(
        "value, expected",
        [("42", 42), (" 42 ", 42), (42, 42), (42.0, 42), (3.5, 4), (2.5, 2), (True, 1), (False, 0)],
    )
    def test_valid(self, engine, required_field, value, expected):
        assert engine.coerce_int(value, required_field) == Coerced(expected)

    @pytest.mark.parametrize("value", ["4.2", "abc", "1_000", dt.date(2024, 1, 1), 2**31])
    def test_invalid(self, engine, required_field, value):
        result = engine.coerce_int(value, required_field)
        assert result == CoercionFailure("Quantity must be a valid integer.")

    def test_required_blank(self, engine, required_field):
        assert engine.coerce_int(None, required_field) == CoercionFailure("Required: Quantity")

    def test_optional_blank(self, engine, optional_field):
        assert engine.coerce_int("  ", optional_field) == Coerced(None)

    def test_nan_is_invalid(self, engine, required_field):
        assert not engine.coerce_int(float("nan"), required_field).ok


class TestWidthSpecificMessages:
    def test_short_out_of_range(self, engine, required_field):
        result = engine.coerce_short(40000, required_field)
        assert result == CoercionFailure(
            "Quantity must be a valid short integer (-32768 to 32767)."
        )

    def test_short_in_range(self, engine, required_field):
        assert engine.coerce_short("-32768", required_field) == Coerced(-32768)

    def test_long_accepts_wide_values(self, engine, required_field):
        assert engine.coerce_long("9223372036854775807", required_field) == Coerced(2**63 - 1)

    def test_long_overflow(self, engine, required_field):
        result = engine.coerce_long(str(2**63), required_field)
        assert result == CoercionFailure("Quantity must be a valid long integer.")

    def test_messages_differ_per_width(self, engine, required_field):
        messages = {
            engine.coerce_int("x", required_field).message,
            engine.coerce_short("x", required_field).message,
            engine.coerce_long("x", required_field).message,
        }
        assert len(messages) == 3


class TestCoerceDecimal:
    def test_float_uses_shortest_repr(self, engine, required_field):
        assert engine.coerce_decimal(0.1, required_field) == Coerced(Decimal("0.1"))

    def test_text(self, engine, required_field):
        assert engine.coerce_decimal("12.50", required_field) == Coerced(Decimal("12.50"))

    def test_int(self, engine, required_field):
        assert engine.coerce_decimal(7, required_field) == Coerced(Decimal(7))

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", "1_0"])
    def test_invalid(self, engine, required_field, value):
        result = engine.coerce_decimal(value, required_field)
        assert result == CoercionFailure("Quantity must be a valid number.")

    def test_optional_blank(self, engine, optional_field):
        assert engine.coerce_decimal(None, optional_field) == Coerced(None)


class TestCoerceDouble:
    @pytest.mark.parametrize("value, expected", [("1e3", 1000.0), (2.5, 2.5), ("-0.25", -0.25)])
    def test_valid(self, engine, required_field, value, expected):
        assert engine.coerce_double(value, required_field) == Coerced(expected)

    @pytest.mark.parametrize("value", ["inf", "nan", "twelve", dt.time(8, 0)])
    def test_invalid(self, engine, required_field, value):
        result = engine.coerce_double(value, required_field)
        assert result == CoercionFailure("Quantity must be a valid number.")

    def test_shares_message_with_decimal(self, engine, required_field):
        assert (
            engine.coerce_double("x", required_field).message
            == engine.coerce_decimal("x", required_field).message
        )
