"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from pms.domain.exceptions import InvalidQuantityError, ValidationError
from pms.domain.model.value_objects import Money, Quantity


class TestMoney:

    @pytest.mark.parametrize("raw, expected", [
        ("25.99", Decimal("25.99")),
        (" 12 ", Decimal("12")),
        (10, Decimal("10")),
        (Decimal("0.5"), Decimal("0.5")),
    ])
    def test_of_parses_input(self, raw, expected):
        assert Money.of(raw).amount == expected

    @pytest.mark.parametrize("raw, message", [
        ("twelve", "Invalid money amount"),
        ("", "Invalid money amount"),
        ("NaN", "finite"),
        ("-1", "cannot be negative"),
    ])
    def test_of_rejects_bad_input(self, raw, message):
        with pytest.raises(ValidationError, match=message):
            Money.of(raw)

    def test_requires_decimal(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10)

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_line_arithmetic(self):
        assert Money.of("7.50") * 3 + Money.of("1") == Money.of("23.50")

    def test_scaling_by_float_or_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5
        with pytest.raises(TypeError):
            Money.of("7.50") * True

    def test_total(self):
        prices = [Money.of("1000"), Money.of("800"), Money.of("0.99")]
        assert Money.total(prices) == Money.of("1800.99")
        assert Money.total([]) == Money.zero()

    def test_ordering(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10.00")
        assert max(Money.of("3"), Money.of("30"), Money.of("12")) == Money.of("30")

    def test_display_uses_two_decimals(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


class TestQuantity:

    def test_positive(self):
        assert Quantity(3).value == 3
        assert str(Quantity(3)) == "3"

    @pytest.mark.parametrize("value", [0, -2])
    def test_not_positive_rejected(self, value):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [2.5, "3", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(value)

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Quantity(0)
