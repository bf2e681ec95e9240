"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from epp.domain.exceptions import ValidationError
from epp.domain.model.value_objects import Money, Quantity, TaxRate, round2


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_rounded_keeps_full_precision_until_asked(self):
        m = Money.of("10.005")
        assert m.amount == Decimal("10.005")
        assert m.rounded() == Money.of("10.01")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


class TestRound2:

    def test_amount_beyond_precision_rejected(self):
        with pytest.raises(ValidationError, match="too large to round"):
            round2(Decimal("1e27"))

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0.005", "0.01"),
            ("0.004", "0.00"),
            ("2.675", "2.68"),
            ("1.0005", "1.00"),
            ("220", "220.00"),
        ],
    )
    def test_half_up(self, raw, expected):
        assert round2(Decimal(raw)) == Decimal(expected)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── TaxRate ──────────────────────────────────────────────────────────────────


class TestTaxRate:

    def test_of_factory(self):
        assert TaxRate.of("0.10").value == Decimal("0.10")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            TaxRate.of("-0.01")

    def test_invalid_rejected(self):
        with pytest.raises(ValidationError, match="Invalid tax rate"):
            TaxRate.of("ten percent")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            TaxRate.of("Infinity")

    def test_str(self):
        assert str(TaxRate.of("0.10")) == "10%"
        assert str(TaxRate.of("0.0825")) == "8.25%"
