"""Unit tests for the Product aggregate and its price pair."""

import pytest

from epp.domain.exceptions import ValidationError
from epp.domain.model.product import Product, ProductPricing
from epp.domain.model.value_objects import Money


class TestEffectivePrice:

    def test_employee_price_preferred(self):
        pricing = ProductPricing(Money.of("80"), Money.of("100"))
        assert pricing.effective_price() == Money.of("80")

    def test_falls_back_to_retail(self):
        pricing = ProductPricing(None, Money.of("50"))
        assert pricing.effective_price() == Money.of("50")

    def test_zero_when_both_missing(self):
        assert ProductPricing().effective_price().is_zero

    def test_present_zero_employee_price_is_not_skipped(self):
        pricing = ProductPricing(Money.of("0"), Money.of("50"))
        assert pricing.effective_price().is_zero


class TestUpdatePrices:

    def _product(self) -> Product:
        return Product(
            id="1",
            name="Laptop",
            employee_price=Money.of("900"),
            retail_price=Money.of("1200"),
        )

    def test_update_one_tier(self):
        product = self._product()
        product.update_prices(employee_price=Money.of("850"))
        assert product.employee_price == Money.of("850")
        assert product.retail_price == Money.of("1200")

    def test_pricing_reflects_update(self):
        product = self._product()
        product.update_prices(retail_price=Money.of("1100"))
        assert product.pricing == ProductPricing(Money.of("900"), Money.of("1100"))

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            self._product().update_prices(retail_price=Money.of("0"))

    def test_nothing_to_update_rejected(self):
        with pytest.raises(ValidationError, match="At least one price"):
            self._product().update_prices()


class TestCreate:

    def test_strips_name(self):
        product = Product.create("1", "  Laptop ", retail_price=Money.of("1200"))
        assert product.name == "Laptop"

    def test_zero_employee_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create("1", "Laptop", employee_price=Money.of("0"), retail_price=Money.of("25"))

    def test_no_prices_allowed(self):
        product = Product.create("1", "Sample")
        assert product.pricing == ProductPricing()
