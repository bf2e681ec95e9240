"""Tests for the QuoteOrder use case.

Uses in-memory fakes, no file I/O.
"""

import pytest

from epp.application.dto import LineItemSpec
from epp.application.quote_order import QuoteOrderHandler
from epp.domain.exceptions import NoValidPrice, ProductNotFound, ValidationError
from epp.domain.model.product import Product
from epp.domain.model.value_objects import Money, TaxRate
from tests.fakes import FakeProductRepository


def _handler() -> QuoteOrderHandler:
    products = [
        Product(id="1", name="Headphones", employee_price=Money.of("80"), retail_price=Money.of("100")),
        Product(id="2", name="Charger", retail_price=Money.of("50")),
        Product(id="3", name="Sample"),
    ]
    return QuoteOrderHandler(FakeProductRepository(products))


class TestQuoteOrder:

    def test_prices_from_catalog(self):
        dto = _handler().handle([LineItemSpec("1", 2), LineItemSpec("2", 1)])
        assert [i.unit_price for i in dto.items] == ["$80.00", "$50.00"]
        assert dto.subtotal == "$210.00"
        assert dto.tax == "$21.00"
        assert dto.total == "$231.00"

    def test_explicit_price_and_discount(self):
        dto = _handler().handle([LineItemSpec("99", 2, unit_price="100", discount="0")])
        assert dto.items[0].subtotal == "$200.00"
        assert dto.total == "$220.00"

    def test_custom_tax_rate(self):
        dto = _handler().handle([LineItemSpec("2", 1)], tax_rate=TaxRate.of("0"))
        assert dto.total == "$50.00"

    def test_excess_discount(self):
        dto = _handler().handle([LineItemSpec("x", 1, unit_price="10", discount="50")])
        assert dto.items[0].subtotal == "$0.00"
        assert dto.discount == "$50.00"
        assert dto.total == "$0.00"

    def test_unknown_product(self):
        with pytest.raises(ProductNotFound):
            _handler().handle([LineItemSpec("404", 1)])

    def test_product_without_price(self):
        with pytest.raises(NoValidPrice):
            _handler().handle([LineItemSpec("3", 1)])

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _handler().handle([LineItemSpec("1", 0)])
