"""Abstract Price Lookup consumed by the settlement calculator.

Anything that can answer "what does this product cost?" qualifies: the
product catalog repository, a remote pricing service, a test fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from epp.domain.model.product import ProductPricing


class PriceLookup(ABC):

    @abstractmethod
    def find_product_pricing(self, product_ref: str) -> ProductPricing | None:
        """Return the price pair for a product, or None if it does not exist.

        Transport or storage failures are raised as-is.
        """
