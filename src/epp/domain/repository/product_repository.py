"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import abstractmethod

from epp.domain.model.product import Product, ProductPricing
from epp.domain.repository.price_lookup import PriceLookup


class ProductRepository(PriceLookup):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    # --- PriceLookup ----------------------------------------------------------

    def find_product_pricing(self, product_ref: str) -> ProductPricing | None:
        product = self.get_by_id(product_ref)
        return product.pricing if product is not None else None
