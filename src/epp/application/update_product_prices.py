"""Application service: Update Product Prices use case."""

from __future__ import annotations

from epp.domain.exceptions import EntityNotFoundError
from epp.domain.model.product import Product
from epp.domain.model.value_objects import Money
from epp.domain.repository.product_repository import ProductRepository


class UpdateProductPricesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        employee_price: str | None = None,
        retail_price: str | None = None,
    ) -> Product:
        """Update one or both price tiers of a product.

        Ledgers already opened keep the total they were settled at.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update_prices(
            employee_price=Money.of(employee_price) if employee_price else None,
            retail_price=Money.of(retail_price) if retail_price else None,
        )
        self._product_repo.save(product)
        return product
