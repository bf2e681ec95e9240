"""Application service: Add Product use case."""

from __future__ import annotations

from epp.domain.exceptions import ValidationError
from epp.domain.model.product import Product
from epp.domain.model.value_objects import Money
from epp.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        employee_price: str | None = None,
        retail_price: str | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        A product may be added without any price; it then cannot be
        settled unless the caller supplies an explicit unit price.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product.create(
            id=next_id,
            name=name,
            employee_price=Money.of(employee_price) if employee_price else None,
            retail_price=Money.of(retail_price) if retail_price else None,
        )
        self._product_repo.save(product)
        return product
