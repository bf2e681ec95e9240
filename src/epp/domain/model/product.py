"""Product aggregate.

Products carry two price tiers: the employee price offered through the
purchase program and the regular retail price. Either may be missing.
"""

from __future__ import annotations

from dataclasses import dataclass

from epp.domain.exceptions import ValidationError
from epp.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductPricing:
    """The price pair a Price Lookup returns for one product."""

    employee_price: Money | None = None
    retail_price: Money | None = None

    def effective_price(self) -> Money:
        """Employee price when present, else retail price, else zero."""
        if self.employee_price is not None:
            return self.employee_price
        if self.retail_price is not None:
            return self.retail_price
        return Money.zero()


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price updates are a legitimate
    mutation on the aggregate. Settled orders are unaffected by price
    changes; they capture the resolved unit price.
    """

    id: str
    name: str
    employee_price: Money | None = None
    retail_price: Money | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        employee_price: Money | None = None,
        retail_price: Money | None = None,
    ) -> Product:
        """Create a new catalog entry, enforcing the price rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        Product._check_prices(employee_price, retail_price)
        return Product(
            id=id,
            name=name.strip(),
            employee_price=employee_price,
            retail_price=retail_price,
        )

    @property
    def pricing(self) -> ProductPricing:
        return ProductPricing(
            employee_price=self.employee_price,
            retail_price=self.retail_price,
        )

    def update_prices(
        self,
        employee_price: Money | None = None,
        retail_price: Money | None = None,
    ) -> None:
        """Change one or both price tiers; ``None`` leaves a tier as-is."""
        if employee_price is None and retail_price is None:
            raise ValidationError("At least one price must be given")
        self._check_prices(employee_price, retail_price)
        if employee_price is not None:
            self.employee_price = employee_price
        if retail_price is not None:
            self.retail_price = retail_price

    @staticmethod
    def _check_prices(*prices: Money | None) -> None:
        for price in prices:
            if price is not None and price.is_zero:
                raise ValidationError("Product price must be greater than zero")
