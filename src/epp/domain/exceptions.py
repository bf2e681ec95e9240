"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Anything else (I/O failures from a repository, for instance) is left to
propagate as-is.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PricingError(DomainException):
    """A line item could not be priced."""


class ProductNotFound(EntityNotFoundError):
    """The price lookup has no product under the given reference."""

    def __init__(self, product_ref: str) -> None:
        super().__init__(f"Product not found: '{product_ref}'")
        self.product_ref = product_ref


class NoValidPrice(PricingError):
    """The product exists but carries neither an employee nor a retail price."""

    def __init__(self, product_ref: str) -> None:
        super().__init__(
            f"Product '{product_ref}' has no valid price "
            f"(employee price or retail price)"
        )
        self.product_ref = product_ref
