"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity is zero, negative or not an integer."""


class EmptyOfferError(ValidationError):
    """An offer has no member products."""


class OfferInactiveError(ValidationError):
    """An offer has been deactivated and can no longer be ordered."""


class InsufficientStockError(ValidationError):
    """More units were requested than the product has in stock."""


class AlreadyShippedError(ValidationError):
    """The order has already been shipped."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CategoryNotFoundError(EntityNotFoundError):
    pass


class SupplierNotFoundError(EntityNotFoundError):
    pass


class ProductNotFoundError(EntityNotFoundError):
    pass


class OfferNotFoundError(EntityNotFoundError):
    pass


class OrderNotFoundError(EntityNotFoundError):
    pass


class StoreError(DomainException):
    """The document store could not be read or written."""
