"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Client-supplied data is invalid or a business rule was violated."""


class UnknownProductError(ValidationError):
    """A checkout referenced a product that is not in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The store was unreachable or a transaction aborted mid-write."""


class ConfigurationError(DomainException):
    """The process environment holds an unusable setting."""
