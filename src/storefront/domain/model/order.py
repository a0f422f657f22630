"""Order aggregate, the core of the checkout domain.

The Order is an aggregate root that owns its line items. It is built
once per successful checkout and never changes afterwards; the id is
assigned by the repository that persists it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity

DEFAULT_CUSTOMER_NAME = "Guest"


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Customer:
    name: str
    email: str | None = None
    address: str | None = None

    @staticmethod
    def of(
        name: str | None,
        email: str | None = None,
        address: str | None = None,
    ) -> Customer:
        """Build a customer, filling in the placeholder name when absent."""
        return Customer(
            name=_blank_to_none(name) or DEFAULT_CUSTOMER_NAME,
            email=_blank_to_none(email),
            address=_blank_to_none(address),
        )


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at checkout time."""

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at checkout time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.
    """

    customer: Customer
    items: tuple[OrderLineItem, ...] = field(default_factory=tuple)

    @staticmethod
    def create(customer: Customer, items: list[OrderLineItem]) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(customer=customer, items=tuple(items))

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
