"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Customer, Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity


def _make_item(product_id: int = 1, qty: int = 1, price: str = "15.00") -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id=product_id,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestCustomer:

    def test_name_kept(self):
        assert Customer.of("Alice").name == "Alice"

    def test_missing_name_defaults_to_guest(self):
        assert Customer.of(None).name == "Guest"

    def test_blank_name_defaults_to_guest(self):
        assert Customer.of("   ").name == "Guest"

    def test_blank_contact_details_become_none(self):
        customer = Customer.of("Alice", email="", address="  ")
        assert customer.email is None
        assert customer.address is None

    def test_contact_details_trimmed(self):
        customer = Customer.of(" Alice ", email=" a@example.test ", address="1 Main St")
        assert customer == Customer("Alice", "a@example.test", "1 Main St")


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(Customer.of("Alice"), [_make_item(qty=2, price="10.00")])
        assert order.customer.name == "Alice"
        assert len(order.items) == 1
        assert order.total == Money.of("20.00")

    def test_total_is_sum_of_line_items(self):
        order = Order.create(
            Customer.of("Bob"),
            [
                _make_item(1, qty=3, price="15.00"),
                _make_item(2, qty=5, price="25.00"),
            ],
        )
        assert order.total == Money.of("170.00")

    def test_same_product_twice_counts_twice(self):
        order = Order.create(
            Customer.of("Bob"),
            [_make_item(3, qty=1, price="19.99"), _make_item(3, qty=2, price="19.99")],
        )
        assert len(order.items) == 2
        assert order.total == Money.of("59.97")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create(Customer.of("Alice"), [])

    def test_items_cannot_be_changed_through_the_input_list(self):
        items = [_make_item()]
        order = Order.create(Customer.of("Alice"), items)
        items.append(_make_item(2))
        assert len(order.items) == 1


class TestOrderLineItem:

    def test_line_total_calculation(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")
