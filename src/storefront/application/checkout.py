"""Application service: Checkout use case.

Orchestrates the flow between the catalog, the pricing service and
order persistence. Validation happens before anything is written; a
failed checkout leaves no order behind.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CheckoutItemSpec, CheckoutResultDTO, CustomerSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Customer, Order, OrderLineItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.pricing_service import PricingService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._pricing = PricingService(product_repo)

    async def handle(
        self,
        customer: CustomerSpec | None,
        item_specs: list[CheckoutItemSpec],
    ) -> CheckoutResultDTO:
        """Place an order.

        Steps:
        1. Reject a missing customer or an empty cart.
        2. Resolve every distinct product id to its current price.
        3. Build one line item per cart line with that price snapshot.
        4. Persist header and lines atomically, return id and total.
        """
        if customer is None or not item_specs:
            raise ValidationError("Missing customer or items")

        quantities = [Quantity(spec.quantity) for spec in item_specs]
        prices = await self._pricing.resolve_prices(
            spec.product_id for spec in item_specs
        )

        # duplicate product ids stay separate lines
        line_items = [
            OrderLineItem(
                product_id=spec.product_id,
                quantity=quantity,
                unit_price=prices[spec.product_id],  # <-- price snapshot
            )
            for spec, quantity in zip(item_specs, quantities)
        ]

        order = Order.create(
            customer=Customer.of(customer.name, customer.email, customer.address),
            items=line_items,
        )
        order_id = await self._order_repo.create(order)

        logger.info(
            "Order #%d placed for %s: %d line(s), total %s",
            order_id,
            order.customer.name,
            len(order.items),
            order.total,
        )
        return CheckoutResultDTO(order_id=order_id, total=order.total.quantized())
