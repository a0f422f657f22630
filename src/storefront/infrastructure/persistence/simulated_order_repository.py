"""OrderRepository used when no durable store is available.

Nothing is written. A random order id is handed back so callers see the
same response shape as for a persisted order.
"""

from __future__ import annotations

import logging
import random

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

MAX_SIMULATED_ID = 1_000_000


class SimulatedOrderRepository(OrderRepository):

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def create(self, order: Order) -> int:
        order_id = self._rng.randrange(1, MAX_SIMULATED_ID)
        logger.warning(
            "Simulation mode: order #%d for %s (total %s) was not persisted",
            order_id,
            order.customer.name,
            order.total,
        )
        return order_id
