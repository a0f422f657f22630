"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Which repositories are handed out depends on whether the store
connector settled on a live connection or on fallback mode.
"""

from __future__ import annotations

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.database import StoreConnector
from storefront.infrastructure.persistence.fallback_catalog import FALLBACK_PRODUCTS
from storefront.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from storefront.infrastructure.persistence.simulated_order_repository import (
    SimulatedOrderRepository,
)
from storefront.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


class Container:

    def __init__(self, settings: Settings, connector: StoreConnector | None = None) -> None:
        self.settings = settings
        self.connector = connector or StoreConnector(
            settings.database_url, command_timeout=settings.command_timeout
        )
        self._fallback_products = InMemoryProductRepository(FALLBACK_PRODUCTS)
        self._simulated_orders = SimulatedOrderRepository()

    async def product_repository(self) -> ProductRepository:
        session_factory = await self.connector.session_factory()
        if session_factory is None:
            return self._fallback_products
        return SqlProductRepository(session_factory, self.connector.command_timeout)

    async def order_repository(self) -> OrderRepository:
        session_factory = await self.connector.session_factory()
        if session_factory is None:
            return self._simulated_orders
        return SqlOrderRepository(session_factory, self.connector.command_timeout)

    async def db_connected(self) -> bool:
        return await self.connector.is_connected()

    async def close(self) -> None:
        await self.connector.dispose()
