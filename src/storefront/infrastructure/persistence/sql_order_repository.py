"""SQLAlchemy-backed implementation of OrderRepository.

The header row and every line row are written inside one transaction.
If anything fails before the commit, the transaction is rolled back and
no trace of the order remains.
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.tables import OrderItemTable, OrderTable

logger = logging.getLogger(__name__)


class SqlOrderRepository(OrderRepository):

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        command_timeout: float,
    ) -> None:
        self._session_factory = session_factory
        self._command_timeout = command_timeout

    async def create(self, order: Order) -> int:
        try:
            return await asyncio.wait_for(self._write(order), self._command_timeout)
        except (SQLAlchemyError, asyncio.TimeoutError) as exc:
            logger.exception("Checkout failed for %s", order.customer.name)
            raise PersistenceError("Checkout failed") from exc

    async def _write(self, order: Order) -> int:
        async with self._session_factory() as session:
            async with session.begin():
                header = self._header_row(order)
                session.add(header)
                await session.flush()  # assigns header.id

                order_id = header.id
                session.add_all(self._item_rows(order_id, order))
                await session.flush()
        return order_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _header_row(order: Order) -> OrderTable:
        return OrderTable(
            customer_name=order.customer.name,
            email=order.customer.email,
            address=order.customer.address,
            total_amount=order.total.quantized(),
        )

    @staticmethod
    def _item_rows(order_id: int, order: Order) -> list[OrderItemTable]:
        return [
            OrderItemTable(
                order_id=order_id,
                product_id=item.product_id,
                quantity=item.quantity.value,
                unit_price=item.unit_price.quantized(),
            )
            for item in order.items
        ]
