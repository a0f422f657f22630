"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: Order) -> int:
        """Persist the order header and all its line items as one unit.

        Returns the generated order id. Raises PersistenceError if the
        write could not be completed; nothing is left behind in that case.
        """
