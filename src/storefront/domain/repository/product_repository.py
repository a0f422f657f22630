"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory fallback)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by id."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def get_many(self, product_ids: Iterable[int]) -> dict[int, Product]:
        """Return the products found among *product_ids*, keyed by id.

        Ids with no matching product are simply absent from the result.
        """
