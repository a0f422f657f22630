"""In-memory implementation of ProductRepository.

Serves a fixed list of products held in process memory. Used as the
catalog whenever the durable store is unavailable.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: Iterable[Product]) -> None:
        self._store: dict[int, Product] = {p.id: p for p in products}

    async def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.id)

    async def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    async def get_many(self, product_ids: Iterable[int]) -> dict[int, Product]:
        return {pid: self._store[pid] for pid in product_ids if pid in self._store}
