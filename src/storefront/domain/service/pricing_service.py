"""Domain service: resolve authoritative unit prices for a cart.

Prices always come from the catalog. Whatever the client believes a
product costs is never consulted.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.exceptions import UnknownProductError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class PricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def resolve_prices(self, product_ids: Iterable[int]) -> dict[int, Money]:
        """Map each distinct product id to its current price.

        All ids are looked up in one batch. The first id (in request
        order) missing from the catalog raises UnknownProductError and
        no partial mapping is returned.
        """
        distinct = list(dict.fromkeys(product_ids))
        found = await self._product_repo.get_many(distinct)

        prices: dict[int, Money] = {}
        for product_id in distinct:
            product = found.get(product_id)
            if product is None:
                raise UnknownProductError(product_id)
            prices[product_id] = product.price
        return prices
