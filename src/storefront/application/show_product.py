"""Application service: Show Product use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.list_products import to_product_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: int) -> ProductDTO:
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product {product_id} not found")
        return to_product_dto(product)
