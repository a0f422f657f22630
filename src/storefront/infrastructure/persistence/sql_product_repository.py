"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.tables import ProductTable, fits_integer_column

logger = logging.getLogger(__name__)


class SqlProductRepository(ProductRepository):

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        command_timeout: float,
    ) -> None:
        self._session_factory = session_factory
        self._command_timeout = command_timeout

    # --- ProductRepository interface ------------------------------------------

    async def list_all(self) -> list[Product]:
        stmt = select(ProductTable).order_by(ProductTable.id)
        rows = await self._fetch(stmt, "Failed to list products")
        return [self._to_domain(row) for row in rows]

    async def get_by_id(self, product_id: int) -> Product | None:
        # no stored row can carry an id the column cannot hold
        if not fits_integer_column(product_id):
            return None
        stmt = select(ProductTable).where(ProductTable.id == product_id)
        rows = await self._fetch(stmt, "Failed to get product")
        return self._to_domain(rows[0]) if rows else None

    async def get_many(self, product_ids: Iterable[int]) -> dict[int, Product]:
        ids = [pid for pid in product_ids if fits_integer_column(pid)]
        if not ids:
            return {}
        stmt = select(ProductTable).where(ProductTable.id.in_(ids))
        rows = await self._fetch(stmt, "Failed to resolve prices")
        return {row.id: self._to_domain(row) for row in rows}

    # --- Query helpers --------------------------------------------------------

    async def _fetch(self, stmt: Select, failure: str) -> list[ProductTable]:
        try:
            return await asyncio.wait_for(self._scalars(stmt), self._command_timeout)
        except (SQLAlchemyError, asyncio.TimeoutError) as exc:
            logger.exception(failure)
            raise PersistenceError(failure) from exc

    async def _scalars(self, stmt: Select) -> list[ProductTable]:
        async with self._session_factory() as session:
            result = await session.scalars(stmt)
            return list(result)

    @staticmethod
    def _to_domain(row: ProductTable) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=Money.of(row.price),
            image_url=row.image_url,
        )
