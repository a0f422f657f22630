"""Schema creation and catalog seeding for a fresh store."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from storefront.infrastructure.persistence.fallback_catalog import FALLBACK_PRODUCTS
from storefront.infrastructure.persistence.tables import Base, ProductTable

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine, seed: bool = True) -> int:
    """Create any missing tables; seed an empty catalog.

    Returns the number of products inserted.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

        if not seed:
            return 0

        count = select(func.count()).select_from(ProductTable)
        existing = (await conn.execute(count)).scalar_one()
        if existing:
            logger.info("Catalog already holds %d product(s); not seeding", existing)
            return 0

        await conn.execute(
            ProductTable.__table__.insert(),
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "description": p.description,
                    "price": p.price.quantized(),
                    "image_url": p.image_url,
                }
                for p in FALLBACK_PRODUCTS
            ],
        )
    logger.info("Seeded catalog with %d product(s)", len(FALLBACK_PRODUCTS))
    return len(FALLBACK_PRODUCTS)
