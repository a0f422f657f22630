"""Product entity.

Products are owned by the catalog. The checkout core only reads them:
it takes a price snapshot and never writes back.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    name: str
    price: Money
    image_url: str
    description: str | None = None
