"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI adapters and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CustomerSpec:
    """Input: who is placing the order, exactly as submitted."""

    name: str | None = None
    email: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class CheckoutItemSpec:
    """Input: one cart line (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class CheckoutResultDTO:
    """Output: the placed order's id and its authoritative total."""

    order_id: int
    total: Decimal


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry."""

    id: int
    name: str
    description: str | None
    price: Decimal
    image_url: str
