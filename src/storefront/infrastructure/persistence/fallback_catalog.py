"""Sample catalog served when no durable store is available."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(id: int, name: str, description: str, price: str, seed: str) -> Product:
    return Product(
        id=id,
        name=name,
        description=description,
        price=Money.of(price),
        image_url=f"https://picsum.photos/seed/{seed}/600/400",
    )


FALLBACK_PRODUCTS: tuple[Product, ...] = (
    _product(1, "Wireless Earbuds",
             "Compact earbuds with noise isolation and long battery life.",
             "39.99", "earbuds"),
    _product(2, "Smartphone Case",
             "Shock-absorbing case with raised edges for screen protection.",
             "14.99", "case"),
    _product(3, "USB-C Fast Charger",
             "20W USB-C power adapter for rapid charging.",
             "19.99", "charger"),
    _product(4, "Bluetooth Speaker",
             "Portable speaker with deep bass and 10h playtime.",
             "49.99", "speaker"),
    _product(5, "Screen Protector (2-Pack)",
             "Tempered glass with easy alignment tray.",
             "12.99", "protector"),
    _product(6, "MagSafe Power Bank",
             "Magnetic wireless power bank, 5000mAh.",
             "34.99", "powerbank"),
    _product(7, "Car Phone Mount",
             "Stable air-vent mount with one-hand operation.",
             "16.99", "mount"),
    _product(8, "Silicone Watch Band",
             "Sweat-resistant band compatible with popular smartwatches.",
             "9.99", "band"),
)
