"""CLI command for placing an order."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutItemSpec, CheckoutResultDTO, CustomerSpec
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli._runtime import run_with_container


def _parse_items(raw: str) -> list[CheckoutItemSpec]:
    """Parse '3:2,1:1' into CheckoutItemSpec list."""
    specs: list[CheckoutItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
        specs.append(CheckoutItemSpec(product_id=product_id, quantity=qty))
    return specs


@click.command("checkout")
@click.option("--customer", default=None, help="Customer name (defaults to Guest).")
@click.option("--email", default=None, help="Customer email.")
@click.option("--address", default=None, help="Shipping address.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def checkout(customer: str | None, email: str | None, address: str | None, items: str) -> None:
    """Place an order for the given cart."""
    specs = _parse_items(items)
    customer_spec = CustomerSpec(name=customer, email=email, address=address)

    async def _checkout(container: Container) -> CheckoutResultDTO:
        handler = CheckoutHandler(
            order_repo=await container.order_repository(),
            product_repo=await container.product_repository(),
        )
        return await handler.handle(customer_spec, specs)

    try:
        dto = run_with_container(_checkout)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id} placed")
    click.echo(f"Total: ${dto.total:.2f}")
