"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.dto import ProductDTO
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli._runtime import run_with_container


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""

    async def _list(container: Container) -> list[ProductDTO]:
        return await ListProductsHandler(await container.product_repository()).handle()

    try:
        products = run_with_container(_list)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>10}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<28} {'$' + format(p.price, '.2f'):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""

    async def _show(container: Container) -> ProductDTO:
        return await ShowProductHandler(await container.product_repository()).handle(product_id)

    try:
        dto = run_with_container(_show)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}: {dto.name}")
    click.echo(f"Price:    ${dto.price:.2f}")
    if dto.description:
        click.echo(f"About:    {dto.description}")
    click.echo(f"Image:    {dto.image_url}")
