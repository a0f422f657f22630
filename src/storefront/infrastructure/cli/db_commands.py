"""CLI commands for managing the relational store."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli._runtime import run_with_container
from storefront.infrastructure.persistence.schema import create_schema


@click.command("init")
@click.option("--seed/--no-seed", default=True, help="Seed an empty catalog with sample products.")
def db_init(seed: bool) -> None:
    """Create the store's tables."""

    async def _init(container: Container) -> int | None:
        engine = await container.connector.engine()
        if engine is None:
            return None
        return await create_schema(engine, seed=seed)

    inserted = run_with_container(_init)
    if inserted is None:
        raise click.ClickException("Store is not reachable; nothing to initialise.")

    click.echo("Schema ready.")
    if inserted:
        click.echo(f"Seeded {inserted} product(s).")
