import click
import uvicorn

from storefront.domain.exceptions import ConfigurationError
from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.db_commands import db_init
from storefront.infrastructure.cli.product_commands import product_list, product_show
from storefront.infrastructure.config import Settings
from storefront.infrastructure.log_setup import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog and checkout service"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def db() -> None:
    """Manage the relational store."""


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: $HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: $PORT or 3000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
cli.add_command(checkout)
product.add_command(product_list)
product.add_command(product_show)
db.add_command(db_init)
