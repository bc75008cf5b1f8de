import logging
from pathlib import Path

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure import bootstrap
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
)
from shop.infrastructure.cli.search_commands import search_name, search_producer
from shop.infrastructure.cli.session_command import session


@click.group()
@click.option(
    "--seed",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SHOP_SEED_FILE",
    help="JSON file of products to start the catalog with.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, seed: Path | None, verbose: bool) -> None:
    """Shop — in-memory product catalog"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx.obj = bootstrap.catalog(seed)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def search() -> None:
    """Search products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
search.add_command(search_name)
search.add_command(search_producer)
cli.add_command(session)
