"""CLI commands for adding, deleting and listing products."""

from __future__ import annotations

import click

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.domain.model.catalog import Catalog


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--producer", required=True, help="Producer name.")
@click.pass_obj
def product_add(catalog: Catalog, product_id: str, name: str, producer: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(shop=catalog)

    if not handler.handle(product_id=product_id, name=name, producer=producer):
        raise click.ClickException(f"Product with ID '{product_id}' already exists")

    click.echo(f"Product #{product_id} '{name}' by {producer} added")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(catalog: Catalog, product_id: str) -> None:
    """Delete a product from the catalog."""
    handler = DeleteProductHandler(shop=catalog)

    if not handler.handle(product_id=product_id):
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    click.echo(f"Product #{product_id} deleted")


@click.command("list")
@click.pass_obj
def product_list(catalog: Catalog) -> None:
    """List all products in the catalog."""
    products = catalog.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Producer':<20}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.producer:<20}")
