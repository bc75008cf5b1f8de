"""CLI commands for the two product searches."""

from __future__ import annotations

import click

from shop.application.search_products import (
    ListProductsByNameHandler,
    ListProductsByProducerHandler,
)
from shop.domain.model.catalog import Catalog


def echo_results(results: list[str]) -> None:
    if not results:
        click.echo("No products found.")
        return
    for line in results:
        click.echo(line)


@click.command("name")
@click.argument("search_string")
@click.pass_obj
def search_name(catalog: Catalog, search_string: str) -> None:
    """List up to 10 products whose name contains SEARCH_STRING."""
    handler = ListProductsByNameHandler(shop=catalog)
    echo_results(handler.handle(search_string))


@click.command("producer")
@click.argument("search_string")
@click.pass_obj
def search_producer(catalog: Catalog, search_string: str) -> None:
    """List up to 10 products whose producer contains SEARCH_STRING."""
    handler = ListProductsByProducerHandler(shop=catalog)
    echo_results(handler.handle(search_string))
