"""CLI command that runs a script of operations against one catalog.

Each CLI invocation starts from a fresh in-memory catalog, so a session is
the way to chain adds, deletes and searches together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

import click

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.application.search_products import (
    ListProductsByNameHandler,
    ListProductsByProducerHandler,
)
from shop.domain.model.catalog import Catalog
from shop.infrastructure.cli.search_commands import echo_results

_OPERATIONS = ("add", "delete", "name", "producer")


@dataclass(frozen=True)
class SessionStep:
    operation: str
    argument: str


def _parse_script(lines: list[str]) -> list[SessionStep]:
    """Parse lines such as 'add 1|Widget|Acme' or 'name Wid'.

    Only the line terminator and leading indentation are removed; any other
    whitespace belongs to the argument, since searches are literal.
    """
    steps: list[SessionStep] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").lstrip()
        if not line.strip() or line.startswith("#"):
            continue

        operation, _, argument = line.partition(" ")
        if operation not in _OPERATIONS:
            raise click.BadParameter(
                f"Line {line_no}: unknown operation '{operation}'. "
                f"Expected one of: {', '.join(_OPERATIONS)}."
            )
        if operation == "add" and argument.count("|") != 2:
            raise click.BadParameter(
                f"Line {line_no}: expected 'add <id>|<name>|<producer>'."
            )
        steps.append(SessionStep(operation, argument))
    return steps


@click.command("session")
@click.argument("script", type=click.File("r"), default="-")
@click.pass_obj
def session(catalog: Catalog, script: TextIO) -> None:
    """Run catalog operations from SCRIPT (stdin by default)."""
    steps = _parse_script(script.readlines())

    for step in steps:
        if step.operation == "add":
            product_id, name, producer = step.argument.split("|")
            added = AddProductHandler(shop=catalog).handle(product_id, name, producer)
            click.echo(f"add {product_id}: {'ok' if added else 'exists'}")
        elif step.operation == "delete":
            deleted = DeleteProductHandler(shop=catalog).handle(step.argument)
            click.echo(f"delete {step.argument}: {'ok' if deleted else 'not found'}")
        elif step.operation == "name":
            click.echo(f"name {step.argument}:")
            echo_results(ListProductsByNameHandler(shop=catalog).handle(step.argument))
        else:
            click.echo(f"producer {step.argument}:")
            echo_results(
                ListProductsByProducerHandler(shop=catalog).handle(step.argument)
            )
