"""CLI commands for the Product entity."""

from __future__ import annotations

from uuid import UUID

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.get_product import GetProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_create(obj: dict, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=product_repository(obj["data_dir"]))

    try:
        product_id = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(product_id)


@click.command("get")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.pass_obj
def product_get(obj: dict, product_id: UUID) -> None:
    """Show a single product."""
    handler = GetProductHandler(product_repo=product_repository(obj["data_dir"]))

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ID:    {product.id}")
    click.echo(f"Name:  {product.name}")
    click.echo(f"Price: {product.price}")


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""
    try:
        products = product_repository(obj["data_dir"]).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{str(p.id):<36} {p.name:<20} {str(p.price):>10}")
