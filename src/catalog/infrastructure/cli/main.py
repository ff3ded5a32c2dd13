import logging
from pathlib import Path

import click

from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_get,
    product_list,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="CATALOG_DATA_DIR",
    default=None,
    help="Directory holding products.json.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Product Catalog"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_get)
product.add_command(product_list)
