import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
    product_show,
)
from catalog.infrastructure.cli.server_commands import serve
from catalog.infrastructure.config import Settings, configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Product Catalog: financial products management"""
    configure_logging("DEBUG" if verbose else Settings.from_env().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_show)
