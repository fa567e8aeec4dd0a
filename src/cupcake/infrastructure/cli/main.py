import logging

import click

from cupcake.domain.model.order import CAKE_TYPES
from cupcake.infrastructure.cli.order_commands import order_place, order_quote


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log submission details.")
def cli(verbose: bool) -> None:
    """Cupcake Corner: order cupcakes for delivery"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("flavors")
def flavors() -> None:
    """List the cake flavors on offer."""
    for index, flavor in enumerate(CAKE_TYPES):
        click.echo(f"  {index}  {flavor}")


@cli.group()
def order() -> None:
    """Price and place orders."""


# Register subcommands
order.add_command(order_quote)
order.add_command(order_place)
