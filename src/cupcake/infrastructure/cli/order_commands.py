"""CLI commands for pricing and placing an order."""

from __future__ import annotations

import click

from cupcake.application.dto import OrderSummaryDTO
from cupcake.application.order_form import OrderForm
from cupcake.application.place_order import PlaceOrderHandler
from cupcake.application.quote_order import QuoteOrderHandler
from cupcake.domain.exceptions import DomainException
from cupcake.domain.model.order import MAX_QUANTITY, MIN_QUANTITY, flavor_index
from cupcake.infrastructure.bootstrap import order_gateway


def _parse_flavor(raw: str) -> int:
    """Accept either a flavor name ('chocolate') or its index ('2')."""
    if raw.strip().isdecimal():
        try:
            return int(raw)
        except ValueError:
            raise click.BadParameter(f"Invalid flavor index '{raw}'.")
    return flavor_index(raw)


def _build_form(
    flavor: str,
    quantity: int,
    extra_frosting: bool,
    sprinkles: bool,
    **delivery: str,
) -> OrderForm:
    form = OrderForm()
    form.update(
        cake_type=_parse_flavor(flavor),
        quantity=quantity,
        special_request_enabled=extra_frosting or sprinkles,
        extra_frosting=extra_frosting,
        add_sprinkles=sprinkles,
        **delivery,
    )
    return form


def _display_summary(dto: OrderSummaryDTO) -> None:
    toppings = [
        label
        for label, chosen in (("extra frosting", dto.extra_frosting), ("sprinkles", dto.add_sprinkles))
        if chosen
    ]
    click.echo(f"  {dto.quantity}x {dto.flavor}")
    if toppings:
        click.echo(f"  with {' and '.join(toppings)}")
    click.echo(f"Your total is {dto.total}")


@click.command("quote")
@click.option("--flavor", default="Vanilla", show_default=True, help="Flavor name or index (see 'flavors').")
@click.option("--quantity", default=MIN_QUANTITY, show_default=True, type=int, help=f"Number of cakes ({MIN_QUANTITY}-{MAX_QUANTITY}).")
@click.option("--extra-frosting", is_flag=True, default=False, help="Add extra frosting.")
@click.option("--sprinkles", is_flag=True, default=False, help="Add sprinkles.")
def order_quote(flavor: str, quantity: int, extra_frosting: bool, sprinkles: bool) -> None:
    """Show the price of an order without placing it."""
    try:
        form = _build_form(flavor, quantity, extra_frosting, sprinkles)
        dto = QuoteOrderHandler().handle(form.order)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(dto)


@click.command("place")
@click.option("--flavor", default="Vanilla", show_default=True, help="Flavor name or index (see 'flavors').")
@click.option("--quantity", default=MIN_QUANTITY, show_default=True, type=int, help=f"Number of cakes ({MIN_QUANTITY}-{MAX_QUANTITY}).")
@click.option("--extra-frosting", is_flag=True, default=False, help="Add extra frosting.")
@click.option("--sprinkles", is_flag=True, default=False, help="Add sprinkles.")
@click.option("--name", required=True, help="Name for the delivery.")
@click.option("--street", "street_address", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--zip", "zip_code", required=True, help="Zip code.")
def order_place(
    flavor: str,
    quantity: int,
    extra_frosting: bool,
    sprinkles: bool,
    name: str,
    street_address: str,
    city: str,
    zip_code: str,
) -> None:
    """Place an order for delivery."""
    try:
        form = _build_form(
            flavor,
            quantity,
            extra_frosting,
            sprinkles,
            name=name,
            street_address=street_address,
            city=city,
            zip=zip_code,
        )
        _display_summary(form.summary())

        with order_gateway() as gateway:
            confirmation = PlaceOrderHandler(gateway).handle(form.order)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    click.echo("Thank you!")
    click.echo(confirmation.message)
