"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from cupcake.domain.model.order import Order
from cupcake.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: what the checkout screen shows for an order."""

    flavor: str
    quantity: int
    extra_frosting: bool
    add_sprinkles: bool
    total: str  # formatted, e.g. "$6.00"
    can_checkout: bool

    @staticmethod
    def from_order(order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            flavor=order.flavor,
            quantity=order.quantity,
            extra_frosting=order.extra_frosting,
            add_sprinkles=order.add_sprinkles,
            total=str(Money.of(order.cost)),
            can_checkout=order.has_valid_address,
        )


@dataclass(frozen=True)
class ConfirmationDTO:
    """Output: the message shown once the endpoint has echoed the order."""

    message: str
    quantity: int
    flavor: str
