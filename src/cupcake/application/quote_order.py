"""Application service: Quote Order use case (query)."""

from __future__ import annotations

from cupcake.application.dto import OrderSummaryDTO
from cupcake.domain.model.order import Order


class QuoteOrderHandler:

    def handle(self, order: Order) -> OrderSummaryDTO:
        """Price an order without requiring delivery details."""
        order.check_ranges()
        return OrderSummaryDTO.from_order(order)
