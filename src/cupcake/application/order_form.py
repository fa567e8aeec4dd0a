"""Application service: an editing session over one Order.

A presentation layer binds to the form instead of the model: it writes
through ``update()`` and is told about every change via ``subscribe()``.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Callable

from cupcake.application.dto import OrderSummaryDTO
from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.order import Order

Listener = Callable[[OrderSummaryDTO], None]

_FIELD_NAMES = frozenset(f.name for f in fields(Order))


class OrderForm:

    def __init__(self, order: Order | None = None) -> None:
        self._order = order if order is not None else Order()
        self._listeners: list[Listener] = []

    @property
    def order(self) -> Order:
        return self._order

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> OrderSummaryDTO:
        """Apply field changes atomically and notify listeners.

        The changes are tried on a copy first, so a rejected change leaves
        the order exactly as it was.
        """
        unknown = sorted(set(changes) - _FIELD_NAMES)
        if unknown:
            raise ValidationError(f"Unknown order field(s): {', '.join(unknown)}")

        candidate = replace(self._order, **changes)
        candidate.check_ranges()
        candidate.check_delivery_fields()
        summary = OrderSummaryDTO.from_order(candidate)

        # Keep the same Order instance so holders of ``form.order`` see the change
        for f in fields(Order):
            setattr(self._order, f.name, getattr(candidate, f.name))

        for listener in list(self._listeners):
            listener(summary)
        return summary

    def summary(self) -> OrderSummaryDTO:
        return OrderSummaryDTO.from_order(self._order)
