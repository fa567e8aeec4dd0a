"""Application service: Place Order use case.

Sends a validated order through the gateway and turns the echoed order
into a confirmation. One handler tracks the submission of one order:

    IDLE -> SUBMITTING -> CONFIRMED | FAILED

A failed submission may be retried by calling ``handle`` again; nothing
retries automatically.
"""

from __future__ import annotations

import logging
from enum import Enum

from cupcake.application.dto import ConfirmationDTO
from cupcake.domain.exceptions import SubmissionError, ValidationError
from cupcake.domain.gateway.order_gateway import OrderGateway
from cupcake.domain.model.order import Order

logger = logging.getLogger(__name__)


class SubmissionStatus(Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"


class PlaceOrderHandler:

    def __init__(self, gateway: OrderGateway) -> None:
        self._gateway = gateway
        self.status = SubmissionStatus.IDLE

    def handle(self, order: Order) -> ConfirmationDTO:
        """Submit *order* once.

        Steps:
        1. Refuse while a submission is in flight or already confirmed.
        2. Validate ranges and address (no request is made if invalid).
        3. Send through the gateway and read the echoed order.
        4. Build the confirmation from the echo, not from *order*.
        """
        if self.status == SubmissionStatus.SUBMITTING:
            raise ValidationError("This order is already being submitted")
        if self.status == SubmissionStatus.CONFIRMED:
            raise ValidationError("This order has already been placed")

        order.validate()

        self.status = SubmissionStatus.SUBMITTING
        logger.info("Placing order for %dx %s", order.quantity, order.flavor)
        try:
            echoed = self._gateway.submit(order)
            confirmation = self._to_confirmation(echoed)
        except SubmissionError as exc:
            self.status = SubmissionStatus.FAILED
            logger.warning("Order submission failed: %s", exc)
            raise
        except Exception:
            self.status = SubmissionStatus.FAILED
            logger.exception("Order submission failed unexpectedly")
            raise

        self.status = SubmissionStatus.CONFIRMED
        logger.info(confirmation.message)
        return confirmation

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_confirmation(echoed: Order) -> ConfirmationDTO:
        try:
            flavor = echoed.flavor
        except ValidationError as exc:
            raise SubmissionError(f"Endpoint echoed an invalid order: {exc}") from exc

        return ConfirmationDTO(
            message=(
                f"Your order for {echoed.quantity}x {flavor.lower()} "
                f"cupcakes is on its way!"
            ),
            quantity=echoed.quantity,
            flavor=flavor,
        )
