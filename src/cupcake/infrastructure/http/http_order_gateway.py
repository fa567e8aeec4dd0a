"""requests-backed implementation of OrderGateway.

Makes exactly one POST per submission. Every failure mode, from
connection errors to an echo that does not match the order schema,
surfaces as SubmissionError.
"""

from __future__ import annotations

import logging

import requests

from cupcake.domain.exceptions import SubmissionError, ValidationError
from cupcake.domain.gateway.order_gateway import OrderGateway
from cupcake.domain.model.order import Order
from cupcake.infrastructure.serialization import order_codec
from cupcake.infrastructure.settings import SubmissionSettings

logger = logging.getLogger(__name__)


class HttpOrderGateway(OrderGateway):

    def __init__(self, settings: SubmissionSettings) -> None:
        self.settings = settings
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    # --- OrderGateway interface -----------------------------------------------

    def submit(self, order: Order) -> Order:
        url = self.settings.endpoint_url
        body = order_codec.dumps(order)
        logger.debug("POST %s %s", url, body)

        try:
            response = self.session.post(
                url,
                data=body,
                timeout=self.settings.timeout_seconds,
            )
        except requests.exceptions.Timeout as exc:
            raise SubmissionError(
                f"Order submission timed out after {self.settings.timeout_seconds}s"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise SubmissionError(f"Could not reach the order endpoint: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise SubmissionError(
                f"Order endpoint returned status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        logger.debug("Echo %s", response.text)
        try:
            return order_codec.from_payload(response.json())
        except ValueError as exc:
            raise SubmissionError(f"Order endpoint did not return JSON: {exc}") from exc
        except ValidationError as exc:
            raise SubmissionError(f"Could not decode echoed order: {exc}") from exc

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Release the connection pool; abandons nothing already sent."""
        self.session.close()

    def __enter__(self) -> HttpOrderGateway:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
