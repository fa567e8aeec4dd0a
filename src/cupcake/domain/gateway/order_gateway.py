"""Abstract gateway through which an order leaves the process."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cupcake.domain.model.order import Order


class OrderGateway(ABC):

    @abstractmethod
    def submit(self, order: Order) -> Order:
        """Send the order and return the order the endpoint echoed back.

        Raises SubmissionError when the exchange fails.
        """
