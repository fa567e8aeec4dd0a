"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from cupcake.infrastructure.http.http_order_gateway import HttpOrderGateway
from cupcake.infrastructure.settings import SubmissionSettings


def order_gateway() -> HttpOrderGateway:
    return HttpOrderGateway(SubmissionSettings.from_env())
