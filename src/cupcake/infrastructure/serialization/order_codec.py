"""JSON payload codec for Order.

The wire schema is derived from the Order dataclass: every stored field
is sent under its camelCase name, typed by the field's default value.
Derived values (cost, address validity) are never sent.
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.order import Order

# Field name -> wire key, where they differ
_WIRE_NAMES = {
    "cake_type": "type",
    "special_request_enabled": "specialRequestEnabled",
    "extra_frosting": "extraFrosting",
    "add_sprinkles": "addSprinkles",
    "street_address": "streetAddress",
}

ORDER_SCHEMA: dict[str, tuple[str, type]] = {
    _WIRE_NAMES.get(f.name, f.name): (f.name, type(f.default))
    for f in fields(Order)
}


def to_payload(order: Order) -> dict[str, Any]:
    return {
        wire_key: getattr(order, attr)
        for wire_key, (attr, _) in ORDER_SCHEMA.items()
    }


def from_payload(payload: Any) -> Order:
    """Build an Order from a decoded JSON object.

    Keys outside the schema are ignored. Missing keys and wrongly typed
    values raise ValidationError.
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            f"Order payload must be a JSON object, got {type(payload).__name__}"
        )

    values: dict[str, Any] = {}
    for wire_key, (attr, expected) in ORDER_SCHEMA.items():
        if wire_key not in payload:
            raise ValidationError(f"Order payload is missing '{wire_key}'")
        value = payload[wire_key]
        # bool is an int subclass; keep the two apart
        if type(value) is not expected:
            raise ValidationError(
                f"Order payload field '{wire_key}' must be "
                f"{expected.__name__}, got {type(value).__name__}"
            )
        values[attr] = value
    return Order(**values)


def dumps(order: Order) -> str:
    return json.dumps(to_payload(order))


def loads(text: str | bytes) -> Order:
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise ValidationError(f"Order payload is not valid JSON: {exc}") from exc
    return from_payload(payload)
