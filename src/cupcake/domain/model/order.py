"""Order model, the core of the domain.

The Order is plain data plus derived values. Range checks live in
``validate()`` / ``check_ranges()`` so that ``cost`` and
``has_valid_address`` stay total over any state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cupcake.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
CAKE_TYPES: tuple[str, ...] = ("Vanilla", "Strawberry", "Chocolate", "Rainbow")
MIN_QUANTITY = 3
MAX_QUANTITY = 20

BASE_PRICE_PER_CAKE = 2.0
FROSTING_PRICE_PER_CAKE = 1.0
SPRINKLES_PRICE_PER_CAKE = 0.5

_TOPPINGS = ("extra_frosting", "add_sprinkles")
_DELIVERY_FIELDS = ("name", "street_address", "city", "zip")


def flavor_name(index: int) -> str:
    """Return the flavor for a zero-based cake type index."""
    if not 0 <= index < len(CAKE_TYPES):
        raise ValidationError(
            f"Unknown cake type {index}; expected 0..{len(CAKE_TYPES) - 1}"
        )
    return CAKE_TYPES[index]


def flavor_index(name: str) -> int:
    """Case-insensitive reverse lookup of ``flavor_name``."""
    for index, flavor in enumerate(CAKE_TYPES):
        if flavor.lower() == name.strip().lower():
            return index
    raise ValidationError(
        f"Unknown flavor '{name}'. Choose one of: {', '.join(CAKE_TYPES)}"
    )


@dataclass
class Order:
    """A customer's cake selection plus delivery details.

    Turning ``special_request_enabled`` off clears both toppings, on every
    write and at construction. Turning it back on does not restore them.
    """

    cake_type: int = 0
    quantity: int = MIN_QUANTITY
    special_request_enabled: bool = False
    extra_frosting: bool = False
    add_sprinkles: bool = False

    # Delivery details
    name: str = ""
    street_address: str = ""
    city: str = ""
    zip: str = ""

    def __post_init__(self) -> None:
        if not self.special_request_enabled:
            self._clear_toppings()

    def __setattr__(self, attr: str, value: Any) -> None:
        super().__setattr__(attr, value)
        if attr == "special_request_enabled" and not value:
            self._clear_toppings()

    # --- Computed properties --------------------------------------------------

    @property
    def cost(self) -> float:
        # $2 per cake, complicated cakes cost more
        cost = self.quantity * BASE_PRICE_PER_CAKE
        cost += self.cake_type / 2

        if self.extra_frosting:
            cost += self.quantity * FROSTING_PRICE_PER_CAKE

        if self.add_sprinkles:
            cost += self.quantity * SPRINKLES_PRICE_PER_CAKE

        return cost

    @property
    def has_valid_address(self) -> bool:
        """True when no delivery field is empty or whitespace-only."""
        return all(
            value.strip()
            for value in (self.name, self.street_address, self.city, self.zip)
        )

    @property
    def flavor(self) -> str:
        return flavor_name(self.cake_type)

    # --- Validation -----------------------------------------------------------

    def check_ranges(self) -> None:
        """Reject a cake type or quantity the order form would never offer."""
        flavor_name(self.cake_type)
        if not MIN_QUANTITY <= self.quantity <= MAX_QUANTITY:
            raise ValidationError(
                f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}, "
                f"got {self.quantity}"
            )

    def check_delivery_fields(self) -> None:
        for attr in _DELIVERY_FIELDS:
            value = getattr(self, attr)
            if not isinstance(value, str):
                raise ValidationError(
                    f"Delivery field '{attr}' must be text, got {type(value).__name__}"
                )

    def validate(self) -> None:
        """Everything that must hold before the order can be placed."""
        self.check_ranges()
        self.check_delivery_fields()
        if not self.has_valid_address:
            raise ValidationError(
                "Name, street address, city and zip are all required"
            )

    # --- Internal helpers -----------------------------------------------------

    def _clear_toppings(self) -> None:
        for topping in _TOPPINGS:
            super().__setattr__(topping, False)
