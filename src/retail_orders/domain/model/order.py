"""Order entity, the core of the domain.

An Order ties a set of product line items to a customer and records
where the order is in its fulfillment lifecycle.  Identity, customer
and status are fixed once constructed; only the product map changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from retail_orders.domain.exceptions import ValidationError
from retail_orders.domain.model.customer import Customer
from retail_orders.domain.model.value_objects import Money


class FulfillmentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.075")


@dataclass(frozen=True, eq=False)
class Order:
    """A purchase order.

    ``products`` maps product name to unit price.  Prices given as
    str/float/int are coerced to ``Money`` on the way in, so a negative
    or unparseable price is rejected at construction.
    """

    id: int
    products: dict[str, Money]
    customer: Customer
    fulfillment_status: FulfillmentStatus = FulfillmentStatus.PENDING

    def __post_init__(self) -> None:
        if not isinstance(self.fulfillment_status, FulfillmentStatus):
            raise ValidationError(
                f"Invalid fulfillment status: {self.fulfillment_status!r}"
            )
        if not isinstance(self.products, Mapping):
            raise ValidationError(
                f"Products must be a mapping, got {type(self.products).__name__}"
            )
        # Copy; the caller's dict stays untouched
        object.__setattr__(
            self,
            "products",
            {name: Money.of(price) for name, price in self.products.items()},
        )

    # --- Line items -----------------------------------------------------------

    def add_product(self, name: str, price: str | float | int | Decimal | Money) -> None:
        """Add a product line item; names must be unique within the order."""
        if name in self.products:
            raise ValidationError(f"Duplicate product: '{name}' is already in the order")
        self.products[name] = Money.of(price)

    def remove_product(self, name: str) -> None:
        if name not in self.products:
            raise ValidationError(f"Product not found: '{name}'")
        del self.products[name]

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for price in self.products.values():
            result = result + price
        return result

    @property
    def total(self) -> Money:
        """Subtotal plus tax, rounded half-up to cents."""
        return (self.subtotal * (1 + TAX_RATE)).rounded()

    @property
    def tax(self) -> Money:
        return self.total - self.subtotal.rounded()

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def customer_id(self) -> int:
        return self.customer.id
