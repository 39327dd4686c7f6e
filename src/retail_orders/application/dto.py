"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single product line as displayed to the user."""

    product_name: str
    unit_price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: int
    customer_email: str
    status: str
    items: list[OrderLineItemDTO]
    subtotal: str
    tax: str
    total: str


@dataclass(frozen=True)
class CustomerDTO:
    """Output: a customer with a summary of their orders."""

    id: int
    email: str
    address: str
    order_count: int
    lifetime_total: str
