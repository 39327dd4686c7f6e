"""Customer entity.

Customers live independently of orders; an order only holds a
reference to one.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail_orders.domain.model.value_objects import Address


@dataclass(frozen=True)
class Customer:
    id: int
    email: str
    address: Address
