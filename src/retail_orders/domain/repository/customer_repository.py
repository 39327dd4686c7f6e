"""Abstract repository for the Customer entity.

Defined in the domain layer so the domain never depends on
infrastructure.  Order loading only needs the lookup half of it,
expressed as the ``CustomerLookup`` callable type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from retail_orders.domain.model.customer import Customer

CustomerLookup = Callable[[int], Customer | None]


class CustomerRepository(ABC):

    @abstractmethod
    def all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def find(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None.  Never raises for unknown IDs."""
