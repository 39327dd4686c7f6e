"""Abstract repository for the Order entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail_orders.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def all(self) -> list[Order]:
        """Return every order, in source order."""

    @abstractmethod
    def find(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_customer(self, customer_id: int) -> list[Order]:
        """Return the orders placed by one customer (possibly empty)."""
