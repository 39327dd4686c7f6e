"""Application service: Show Customer use case (query).

Combines the customer record with a summary of the orders they placed.
"""

from __future__ import annotations

from retail_orders.application.dto import CustomerDTO
from retail_orders.domain.exceptions import EntityNotFoundError
from retail_orders.domain.model.value_objects import Money
from retail_orders.domain.repository.customer_repository import CustomerRepository
from retail_orders.domain.repository.order_repository import OrderRepository


class ShowCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._order_repo = order_repo

    def handle(self, customer_id: int) -> CustomerDTO:
        customer = self._customer_repo.find(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer #{customer_id} not found")

        orders = self._order_repo.find_by_customer(customer_id)
        lifetime_total = Money.zero()
        for order in orders:
            lifetime_total = lifetime_total + order.total

        return CustomerDTO(
            id=customer.id,
            email=customer.email,
            address=str(customer.address),
            order_count=len(orders),
            lifetime_total=str(lifetime_total),
        )
