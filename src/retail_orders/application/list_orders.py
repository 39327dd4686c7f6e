"""Application service: List Orders use case (query).

Lists every order, or only one customer's orders, optionally narrowed
to a single fulfillment status.  Source order is preserved.
"""

from __future__ import annotations

from retail_orders.application.dto import OrderDTO
from retail_orders.application.mapping import order_to_dto
from retail_orders.domain.model.order import FulfillmentStatus
from retail_orders.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_id: int | None = None,
        status: FulfillmentStatus | None = None,
    ) -> list[OrderDTO]:
        if customer_id is None:
            orders = self._order_repo.all()
        else:
            orders = self._order_repo.find_by_customer(customer_id)

        if status is not None:
            orders = [o for o in orders if o.fulfillment_status == status]

        return [order_to_dto(o) for o in orders]
