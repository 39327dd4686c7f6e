"""Domain -> DTO mapping shared by the query handlers."""

from __future__ import annotations

from retail_orders.application.dto import OrderDTO, OrderLineItemDTO
from retail_orders.domain.model.order import Order


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        customer_email=order.customer.email,
        status=order.fulfillment_status.value,
        items=[
            OrderLineItemDTO(product_name=name, unit_price=str(price))
            for name, price in order.products.items()
        ],
        subtotal=str(order.subtotal),
        tax=str(order.tax),
        total=str(order.total),
    )
