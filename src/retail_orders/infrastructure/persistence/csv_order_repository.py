"""CSV-file-backed implementation of OrderRepository.

Each row of the order file looks like::

    id,products,customer,status
    1,Lobster:17.18;Annatto seed:58.38;Camomile:83.21,25,complete

The customer column is resolved through an injected lookup; rows whose
customer cannot be found are dropped.  Any other defect in the file
aborts the load with ``DataSourceError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from retail_orders.domain.exceptions import DataSourceError, ValidationError
from retail_orders.domain.model.order import FulfillmentStatus, Order
from retail_orders.domain.model.value_objects import Money
from retail_orders.domain.repository.customer_repository import CustomerLookup
from retail_orders.domain.repository.order_repository import OrderRepository
from retail_orders.infrastructure.persistence.csv_source import (
    read_rows,
    row_field,
    row_int,
)

logger = logging.getLogger(__name__)

COLUMNS = ("id", "products", "customer", "status")
PRODUCT_SEPARATOR = ";"
PRICE_SEPARATOR = ":"


def parse_products(raw: str) -> dict[str, Money]:
    """Parse 'Lobster:17.18;Camomile:83.21' into {name: price}.

    An empty field is an order without products.  A pair missing its
    name or price, a bad price, or a repeated name raises ValidationError.
    """
    products: dict[str, Money] = {}
    if not raw.strip():
        return products
    for pair in raw.split(PRODUCT_SEPARATOR):
        name, sep, price = pair.rpartition(PRICE_SEPARATOR)
        name, price = name.strip(), price.strip()
        if not sep or not name or not price:
            raise ValidationError(
                f"Invalid product '{pair}'. Expected 'ProductName:Price'."
            )
        if name in products:
            raise ValidationError(f"Duplicate product: '{name}' is already in the order")
        products[name] = Money.of(price)
    return products


def parse_status(raw: str) -> FulfillmentStatus:
    try:
        return FulfillmentStatus(raw)
    except ValueError:
        raise ValidationError(f"Invalid fulfillment status: {raw!r}") from None


class CsvOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, find_customer: CustomerLookup) -> None:
        self._file_path = file_path
        self._find_customer = find_customer

    # --- OrderRepository interface --------------------------------------------

    def all(self) -> list[Order]:
        orders: list[Order] = []
        seen_ids: set[int] = set()
        skipped = 0
        for line_no, row in read_rows(self._file_path, COLUMNS):
            try:
                order = self._to_domain(row)
            except (ValueError, ValidationError) as exc:
                raise DataSourceError(f"{self._file_path}:{line_no}: {exc}") from exc
            if order is None:
                skipped += 1
                continue
            if order.id in seen_ids:
                raise DataSourceError(
                    f"{self._file_path}:{line_no}: duplicate order id {order.id}"
                )
            seen_ids.add(order.id)
            orders.append(order)

        logger.debug(
            "Loaded %d orders from %s (%d skipped)", len(orders), self._file_path, skipped
        )
        return orders

    def find(self, order_id: int) -> Order | None:
        for order in self.all():
            if order.id == order_id:
                return order
        return None

    def find_by_customer(self, customer_id: int) -> list[Order]:
        return [order for order in self.all() if order.customer_id == customer_id]

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, row: dict[str, str]) -> Order | None:
        """Build an Order from one row, or None if its customer is unknown."""
        order_id = row_int(row, "id")
        products = parse_products(row_field(row, "products"))
        customer_id = row_int(row, "customer")
        status = parse_status(row_field(row, "status"))

        customer = self._find_customer(customer_id)
        if customer is None:
            logger.debug("Skipping order %d: customer %d not found", order_id, customer_id)
            return None

        return Order(
            id=order_id,
            products=products,
            customer=customer,
            fulfillment_status=status,
        )
