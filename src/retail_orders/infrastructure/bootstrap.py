"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from retail_orders.infrastructure import config
from retail_orders.infrastructure.persistence.csv_customer_repository import (
    CsvCustomerRepository,
)
from retail_orders.infrastructure.persistence.csv_order_repository import (
    CsvOrderRepository,
)


def customer_repository(data_dir: Path | str | None = None) -> CsvCustomerRepository:
    return CsvCustomerRepository(config.data_dir(data_dir) / config.CUSTOMERS_FILE)


def order_repository(
    data_dir: Path | str | None = None,
    customers: CsvCustomerRepository | None = None,
) -> CsvOrderRepository:
    if customers is None:
        customers = customer_repository(data_dir)
    return CsvOrderRepository(
        config.data_dir(data_dir) / config.ORDERS_FILE,
        find_customer=customers.find,
    )
