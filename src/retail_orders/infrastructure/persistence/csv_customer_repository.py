"""CSV-file-backed implementation of CustomerRepository.

The customer file is static for the life of the process, so it is read
once on first use and served from memory afterwards.  Order loading
calls ``find`` once per order row.
"""

from __future__ import annotations

import logging
from pathlib import Path

from retail_orders.domain.exceptions import DataSourceError
from retail_orders.domain.model.customer import Customer
from retail_orders.domain.model.value_objects import Address
from retail_orders.domain.repository.customer_repository import CustomerRepository
from retail_orders.infrastructure.persistence.csv_source import (
    read_rows,
    row_field,
    row_int,
)

logger = logging.getLogger(__name__)

COLUMNS = ("id", "email", "street", "city", "state", "zip")


class CsvCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._customers: dict[int, Customer] | None = None

    # --- CustomerRepository interface -----------------------------------------

    def all(self) -> list[Customer]:
        return list(self._load().values())

    def find(self, customer_id: int) -> Customer | None:
        return self._load().get(customer_id)

    # --- Loading --------------------------------------------------------------

    def _load(self) -> dict[int, Customer]:
        if self._customers is None:
            customers: dict[int, Customer] = {}
            for line_no, row in read_rows(self._file_path, COLUMNS):
                try:
                    customer = self._to_domain(row)
                except ValueError as exc:
                    raise DataSourceError(f"{self._file_path}:{line_no}: {exc}") from exc
                if customer.id in customers:
                    raise DataSourceError(
                        f"{self._file_path}:{line_no}: duplicate customer id {customer.id}"
                    )
                customers[customer.id] = customer
            logger.debug("Loaded %d customers from %s", len(customers), self._file_path)
            self._customers = customers
        return self._customers

    @staticmethod
    def _to_domain(row: dict[str, str]) -> Customer:
        return Customer(
            id=row_int(row, "id"),
            email=row_field(row, "email"),
            address=Address(
                street=row_field(row, "street"),
                city=row_field(row, "city"),
                state=row_field(row, "state"),
                zip_code=row_field(row, "zip"),
            ),
        )
