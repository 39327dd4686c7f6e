"""Tests for the CSV-backed order repository.

The first group runs against the shipped data set; the rest use small
files written to tmp_path.
"""

import logging

import pytest

from retail_orders.domain.exceptions import DataSourceError, ValidationError
from retail_orders.domain.model.customer import Customer
from retail_orders.domain.model.order import FulfillmentStatus, Order
from retail_orders.domain.model.value_objects import Money
from retail_orders.infrastructure.persistence.csv_order_repository import (
    CsvOrderRepository,
    parse_products,
)
from tests.fakes import make_customer

FIRST_PRODUCTS = {
    "Lobster": Money.of("17.18"),
    "Annatto seed": Money.of("58.38"),
    "Camomile": Money.of("83.21"),
}
LAST_PRODUCTS = {
    "Amaranth": Money.of("83.81"),
    "Smoked Trout": Money.of("70.6"),
    "Cheddar": Money.of("5.63"),
}


class TestAllFromShippedData:

    def test_returns_every_order(self, orders):
        result = orders.all()
        assert isinstance(result, list)
        assert len(result) == 100
        assert all(isinstance(o, Order) for o in result)

    def test_first_order(self, orders):
        order = orders.all()[0]
        assert order.id == 1
        assert order.products == FIRST_PRODUCTS
        assert isinstance(order.customer, Customer)
        assert order.customer.id == 25
        assert order.fulfillment_status == FulfillmentStatus.COMPLETE

    def test_last_order(self, orders):
        order = orders.all()[-1]
        assert order.id == 100
        assert order.products == LAST_PRODUCTS
        assert order.customer.id == 20
        assert order.fulfillment_status == FulfillmentStatus.PENDING

    def test_rows_keep_file_order(self, orders):
        assert [o.id for o in orders.all()] == list(range(1, 101))


class TestFind:

    def test_first_order(self, orders):
        order = orders.find(1)
        assert order.id == 1
        assert order.products == FIRST_PRODUCTS
        assert order.customer.id == 25
        assert order.fulfillment_status == FulfillmentStatus.COMPLETE

    def test_last_order(self, orders):
        order = orders.find(100)
        assert order.products == LAST_PRODUCTS
        assert order.customer.id == 20
        assert order.total == Money.of("172.04")

    @pytest.mark.parametrize("order_id", [101, 150, 0, -1])
    def test_missing_order_returns_none(self, orders, order_id):
        assert orders.find(order_id) is None


class TestFindByCustomer:

    def test_returns_all_orders_of_customer(self, orders):
        result = orders.find_by_customer(20)
        assert len(result) == 7
        assert all(o.customer.id == 20 for o in result)

    def test_preserves_file_order(self, orders):
        assert [o.id for o in orders.find_by_customer(20)] == [7, 19, 33, 48, 62, 81, 100]

    def test_customer_without_orders(self, orders):
        assert orders.find_by_customer(2) == []

    def test_unknown_customer(self, orders):
        assert orders.find_by_customer(80) == []


class TestCustomerResolution:

    def test_rows_with_unknown_customer_are_skipped(self, write_csv):
        path = write_csv(
            "orders.csv",
            "id,products,customer,status",
            "1,Apple:1.00,1,paid",
            "2,Pear:2.00,99,paid",
            "3,Plum:3.00,1,shipped",
        )
        customer = make_customer(1)
        repo = CsvOrderRepository(path, {1: customer}.get)

        result = repo.all()

        assert [o.id for o in result] == [1, 3]
        assert all(o.customer is customer for o in result)
        assert repo.find(2) is None

    def test_skipped_rows_are_logged(self, write_csv, caplog):
        caplog.set_level(logging.DEBUG, logger="retail_orders")
        path = write_csv("orders.csv", "id,products,customer,status", "2,Pear:2.00,99,paid")

        assert CsvOrderRepository(path, {}.get).all() == []
        assert "Skipping order 2: customer 99 not found" in caplog.text

    def test_lookup_called_with_integer_ids(self, write_csv):
        seen = []

        def lookup(customer_id):
            seen.append(customer_id)
            return make_customer(customer_id)

        path = write_csv("orders.csv", "id,products,customer,status", "1,Apple:1.00, 7 ,paid")
        CsvOrderRepository(path, lookup).all()
        assert seen == [7]


class TestMalformedSource:

    def _repo(self, path):
        return CsvOrderRepository(path, make_customer)

    def test_byte_order_mark_is_ignored(self, tmp_path):
        path = tmp_path / "orders.csv"
        path.write_text(
            "id,products,customer,status\n1,Apple:1.00,1,paid\n", encoding="utf-8-sig"
        )
        assert [o.id for o in self._repo(path).all()] == [1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceError, match="Cannot read"):
            self._repo(tmp_path / "nope.csv").all()

    def test_missing_column(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer", "1,Apple:1.00,1")
        with pytest.raises(DataSourceError, match="missing column"):
            self._repo(path).all()

    def test_pair_without_price(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer,status", "1,Apple;Pear:2.00,1,paid")
        with pytest.raises(DataSourceError, match=r"orders\.csv:2: Invalid product 'Apple'"):
            self._repo(path).all()

    def test_unknown_status(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer,status", "1,Apple:1.00,1,lost")
        with pytest.raises(DataSourceError, match="Invalid fulfillment status"):
            self._repo(path).all()

    def test_non_integer_id(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer,status", "one,Apple:1.00,1,paid")
        with pytest.raises(DataSourceError, match="must be an integer"):
            self._repo(path).all()

    def test_short_row(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer,status", "1,Apple:1.00")
        with pytest.raises(DataSourceError, match="missing value"):
            self._repo(path).all()

    def test_duplicate_order_id(self, write_csv):
        path = write_csv(
            "orders.csv",
            "id,products,customer,status",
            "1,Apple:1.00,1,paid",
            "1,Pear:2.00,1,paid",
        )
        with pytest.raises(DataSourceError, match="duplicate order id 1"):
            self._repo(path).all()

    def test_error_is_chained(self, write_csv):
        path = write_csv("orders.csv", "id,products,customer,status", "1,Apple:x,1,paid")
        with pytest.raises(DataSourceError) as excinfo:
            self._repo(path).all()
        assert isinstance(excinfo.value.__cause__, ValidationError)


class TestParseProducts:

    def test_parses_pairs(self):
        assert parse_products("Lobster:17.18;Annatto seed:58.38") == {
            "Lobster": Money.of("17.18"),
            "Annatto seed": Money.of("58.38"),
        }

    def test_empty_field(self):
        assert parse_products("") == {}

    def test_name_may_contain_colon(self):
        assert parse_products("Tea: Earl Grey:4.50") == {"Tea: Earl Grey": Money.of("4.50")}

    @pytest.mark.parametrize("raw", ["Apple", "Apple:", ":1.00", "Apple:1.00;"])
    def test_incomplete_pair_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid product"):
            parse_products(raw)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            parse_products("Apple:-1.00")

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product"):
            parse_products("Apple:1.00;Apple:2.00")
