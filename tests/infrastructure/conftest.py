import pytest

from retail_orders.infrastructure import bootstrap, config


@pytest.fixture
def customers():
    return bootstrap.customer_repository(config.DEFAULT_DATA_DIR)


@pytest.fixture
def orders(customers):
    return bootstrap.order_repository(config.DEFAULT_DATA_DIR, customers=customers)


@pytest.fixture
def write_csv(tmp_path):
    """Write *lines* to a CSV file under tmp_path and return its path."""

    def _write(name: str, *lines: str):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
