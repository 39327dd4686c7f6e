"""Data-directory configuration.

Resolution order: an explicit path (the CLI ``--data-dir`` option),
then the ``RETAIL_ORDERS_DATA_DIR`` environment variable, then the
``data/`` directory shipped at the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR_ENV_VAR = "RETAIL_ORDERS_DATA_DIR"
ORDERS_FILE = "orders.csv"
CUSTOMERS_FILE = "customers.csv"

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | str | None = None) -> Path:
    if override is not None:
        return Path(override)
    from_env = os.environ.get(DATA_DIR_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_DATA_DIR
