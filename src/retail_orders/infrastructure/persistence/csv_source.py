"""Shared helpers for the read-only CSV data files."""

from __future__ import annotations

import csv
from pathlib import Path

from retail_orders.domain.exceptions import DataSourceError


def read_rows(file_path: Path, required_columns: tuple[str, ...]) -> list[tuple[int, dict[str, str]]]:
    """Read a headed CSV file into ``(line_number, row)`` pairs.

    The whole file is read before returning so the handle is released
    immediately.  A missing file, unreadable content or a header lacking
    any of *required_columns* raises ``DataSourceError``.
    """
    try:
        with file_path.open(newline="", encoding="utf-8-sig") as fh:
            reader = csv.DictReader(fh)
            header = reader.fieldnames or []
            missing = [col for col in required_columns if col not in header]
            if missing:
                raise DataSourceError(
                    f"{file_path}: missing column(s) {', '.join(missing)}"
                )
            return [(reader.line_num, row) for row in reader]
    except OSError as exc:
        raise DataSourceError(f"Cannot read {file_path}: {exc}") from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise DataSourceError(f"{file_path}: malformed CSV: {exc}") from exc


def row_field(row: dict[str, str | None], column: str) -> str:
    """Return a stripped cell value; short rows yield ``ValueError``."""
    value = row.get(column)
    if value is None:
        raise ValueError(f"missing value for column '{column}'")
    return value.strip()


def row_int(row: dict[str, str | None], column: str) -> int:
    raw = row_field(row, column)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"column '{column}' must be an integer, got {raw!r}") from None
