"""Plain-text storage of customer records, five lines per customer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import Customer

DEFAULT_PATH = "pelanggan.txt"
_FIELDS_PER_RECORD = 5


def _fields(text: str) -> list[str]:
    fields = []
    for line in text.split("\n"):
        value = line.lstrip()
        if not value:
            continue
        fields.append(value.split("\r", 1)[0])
    return fields


def parse_customers(text: str) -> list[Customer]:
    """Read customers until the text runs out or a record is malformed.

    Blank lines and leading whitespace are skipped, and anything from a
    carriage return onwards is dropped from a field.
    """
    fields = _fields(text)
    customers = []
    for start in range(0, len(fields) - _FIELDS_PER_RECORD + 1, _FIELDS_PER_RECORD):
        raw_id, name, phone, email, address = fields[start : start + _FIELDS_PER_RECORD]
        try:
            customer_id = int(raw_id.strip())
        except ValueError:
            break
        customers.append(Customer(customer_id, name, phone, email, address))
    return customers


def format_customers(customers: Iterable[Customer]) -> str:
    """Write customers as id, name, phone, email and address lines."""
    return "".join(
        f"{c.id}\n{c.name}\n{c.phone}\n{c.email}\n{c.address}\n" for c in customers
    )


def load_customers(path: str | Path = DEFAULT_PATH) -> list[Customer]:
    """Load customers from a file; a missing file holds none."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return parse_customers(text)


def save_customers(customers: Iterable[Customer], path: str | Path = DEFAULT_PATH) -> None:
    """Write customers to a file, replacing what it held."""
    Path(path).write_text(format_customers(customers), encoding="utf-8")