from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from src.catalog.entities.product import ProductRecord


def make_record(**overrides: Any) -> ProductRecord:
    values: dict[str, Any] = {
        "name": "Widget",
        "description": "A general purpose widget",
        "price": Decimal("9.99"),
        "stock_quantity": 10,
        "category": "Tools",
        "created_at": datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
        "is_active": True,
    }
    values.update(overrides)
    return ProductRecord(**values)


def make_row(**overrides: Any) -> dict[str, Any]:
    """A result row as the store's SELECT labels it."""
    record = make_record(**overrides)
    return record.model_dump()
