"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity


class ProductRecord(Entity):
    """In-memory representation of a row of the ``Products`` table.

    Constraints are enforced on the transfer shape at the boundary; the
    record itself accepts whatever storage holds.
    """

    name: str = Field(description="Product name")
    description: str | None = Field(default=None, description="Free-form description")
    price: Decimal = Field(description="Unit price")
    stock_quantity: int = Field(description="Units in stock")
    category: str = Field(description="Catalog category")
    is_active: bool = Field(default=True, description="False once soft-deleted")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, ProductRecord):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock_quantity == other.stock_quantity
            and self.category == other.category
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.stock_quantity,
            self.category,
            self.is_active,
        ))
