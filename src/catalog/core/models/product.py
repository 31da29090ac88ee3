"""Transfer shape for products at the caller boundary."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from src.catalog.core.errors import ProductValidationError, Violation

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")
MAX_STOCK_QUANTITY = 2_147_483_647


class ProductDto(BaseModel):
    """Data transfer object for a product.

    Field constraints are declarative; :func:`validate_product` turns them
    into a list of violations.
    """

    id: int = Field(default=0, description="Product id; 0 when not yet assigned")
    name: str = Field(max_length=200, description="Product name")
    description: str | None = Field(
        default=None, max_length=1000, description="Product description"
    )
    price: Decimal = Field(ge=MIN_PRICE, le=MAX_PRICE, description="Unit price")
    stock_quantity: int = Field(
        ge=0, le=MAX_STOCK_QUANTITY, description="Units in stock"
    )
    category: str = Field(max_length=100, description="Catalog category")
    created_at: datetime | None = Field(default=None, description="Creation time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update (UTC)")
    is_active: bool = Field(default=True, description="False once soft-deleted")

    @field_validator("name", "category")
    @classmethod
    def _not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value


def validate_product(data: ProductDto | Mapping[str, Any]) -> list[Violation]:
    """Check ``data`` against the ProductDto constraints.

    Returns every violation found; an empty list means the data is valid.
    """
    try:
        _coerce(data)
    except ValidationError as e:
        return _violations(e)
    return []


def ensure_valid(data: ProductDto | Mapping[str, Any]) -> ProductDto:
    """Return a validated ProductDto or raise ProductValidationError."""
    try:
        return _coerce(data)
    except ValidationError as e:
        raise ProductValidationError(_violations(e)) from e


def _coerce(data: ProductDto | Mapping[str, Any]) -> ProductDto:
    # model_construct and attribute assignment skip validation, so DTOs are re-checked too
    if isinstance(data, ProductDto):
        data = data.model_dump()
    return ProductDto.model_validate(dict(data))


def _violations(error: ValidationError) -> list[Violation]:
    return [
        Violation(
            field=".".join(str(part) for part in detail["loc"]) or "__root__",
            message=detail["msg"],
        )
        for detail in error.errors()
    ]
