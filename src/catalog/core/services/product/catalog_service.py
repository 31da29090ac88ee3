"""Product catalog application service: validation, timestamps and soft delete."""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from loguru import logger

from src.catalog.core.models.product import ProductDto, ensure_valid
from src.catalog.entities.product import ProductRecord, ProductStore


class ProductCatalogService:
    """Application service exposing the product catalog operations.

    Maps between the transfer shape and the domain record, stamps
    timestamps and lifecycle flags, and delegates persistence to the store.
    Storage errors propagate unchanged.
    """

    def __init__(self, store: ProductStore):
        if store is None:
            raise ValueError("store is required")
        self._store = store

    async def list_products(self) -> list[ProductDto]:
        """Active products sorted by name."""
        records = await self._store.fetch_all()
        return [_to_dto(record) for record in records]

    async def get_product(self, product_id: int) -> ProductDto | None:
        """Product by id, or None. Inactive products are returned as well."""
        record = await self._store.fetch_by_id(product_id)
        return _to_dto(record) if record is not None else None

    async def create_product(self, data: ProductDto | Mapping[str, Any]) -> int:
        """Validate and insert a new product; returns the generated id.

        Raises:
            ProductValidationError: If any field constraint fails. Nothing is written.
        """
        dto = ensure_valid(data)
        record = _to_record(dto)
        record.id = None
        record.created_at = _utcnow()
        record.updated_at = None
        record.is_active = True

        product_id = await self._store.insert(record)
        logger.info("Product {} created", product_id)
        return product_id

    async def update_product(self, data: ProductDto | Mapping[str, Any]) -> bool:
        """Overwrite the product at ``data.id``; returns whether it existed.

        Raises:
            ProductValidationError: If any field constraint fails. Nothing is written.
        """
        dto = ensure_valid(data)
        record = _to_record(dto)
        record.updated_at = _utcnow()

        updated = await self._store.update(record)
        if updated:
            logger.info("Product {} updated", record.id)
        else:
            logger.info("Product {} not found for update", record.id)
        return updated

    async def delete_product(self, product_id: int) -> bool:
        """Soft-delete an active product; returns whether one matched."""
        deleted = await self._store.soft_delete(product_id, _utcnow())
        if deleted:
            logger.info("Product {} deactivated", product_id)
        else:
            logger.info("No active product {} to delete", product_id)
        return deleted

    async def search_products(self, term: str) -> list[ProductDto]:
        """Active products whose name, description or category contains ``term``."""
        records = await self._store.search(term or "")
        return [_to_dto(record) for record in records]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _to_dto(record: ProductRecord) -> ProductDto:
    # Outbound data is not re-validated against the input constraints
    return ProductDto.model_construct(
        id=record.id,
        name=record.name,
        description=record.description,
        price=record.price,
        stock_quantity=record.stock_quantity,
        category=record.category,
        created_at=record.created_at,
        updated_at=record.updated_at,
        is_active=record.is_active,
    )


def _to_record(dto: ProductDto) -> ProductRecord:
    return ProductRecord(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        price=dto.price,
        stock_quantity=dto.stock_quantity,
        category=dto.category,
        created_at=dto.created_at or _utcnow(),
        updated_at=dto.updated_at,
        is_active=dto.is_active,
    )
