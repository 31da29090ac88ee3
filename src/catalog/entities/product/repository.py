"""Product repository: the only component that talks to the database."""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from loguru import logger
from sqlalchemy import Select, String, bindparam, or_, select, true
from sqlalchemy.ext.asyncio import AsyncConnection

from src.catalog.core.services.database.db_connection import ConnectionFactory
from src.catalog.entities.product.entity import ProductRecord
from src.catalog.entities.product.table import products

_LIKE_ESCAPE = "\\"

_COLUMNS = (
    products.c.Id.label("id"),
    products.c.Name.label("name"),
    products.c.Description.label("description"),
    products.c.Price.label("price"),
    products.c.StockQuantity.label("stock_quantity"),
    products.c.Category.label("category"),
    products.c.CreatedAt.label("created_at"),
    products.c.UpdatedAt.label("updated_at"),
    products.c.IsActive.label("is_active"),
)


def _select_products() -> Select:
    return select(*_COLUMNS)


def _to_record(row: Mapping[str, Any]) -> ProductRecord:
    return ProductRecord.model_validate(dict(row))


def like_pattern(term: str) -> str:
    """Wrap ``term`` for a substring LIKE match, escaping LIKE wildcards."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class ProductStore:
    """Data-access layer for products.

    Every operation is an independent unit of work on its own connection,
    acquired from the connection factory and released on every exit path.
    All values reach the database as bound parameters.
    """

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        if connection_factory is None:
            raise ValueError("connection_factory is required")
        self._connection_factory = connection_factory

    @asynccontextmanager
    async def _connection(self, operation: str) -> AsyncIterator[AsyncConnection]:
        connection = await self._connection_factory.create_connection()
        try:
            yield connection
        except Exception as e:
            logger.error(
                "Product store operation failed",
                extra={
                    "operation": operation,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise
        finally:
            await connection.close()

    async def fetch_all(self) -> list[ProductRecord]:
        """Return active products ordered by name."""
        statement = (
            _select_products()
            .where(products.c.IsActive == true())
            .order_by(products.c.Name)
        )
        async with self._connection("fetch_all") as connection:
            result = await connection.execute(statement)
            return [_to_record(row) for row in result.mappings().all()]

    async def fetch_by_id(self, product_id: int) -> ProductRecord | None:
        """Return the product with ``product_id``, active or not."""
        statement = _select_products().where(products.c.Id == product_id)
        async with self._connection("fetch_by_id") as connection:
            result = await connection.execute(statement)
            row = result.mappings().first()
        if row is None:
            return None
        return _to_record(row)

    async def insert(self, record: ProductRecord) -> int:
        """Insert ``record`` and return the id generated by the database."""
        statement = products.insert().values(
            Name=record.name,
            Description=record.description,
            Price=record.price,
            StockQuantity=record.stock_quantity,
            Category=record.category,
            CreatedAt=record.created_at,
            UpdatedAt=record.updated_at,
            IsActive=record.is_active,
        )
        async with self._connection("insert") as connection:
            result = await connection.execute(statement)
            await connection.commit()
            new_id = int(result.inserted_primary_key[0])
        logger.debug("Inserted product {}", new_id)
        return new_id

    async def update(self, record: ProductRecord) -> bool:
        """Overwrite every mutable column of the row at ``record.id``."""
        statement = (
            products.update()
            .where(products.c.Id == record.id)
            .values(
                Name=record.name,
                Description=record.description,
                Price=record.price,
                StockQuantity=record.stock_quantity,
                Category=record.category,
                UpdatedAt=record.updated_at,
                IsActive=record.is_active,
            )
        )
        async with self._connection("update") as connection:
            result = await connection.execute(statement)
            await connection.commit()
            return result.rowcount > 0

    async def soft_delete(self, product_id: int, timestamp: datetime) -> bool:
        """Mark an active product inactive and stamp ``UpdatedAt``."""
        statement = (
            products.update()
            .where(products.c.Id == product_id, products.c.IsActive == true())
            .values(IsActive=False, UpdatedAt=timestamp)
        )
        async with self._connection("soft_delete") as connection:
            result = await connection.execute(statement)
            await connection.commit()
            return result.rowcount > 0

    async def search(self, term: str) -> list[ProductRecord]:
        """Return active products whose name, description or category contains ``term``."""
        pattern = bindparam("search_term", value=like_pattern(term), type_=String)
        statement = (
            _select_products()
            .where(
                products.c.IsActive == true(),
                or_(
                    products.c.Name.ilike(pattern, escape=_LIKE_ESCAPE),
                    products.c.Description.ilike(pattern, escape=_LIKE_ESCAPE),
                    products.c.Category.ilike(pattern, escape=_LIKE_ESCAPE),
                ),
            )
            .order_by(products.c.Name)
        )
        async with self._connection("search") as connection:
            result = await connection.execute(statement)
            return [_to_record(row) for row in result.mappings().all()]
