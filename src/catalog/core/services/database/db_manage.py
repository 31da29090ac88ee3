"""Schema management for the catalog database."""

from loguru import logger
from sqlmodel import SQLModel

from src.catalog.core.services.database.db_connection import SqlConnectionFactory


class DbManageService:
    def __init__(self, connection_factory: SqlConnectionFactory):
        if connection_factory is None:
            raise ValueError("connection_factory is required")
        self._engine = connection_factory.engine

    async def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.product.table import ProductTable  # noqa: F401

        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized with tables.")

    async def drop_all(self) -> None:
        """Drop all database tables."""
        from src.catalog.entities.product.table import ProductTable  # noqa: F401

        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.drop_all)
        logger.warning("Database tables dropped.")
