"""Unit tests for SqlConnectionFactory."""

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from src.catalog.core.services.database import DbManageService, SqlConnectionFactory
from src.catalog.runtime.config.config_data import DatabaseConfig


class TestSqlConnectionFactory:
    """Test engine setup and connection hand-out."""

    def test_requires_url(self):
        with pytest.raises(ValueError, match="Database URL is not configured"):
            SqlConnectionFactory(DatabaseConfig(url=""))

    @pytest.mark.asyncio
    async def test_in_memory_sqlite_uses_static_pool(self, connection_factory):
        assert isinstance(connection_factory.engine.sync_engine.pool, StaticPool)

    @pytest.mark.asyncio
    async def test_file_sqlite_does_not_share_connection(self, tmp_path):
        factory = SqlConnectionFactory(
            DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
        )
        try:
            assert not isinstance(factory.engine.sync_engine.pool, StaticPool)
        finally:
            await factory.dispose()

    @pytest.mark.asyncio
    async def test_server_pool_settings(self, connection_factory):
        """Server databases get the configured pool sizing."""
        config = DatabaseConfig(
            url="postgresql+asyncpg://user:pw@localhost:5432/catalog",
            pool_size=7,
            max_overflow=3,
            pool_timeout=11,
            pool_recycle=600,
        )

        kwargs = connection_factory._get_engine_kwargs(config)

        assert kwargs["pool_size"] == 7
        assert kwargs["max_overflow"] == 3
        assert kwargs["pool_timeout"] == 11
        assert kwargs["pool_recycle"] == 600
        assert kwargs["pool_pre_ping"] is True
        assert "poolclass" not in kwargs
        assert kwargs["connect_args"]["server_settings"]["application_name"] == "product_catalog"

    @pytest.mark.asyncio
    async def test_create_connection_returns_open_connection(self, connection_factory):
        connection = await connection_factory.create_connection()
        try:
            assert not connection.closed
            result = await connection.execute(text("SELECT 1"))
            assert result.scalar() == 1
        finally:
            await connection.close()

        assert connection.closed

    @pytest.mark.asyncio
    async def test_health_check(self, connection_factory):
        assert await connection_factory.health_check() is True

    @pytest.mark.asyncio
    async def test_pool_status(self, connection_factory):
        status = connection_factory.get_pool_status()

        assert status["type"] == "StaticPool"
        assert set(status) == {"type", "size", "checked_in", "checked_out", "overflow"}


class TestDbManageService:
    """Test schema management."""

    def test_requires_factory(self):
        with pytest.raises(ValueError):
            DbManageService(None)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_drop_and_create(self, connection_factory):
        manager = DbManageService(connection_factory)

        await manager.drop_all()
        async with connection_factory.engine.connect() as connection:
            tables = await connection.run_sync(
                lambda sync_conn: sync_conn.dialect.get_table_names(sync_conn)
            )
        assert "Products" not in tables

        await manager.create_all()
        async with connection_factory.engine.connect() as connection:
            tables = await connection.run_sync(
                lambda sync_conn: sync_conn.dialect.get_table_names(sync_conn)
            )
        assert "Products" in tables
