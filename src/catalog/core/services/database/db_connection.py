"""Async database connection factory used by the repositories."""

from typing import Any, Protocol

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from src.catalog.runtime.config.config_data import DatabaseConfig


class ConnectionFactory(Protocol):
    """Hands out ready, open connections.

    Ownership of the returned connection passes to the caller, which must
    close it when its unit of work ends.
    """

    async def create_connection(self) -> AsyncConnection: ...


class SqlConnectionFactory:
    """SQLAlchemy implementation of :class:`ConnectionFactory`.

    Any async driver SQLAlchemy supports works here (``postgresql+asyncpg``,
    ``sqlite+aiosqlite``...). Pooling belongs to the engine.
    """

    def __init__(self, db_config: DatabaseConfig):
        if not db_config.url:
            raise ValueError("Database URL is not configured.")

        logger.info("Setting up database engine")
        self._db_config = db_config
        engine_kwargs = self._get_engine_kwargs(db_config)
        self._engine: AsyncEngine = create_async_engine(
            db_config.connection_string, **engine_kwargs
        )
        logger.info(
            "Database engine initialized",
            extra={
                "dialect": self._engine.sync_engine.dialect.name,
                "pool": type(self._engine.sync_engine.pool).__name__,
            },
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_sqlite:
            if make_url(db_config.url).database in (None, "", ":memory:"):
                # Every connection must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        return engine_kwargs

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict[str, Any]:
        if db_config.is_sqlite:
            return {"check_same_thread": False, "timeout": 20}
        if db_config.url.startswith("postgresql+asyncpg"):
            return {"timeout": 30, "server_settings": {"application_name": "product_catalog"}}
        return {}

    async def create_connection(self) -> AsyncConnection:
        """Open a new connection. The caller owns it and must close it."""
        connection = self._engine.connect()
        await connection.start()
        return connection

    async def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            async with self._engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            return False

    def get_pool_status(self) -> dict[str, Any]:
        """Get current connection pool status for monitoring."""
        pool = self._engine.sync_engine.pool
        return {
            "type": type(pool).__name__,
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    async def dispose(self) -> None:
        logger.info("Disposing database engine")
        await self._engine.dispose()
