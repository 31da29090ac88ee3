"""Database initialization script."""

import asyncio

from src.catalog.core.services.database import DbManageService, SqlConnectionFactory
from src.catalog.runtime.context import get_config


async def init_db() -> None:
    """Create all database tables."""
    connection_factory = SqlConnectionFactory(get_config().database)
    try:
        await DbManageService(connection_factory).create_all()
    finally:
        await connection_factory.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
