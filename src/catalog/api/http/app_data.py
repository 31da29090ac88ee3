from dataclasses import dataclass

from loguru import logger

from src.catalog.core.services.database import DbManageService, SqlConnectionFactory
from src.catalog.core.services.product import ProductCatalogService
from src.catalog.entities.product import ProductStore
from src.catalog.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    connection_factory: SqlConnectionFactory
    product_store: ProductStore
    product_service: ProductCatalogService


async def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Wire the infrastructure and application layers together."""
    connection_factory = SqlConnectionFactory(config.database)

    if config.database.create_schema:
        logger.info("Ensuring database schema exists")
        await DbManageService(connection_factory).create_all()

    product_store = ProductStore(connection_factory)
    product_service = ProductCatalogService(product_store)

    return ApplicationDependencies(
        connection_factory=connection_factory,
        product_store=product_store,
        product_service=product_service,
    )
