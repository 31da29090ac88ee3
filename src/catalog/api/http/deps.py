"""FastAPI dependency implementations."""

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services.database import SqlConnectionFactory
from src.catalog.core.services.product import ProductCatalogService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_connection_factory(request: Request) -> SqlConnectionFactory:
    """Get the database connection factory instance."""
    return get_app_dependencies(request).connection_factory


def get_product_service(request: Request) -> ProductCatalogService:
    """Get the product catalog service instance."""
    return get_app_dependencies(request).product_service
