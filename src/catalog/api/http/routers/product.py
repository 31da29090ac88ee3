"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.models.product import ProductDto
from src.catalog.core.services.product import ProductCatalogService

router = APIRouter()


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductDto,
    service: ProductCatalogService = Depends(get_product_service),
) -> dict[str, int]:
    """Create a new product."""
    product_id = await service.create_product(product)
    return {"id": product_id}


@router.get("/search", response_model=list[ProductDto])
async def search_products(
    term: str = Query(default="", description="Substring to look for"),
    service: ProductCatalogService = Depends(get_product_service),
) -> list[ProductDto]:
    """Search active products by name, description or category."""
    return await service.search_products(term)


@router.get("/{product_id}", response_model=ProductDto)
async def get_product(
    product_id: int,
    service: ProductCatalogService = Depends(get_product_service),
) -> ProductDto:
    """Get a product by ID."""
    product = await service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}")
async def update_product(
    product_id: int,
    product_update: ProductDto,
    service: ProductCatalogService = Depends(get_product_service),
) -> dict[str, str]:
    """Update a product."""
    # The path is authoritative for the id
    product_update.id = product_id

    updated = await service.update_product(product_update)
    if not updated:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product updated successfully"}


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    service: ProductCatalogService = Depends(get_product_service),
) -> dict[str, str]:
    """Soft-delete a product."""
    deleted = await service.delete_product(product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted successfully"}


@router.get("/", response_model=list[ProductDto])
async def list_products(
    q: str | None = Query(default=None, description="Optional search term"),
    service: ProductCatalogService = Depends(get_product_service),
) -> list[ProductDto]:
    """List active products, optionally filtered by a search term."""
    if q is not None:
        return await service.search_products(q)
    return await service.list_products()
