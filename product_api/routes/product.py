from fastapi import APIRouter, Depends, HTTPException, status
from uuid import UUID
from typing import List

from product_api import config
from product_api.dependencies import get_store
from product_api.exceptions import (
    InvalidProductIdError,
    ProductNotFoundError,
    ProductStoreError,
)
from product_api.models.schemas.product import (
    Product,
    ProductCreate,
    ProductUpdate,
)
from product_api.services.base import ProductStore
from product_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def _store_error(action: str, e: ProductStoreError) -> HTTPException:
    logger.warning("Failed to {}: {}", action, e)
    if config.DISTINCT_ERRORS:
        if isinstance(e, ProductNotFoundError):
            return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        if isinstance(e, InvalidProductIdError):
            return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid product id")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


@router.get("", response_model=List[Product])
async def list_products(store: ProductStore = Depends(get_store)):
    """List all products."""
    try:
        return await store.list()
    except ProductStoreError as e:
        raise _store_error("list products", e) from e


@router.post("", response_model=Product)
async def create_product(data: ProductCreate, store: ProductStore = Depends(get_store)):
    """Add a product. The id is assigned by the server."""
    try:
        return await store.create(data)
    except ProductStoreError as e:
        raise _store_error("create product", e) from e


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: UUID, store: ProductStore = Depends(get_store)):
    """Get a specific product by ID."""
    try:
        return await store.get(product_id)
    except ProductStoreError as e:
        raise _store_error("get product", e) from e


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    store: ProductStore = Depends(get_store),
):
    """Update an existing product."""
    try:
        return await store.update(product_id, data)
    except ProductStoreError as e:
        raise _store_error("update product", e) from e


@router.delete("/{product_id}", response_model=Product)
async def delete_product(product_id: UUID, store: ProductStore = Depends(get_store)):
    """Delete a product. Deleting an unknown id succeeds."""
    try:
        await store.delete(product_id)
    except ProductStoreError as e:
        raise _store_error("delete product", e) from e

    return Product(id=product_id, name="Deleted", price=0.0)
