"""Product API endpoints.

Public listing of the catalog plus admin-only add and delete.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from affiliate_catalog.api.auth import require_admin
from affiliate_catalog.api.schemas import (
    CategoryListResponse,
    ErrorResponse,
    ProductCreateRequest,
    ProductMutationResponse,
    ProductSchema,
)
from affiliate_catalog.catalog.service import CatalogService, get_catalog_service
from affiliate_catalog.domain.exceptions import (
    ProductNotFoundError,
    StorageUnavailable,
    ValidationError,
)

router = APIRouter(prefix="/api", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/products",
    response_model=list[ProductSchema],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description="Get every product in insertion order. Filtering is left to the caller.",
)
def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[ProductSchema]:
    """List all products.

    Args:
        service: Catalog service.

    Returns:
        Products, oldest first.

    Raises:
        HTTPException: If the store cannot be read.
    """
    try:
        products = service.list_products()
    except StorageUnavailable:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read products",
        ) from None

    return [ProductSchema.from_product(p) for p in products]


@router.post(
    "/products",
    response_model=ProductMutationResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    dependencies=[Depends(require_admin)],
    summary="Add product",
    description="Add an affiliate link under a category. Requires an admin session.",
)
def add_product(
    request: ProductCreateRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductMutationResponse:
    """Add a product.

    Args:
        request: Link and category.
        service: Catalog service.

    Returns:
        Confirmation with the created product.

    Raises:
        HTTPException: On invalid input or storage failure.
    """
    try:
        product = service.add_product(request.link, request.category)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from None
    except StorageUnavailable:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add product",
        ) from None

    return ProductMutationResponse(
        message="Product added successfully",
        product=ProductSchema.from_product(product),
    )


@router.delete(
    "/products/{product_id}",
    response_model=ProductMutationResponse,
    response_model_exclude_none=True,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    dependencies=[Depends(require_admin)],
    summary="Delete product",
    description="Remove a product from the catalog. Requires an admin session.",
)
def delete_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductMutationResponse:
    """Delete a product.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Confirmation with the removed product.

    Raises:
        HTTPException: If the product is unknown or storage fails.
    """
    try:
        product = service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from None
    except StorageUnavailable:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete product",
        ) from None

    return ProductMutationResponse(
        message="Product deleted successfully",
        product=ProductSchema.from_product(product),
    )


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
    description="Suggested categories merged with the categories currently in use.",
)
def list_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategoryListResponse:
    """List category names for filters and data entry."""
    try:
        categories = service.list_categories()
    except StorageUnavailable:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read products",
        ) from None

    return CategoryListResponse(categories=categories)
