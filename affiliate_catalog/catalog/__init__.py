"""Product Catalog.

Provides the product model, its JSON-document store and the service
that validates and applies catalog changes.
"""

from affiliate_catalog.catalog.models import PREDEFINED_CATEGORIES, Product
from affiliate_catalog.catalog.repository import JsonProductStore
from affiliate_catalog.catalog.service import (
    CatalogService,
    filter_by_category,
    get_catalog_service,
    is_absolute_url,
)

__all__ = [
    # Models
    "PREDEFINED_CATEGORIES",
    "Product",
    # Store
    "JsonProductStore",
    # Service
    "CatalogService",
    "filter_by_category",
    "get_catalog_service",
    "is_absolute_url",
]
