"""Domain layer - errors shared by the catalog and the admin service.

Example usage:
    from affiliate_catalog.domain import ValidationError

    try:
        service.add_product(link, category)
    except ValidationError as e:
        print(e.message)
"""

from affiliate_catalog.domain.exceptions import (
    AuthError,
    DomainError,
    ProductNotFoundError,
    StorageUnavailable,
    ValidationError,
)

__all__ = [
    "AuthError",
    "DomainError",
    "ProductNotFoundError",
    "StorageUnavailable",
    "ValidationError",
]
