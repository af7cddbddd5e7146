"""Catalog service for product operations.

High-level service that validates admin submissions and applies them
to the product store.
"""

import threading
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import structlog
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from affiliate_catalog.catalog.models import PREDEFINED_CATEGORIES, Product
from affiliate_catalog.catalog.repository import JsonProductStore
from affiliate_catalog.domain.exceptions import ProductNotFoundError, ValidationError

logger = structlog.get_logger()

_url_adapter = TypeAdapter(AnyUrl)


def is_absolute_url(value: str) -> bool:
    """Check that a string parses as an absolute URL with a host.

    Hostless absolute URLs such as ``mailto:`` or ``file:///`` links are
    rejected; an affiliate link always points at a web host.

    Args:
        value: Candidate URL.

    Returns:
        True if the value has a scheme and a host.
    """
    if any(ch.isspace() for ch in value):
        return False
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return bool(url.scheme and url.host)


def filter_by_category(
    products: Sequence[Product],
    category: str | None = None,
) -> list[Product]:
    """Select the products in a category.

    Matching is exact and case-sensitive. No category (or an empty one)
    selects everything.

    Args:
        products: Products as returned by ``CatalogService.list_products``.
        category: Category to keep.

    Returns:
        Matching products, in their original order.
    """
    if not category:
        return list(products)
    return [p for p in products if p.category == category]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CatalogService:
    """Service for catalog operations.

    Mutations are serialized through a lock so that, within one process,
    concurrent adds and deletes cannot overwrite each other.

    Example usage:
        service = CatalogService(JsonProductStore("data/products.json"))
        product = service.add_product("https://example.com/item", "Books")
        books = filter_by_category(service.list_products(), "Books")
    """

    def __init__(
        self,
        store: JsonProductStore,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize service.

        Args:
            store: Product store.
            clock: Source of creation timestamps.
        """
        self.store = store
        self.clock = clock
        self._write_lock = threading.Lock()

    def list_products(self) -> list[Product]:
        """List all products, oldest first.

        Returns:
            Products in insertion order.

        Raises:
            StorageUnavailable: If the store cannot be read.
        """
        return self.store.load()

    def add_product(self, link: str | None, category: str | None) -> Product:
        """Validate and append a new product.

        Args:
            link: Absolute affiliate URL.
            category: Category label; surrounding whitespace is dropped.

        Returns:
            The created product.

        Raises:
            ValidationError: If a field is missing or the link is not an
                absolute URL.
            StorageUnavailable: If the store cannot be read or written.
        """
        link = link.strip() if isinstance(link, str) else ""
        category = category.strip() if isinstance(category, str) else ""

        if not link or not category:
            raise ValidationError("Missing required fields: link and category")
        if not is_absolute_url(link):
            raise ValidationError("Invalid URL format", field="link")

        with self._write_lock:
            products = self.store.load()
            now = self.clock()
            # Stored timestamps carry milliseconds only
            created_at = now.replace(microsecond=now.microsecond // 1000 * 1000)
            product = Product(
                id=self._next_id(products, created_at),
                link=link,
                category=category,
                created_at=created_at,
            )
            self.store.save([*products, product])

        logger.info(
            "Product added",
            product_id=product.id,
            category=product.category,
            total=len(products) + 1,
        )
        return product

    def delete_product(self, product_id: str) -> Product:
        """Remove a product from the catalog.

        Args:
            product_id: Id of the product to remove.

        Returns:
            The removed product.

        Raises:
            ProductNotFoundError: If no product has that id.
            StorageUnavailable: If the store cannot be read or written.
        """
        with self._write_lock:
            products = self.store.load()
            removed = next((p for p in products if p.id == product_id), None)
            if removed is None:
                raise ProductNotFoundError(product_id)
            self.store.save([p for p in products if p.id != product_id])

        logger.info("Product deleted", product_id=product_id, total=len(products) - 1)
        return removed

    def list_categories(self) -> list[str]:
        """List the suggested categories merged with those in use.

        Returns:
            Sorted, de-duplicated category names.
        """
        in_use = {p.category for p in self.store.load()}
        return sorted(set(PREDEFINED_CATEGORIES) | in_use)

    @staticmethod
    def _next_id(products: Sequence[Product], created_at: datetime) -> str:
        """Derive a unique id from the creation time in milliseconds."""
        taken = {p.id for p in products}
        candidate = int(created_at.timestamp()) * 1000 + created_at.microsecond // 1000
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)


# Global service instance
_catalog_service: CatalogService | None = None


def get_catalog_service() -> CatalogService:
    """Get or create the catalog service instance.

    Returns:
        CatalogService bound to the configured product file.
    """
    global _catalog_service
    if _catalog_service is None:
        from affiliate_catalog.infrastructure.config import settings

        _catalog_service = CatalogService(JsonProductStore(settings.products_file))
    return _catalog_service
