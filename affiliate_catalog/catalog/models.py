"""Product model for the affiliate catalog.

A product pairs an affiliate link with a free-text category. Products
are immutable once created and are stored in the order they were added.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


# Suggested categories offered to the admin and merged into the public
# filter list. The catalog accepts any non-empty category.
PREDEFINED_CATEGORIES = [
    "Fashion-Men",
    "Fashion-Women",
    "Electronics",
    "Books",
    "Home & Kitchen",
    "Sports & Outdoors",
    "Health & Beauty",
    "Toys & Games",
    "Automotive",
    "Garden & Outdoor",
]


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision.

    Args:
        value: Timezone-aware datetime.

    Returns:
        String such as ``2024-05-01T12:30:00.123Z``.
    """
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Product:
    """Product entity in the catalog.

    Attributes:
        id: Unique identifier derived from the creation time.
        link: Absolute affiliate URL.
        category: Trimmed category label.
        created_at: Creation timestamp, None for legacy records.
    """

    id: str
    link: str
    category: str
    created_at: datetime | None = None

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, category={self.category})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON shape.

        Returns:
            Dictionary with ``id``, ``link``, ``category`` and, when known,
            ``createdAt``.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "link": self.link,
            "category": self.category,
        }
        if self.created_at is not None:
            data["createdAt"] = format_timestamp(self.created_at)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a product from its persisted JSON shape.

        Args:
            data: Mapping as written by ``to_dict``.

        Returns:
            Product instance.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If a field has the wrong type.
            ValueError: If ``createdAt`` is not a valid timestamp.
        """
        product_id = data["id"]
        link = data["link"]
        category = data["category"]
        for name, value in (("id", product_id), ("link", link), ("category", category)):
            if not isinstance(value, str):
                raise TypeError(f"Product field '{name}' must be a string")

        created_at = data.get("createdAt")
        if created_at is not None and not isinstance(created_at, str):
            raise TypeError("Product field 'createdAt' must be a string")

        return cls(
            id=product_id,
            link=link,
            category=category,
            created_at=parse_timestamp(created_at) if created_at else None,
        )
