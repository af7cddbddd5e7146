"""Tests for the product model."""

from datetime import datetime, timezone

import pytest

from affiliate_catalog.catalog.models import Product, format_timestamp, parse_timestamp


class TestTimestamps:
    """Tests for timestamp formatting."""

    def test_format_uses_millisecond_utc(self) -> None:
        """Timestamps are written with milliseconds and a Z suffix."""
        value = datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-05-01T12:30:00.123Z"

    def test_parse_accepts_z_suffix(self) -> None:
        """Z-suffixed timestamps parse as UTC."""
        parsed = parse_timestamp("2024-05-01T12:30:00.123Z")
        assert parsed.tzinfo is not None
        assert parsed.utcoffset().total_seconds() == 0
        assert parsed.microsecond == 123000


class TestProduct:
    """Tests for Product serialization."""

    def test_to_dict_uses_persisted_keys(self) -> None:
        """Serialized products use the document's key names."""
        product = Product(
            id="1714566600000",
            link="https://example.com/item",
            category="Books",
            created_at=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        )
        assert product.to_dict() == {
            "id": "1714566600000",
            "link": "https://example.com/item",
            "category": "Books",
            "createdAt": "2024-05-01T12:30:00.000Z",
        }

    def test_legacy_record_without_timestamp(self) -> None:
        """Records without createdAt load and serialize without it."""
        product = Product.from_dict(
            {"id": "1", "link": "https://example.com", "category": "Books"}
        )
        assert product.created_at is None
        assert "createdAt" not in product.to_dict()

    def test_from_dict_missing_field(self) -> None:
        """A record without a link is rejected."""
        with pytest.raises(KeyError):
            Product.from_dict({"id": "1", "category": "Books"})

    def test_from_dict_wrong_type(self) -> None:
        """Non-string fields are rejected."""
        with pytest.raises(TypeError):
            Product.from_dict({"id": 1, "link": "https://example.com", "category": "Books"})

    def test_product_is_immutable(self) -> None:
        """Products cannot be changed after creation."""
        product = Product(id="1", link="https://example.com", category="Books")
        with pytest.raises(AttributeError):
            product.category = "Toys"  # type: ignore[misc]
