#!/usr/bin/env python3
"""Seed product catalog script.

Appends sample affiliate links to the product file through the
catalog service, so ids, timestamps and validation match the API.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --file data/products.json --clear
    python scripts/seed_catalog.py --category Books
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from affiliate_catalog.catalog.repository import JsonProductStore
from affiliate_catalog.catalog.service import CatalogService
from affiliate_catalog.domain.exceptions import DomainError
from affiliate_catalog.infrastructure.config import settings

SAMPLE_PRODUCTS = [
    ("https://www.amazon.com/dp/B07FZ8S74R", "Electronics"),
    ("https://www.amazon.com/dp/B08N5WRWNW", "Electronics"),
    ("https://www.amazon.com/dp/0735211299", "Books"),
    ("https://www.amazon.com/dp/1847941834", "Books"),
    ("https://www.amazon.com/dp/B07PXGQC1Q", "Home & Kitchen"),
    ("https://www.amazon.com/dp/B01LYB49A5", "Sports & Outdoors"),
    ("https://www.amazon.com/dp/B00JEJ1M5Y", "Fashion-Men"),
    ("https://www.amazon.com/dp/B07KWRCR4V", "Fashion-Women"),
    ("https://www.amazon.com/dp/B00TTD9BRC", "Toys & Games"),
    ("https://www.amazon.com/dp/B0009XLTJ4", "Health & Beauty"),
]


def seed(
    path: str,
    clear: bool = False,
    category: str | None = None,
) -> dict:
    """Seed the catalog file.

    Args:
        path: Product file location.
        clear: Whether to empty the file first.
        category: Only seed samples from this category.

    Returns:
        Seeding result.
    """
    store = JsonProductStore(path)
    created_file = not store.exists()
    service = CatalogService(store)

    cleared = 0
    if clear:
        cleared = len(store.load())
        store.save([])

    samples = [s for s in SAMPLE_PRODUCTS if category is None or s[1] == category]
    for link, sample_category in samples:
        service.add_product(link, sample_category)

    return {
        "file": path,
        "created_file": created_file,
        "cleared": cleared,
        "products_created": len(samples),
        "total": len(service.list_products()),
    }


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the affiliate product catalog with sample links",
    )
    parser.add_argument(
        "--file",
        default=settings.products_file,
        help=f"Product file to seed (default: {settings.products_file})",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Remove existing products before seeding",
    )
    parser.add_argument(
        "--category",
        default=None,
        help="Only seed sample links from this category",
    )

    args = parser.parse_args()

    try:
        result = seed(args.file, clear=args.clear, category=args.category)
    except DomainError as e:
        print(f"Seeding failed: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(f"Seeded {result['file']}")
    if result["created_file"]:
        print("  (new file)")
    print(f"  Cleared:  {result['cleared']}")
    print(f"  Created:  {result['products_created']}")
    print(f"  Total:    {result['total']}")


if __name__ == "__main__":
    main()
