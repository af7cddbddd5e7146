"""Product store backed by a single JSON document.

The whole catalog is one pretty-printed JSON array. Every mutation is a
full read-modify-write: load the array, change it, save it back.
"""

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

import structlog

from affiliate_catalog.catalog.models import Product
from affiliate_catalog.domain.exceptions import StorageUnavailable

logger = structlog.get_logger()


class JsonProductStore:
    """Store for the product collection.

    Example usage:
        store = JsonProductStore("data/products.json")
        products = store.load()
        store.save([*products, new_product])
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize store.

        Args:
            path: Location of the JSON document.
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check whether the document has been written yet."""
        return self.path.is_file()

    def load(self) -> list[Product]:
        """Load all persisted products in insertion order.

        A document that has not been created yet is an empty catalog.

        Returns:
            List of products.

        Raises:
            StorageUnavailable: If the document cannot be read or is not a
                JSON array of products.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error("Failed to read product store", path=str(self.path), error=str(e))
            raise StorageUnavailable(str(self.path), "read failed") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Product store is not valid JSON", path=str(self.path), error=str(e))
            raise StorageUnavailable(str(self.path), "invalid JSON") from e

        if not isinstance(data, list):
            raise StorageUnavailable(str(self.path), "document is not an array")

        try:
            return [Product.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed product record", path=str(self.path), error=str(e))
            raise StorageUnavailable(str(self.path), "malformed product record") from e

    def save(self, products: Sequence[Product]) -> None:
        """Replace the persisted document with the given products.

        The new document is written next to the old one and moved into
        place, so readers never see a half-written file.

        Args:
            products: Products in the order they should be stored.

        Raises:
            StorageUnavailable: If the document cannot be written.
        """
        payload = json.dumps(
            [product.to_dict() for product in products],
            ensure_ascii=False,
            indent=2,
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to write product store", path=str(self.path), error=str(e))
            raise StorageUnavailable(str(self.path), "write failed") from e

        logger.debug("Product store saved", path=str(self.path), count=len(products))
