# src/storage/catalog_loader.py

"""Loads the static product catalog from disk at startup."""

import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.catalog")


class CatalogError(Exception):
    """Raised when the catalog file is missing, malformed or inconsistent."""


class CatalogLoader:
    """Read-only provider of the fixed, ordered product catalog."""

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path or Settings.CATALOG_PATH

    def load(self) -> tuple[Product, ...]:
        """Materialise the full catalog in file order.

        Raises ``CatalogError`` on unreadable files, malformed records
        or duplicate product ids.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                raw: Any = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(
                f"Cannot read catalog {self.path}: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise CatalogError(
                f"Catalog {self.path} must be a JSON array"
            )

        products: list[Product] = []
        seen_ids: set[int] = set()
        for index, record in enumerate(raw):
            try:
                product = Product.from_dict(record)
            except (KeyError, TypeError, ValueError) as exc:
                raise CatalogError(
                    f"Malformed catalog record #{index}: {exc}"
                ) from exc
            if product.id in seen_ids:
                raise CatalogError(
                    f"Duplicate product id {product.id} in catalog"
                )
            seen_ids.add(product.id)
            products.append(product)

        unknown = {
            p.category for p in products
        } - set(Settings.CATEGORIES)
        if unknown:
            logger.warning(
                "Catalog uses categories outside the menu: %s",
                ", ".join(sorted(unknown)),
            )

        logger.info(
            "Loaded %d products from %s", len(products), self.path
        )
        return tuple(products)
