# src/filters/catalog_query.py

"""Category filtering and text search over the in-memory catalog."""

import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class CatalogQuery:
    """Pure queries over a product sequence. No state, no side effects."""

    @staticmethod
    def is_valid_term(term: str) -> bool:
        """Return False for empty or whitespace-only search terms.

        Callers reject invalid terms before calling :meth:`search`.
        """
        return bool(term.strip())

    @staticmethod
    def matches(product: Product, term: str) -> bool:
        """Case-insensitive substring match on the searchable fields."""
        needle = term.casefold()
        return any(
            needle in field_value.casefold()
            for field_value in (
                product.name,
                product.brand,
                product.category,
                product.description,
            )
        )

    @staticmethod
    def filter_by_category(
        catalog: Sequence[Product],
        category: str,
    ) -> list[Product]:
        """Restrict the catalog to one category.

        ``"All"`` passes every product through. Matching is exact and
        case-sensitive; an unknown category yields an empty list.
        """
        if category == Settings.ALL_CATEGORY:
            return list(catalog)
        return [p for p in catalog if p.category == category]

    @staticmethod
    def search(
        catalog: Sequence[Product],
        term: str,
    ) -> list[Product]:
        """Return products matching *term* in catalog order."""
        results = [
            p for p in catalog if CatalogQuery.matches(p, term)
        ]
        logger.debug(
            "Search '%s' matched %d of %d products",
            term,
            len(results),
            len(catalog),
        )
        return results
