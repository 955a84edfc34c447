# src/services/storefront.py

"""Shared storefront session: catalog, cart and search handoff."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.filters.catalog_query import CatalogQuery
from src.models.product import Product
from src.services.cart_store import CartStore
from src.storage.catalog_loader import CatalogLoader
from src.storage.handoff_store import HandoffStore

logger = logging.getLogger("storefront.session")

ResultsObserver = Callable[["ShopView"], None]


@dataclass
class ShopView:
    """Products the shop page should display, with its heading."""

    title: str
    products: list[Product] = field(default_factory=list)
    search_term: str | None = None

    @property
    def is_search(self) -> bool:
        return self.search_term is not None


@dataclass
class SearchOutcome:
    """Result of a nav-bar search submission."""

    term: str
    status: str  # "ok", "empty", "invalid"
    results: list[Product] = field(default_factory=list)


class Storefront:
    """Single shared-state object constructed once at startup.

    Owns the catalog, the cart and the handoff store and hands them to
    whichever views need them.
    """

    def __init__(
        self,
        catalog: Sequence[Product] | None = None,
        cart: CartStore | None = None,
        handoff: HandoffStore | None = None,
    ) -> None:
        self.catalog: tuple[Product, ...] = (
            tuple(catalog)
            if catalog is not None
            else CatalogLoader().load()
        )
        self.cart = cart or CartStore()
        self.handoff = handoff or HandoffStore()
        self._by_id: dict[int, Product] = {
            p.id: p for p in self.catalog
        }
        self._result_observers: list[ResultsObserver] = []

    # ── Browsing ─────────────────────────────────────────

    def categories(self, include_all: bool = True) -> list[str]:
        """Category menu in display order."""
        names = list(Settings.CATEGORIES)
        if include_all:
            names.append(Settings.ALL_CATEGORY)
        return names

    def featured(
        self,
        category: str = Settings.ALL_CATEGORY,
        limit: int | None = None,
    ) -> list[Product]:
        """Products of *category*, cut to the first *limit*.

        A falsy *limit* (``None`` or ``0``) keeps every product.
        """
        products = CatalogQuery.filter_by_category(self.catalog, category)
        if not limit:
            return products
        return products[:limit]

    def home(self, category: str = Settings.ALL_CATEGORY) -> ShopView:
        """Home page listing: a short, category-filtered product strip.

        Not published to result observers; the shop listing is separate.
        """
        title = (
            "Trending Products"
            if category == Settings.ALL_CATEGORY
            else f"{category} Products"
        )
        return ShopView(
            title=title,
            products=self.featured(category, Settings.HOME_LIMIT),
        )

    def browse(self, category: str) -> ShopView:
        """Category view of the catalog."""
        products = CatalogQuery.filter_by_category(
            self.catalog, category
        )
        title = (
            "All Products"
            if category == Settings.ALL_CATEGORY
            else category
        )
        return self._publish(ShopView(title=title, products=products))

    # ── Search ───────────────────────────────────────────

    def submit_search(self, term: str) -> SearchOutcome:
        """Run a nav-bar search and stage results for the shop view.

        Invalid terms and empty results leave all state untouched.
        """
        if not CatalogQuery.is_valid_term(term):
            logger.info("Rejected empty search term")
            return SearchOutcome(term=term, status="invalid")

        results = CatalogQuery.search(self.catalog, term)
        if not results:
            logger.info("No products found for '%s'", term)
            return SearchOutcome(term=term, status="empty")

        self.handoff.stage(term, results)
        return SearchOutcome(term=term, status="ok", results=results)

    def open_shop(self, search: str | None = None) -> ShopView:
        """Shop page entry point.

        A staged handoff is consumed first; a *search* parameter (deep
        link) then re-runs the query and takes precedence. With neither
        the shop shows every product.
        """
        view: ShopView | None = None

        staged = self.handoff.take()
        if staged is not None:
            view = self._search_view(staged.term, staged.results)

        if search:
            results = CatalogQuery.search(self.catalog, search)
            view = self._search_view(search, results)

        if view is None:
            return self.browse(Settings.ALL_CATEGORY)
        return self._publish(view)

    def subscribe_results(
        self, observer: ResultsObserver,
    ) -> Callable[[], None]:
        """Register *observer* for every view this session produces."""
        self._result_observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._result_observers:
                self._result_observers.remove(observer)

        return unsubscribe

    # ── Cart intents ─────────────────────────────────────

    def product(self, product_id: int) -> Product:
        """Look up a catalog product by id (``KeyError`` if absent)."""
        return self._by_id[product_id]

    def add_to_cart(self, product_id: int) -> Product:
        """Add the catalog product with *product_id* to the cart."""
        product = self.product(product_id)
        self.cart.add_item(product)
        return product

    def remove_from_cart(self, product_id: int) -> None:
        """Drop every cart entry with *product_id*."""
        self.cart.remove_item(product_id)

    # ── Private helpers ──────────────────────────────────

    @staticmethod
    def _search_view(term: str, results: list[Product]) -> ShopView:
        return ShopView(
            title=f'Search Results for "{term}"',
            products=results,
            search_term=term,
        )

    def _publish(self, view: ShopView) -> ShopView:
        for observer in list(self._result_observers):
            observer(view)
        return view
