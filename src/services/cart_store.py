# src/services/cart_store.py

"""In-memory shopping cart with observer notification."""

import logging
import threading
from collections.abc import Callable

from src.models.product import Product

logger = logging.getLogger("storefront.cart")

CartObserver = Callable[["CartStore"], None]


class CartStore:
    """Ordered list of products the user intends to buy.

    The cart is not keyed by id: adding the same product twice stores
    two entries, and :meth:`remove_item` drops every entry sharing the
    id in a single call. Mutations are serialised by one lock; observers
    run after the lock is released, in subscription order.
    """

    def __init__(self) -> None:
        self._entries: list[Product] = []
        self._lock = threading.Lock()
        self._observers: list[CartObserver] = []

    def add_item(self, product: Product) -> None:
        """Append *product* to the end of the cart."""
        with self._lock:
            self._entries.append(product)
            count = len(self._entries)
        logger.info(
            "Added product %d (%s) to cart, %d entries",
            product.id,
            product.name,
            count,
        )
        self._notify()

    def remove_item(self, product_id: int) -> None:
        """Remove every entry whose id equals *product_id*.

        Removing an id that is not in the cart leaves it unchanged.
        """
        with self._lock:
            before = len(self._entries)
            self._entries = [
                p for p in self._entries if p.id != product_id
            ]
            removed = before - len(self._entries)
        if removed:
            logger.info(
                "Removed %d entries with id %d from cart",
                removed,
                product_id,
            )
        else:
            logger.debug(
                "Remove of id %d ignored, not in cart", product_id
            )
        self._notify()

    def count(self) -> int:
        """Number of entries, duplicates included."""
        with self._lock:
            return len(self._entries)

    def total(self) -> int:
        """Sum of entry prices, duplicates counted individually."""
        with self._lock:
            return sum(p.price for p in self._entries)

    def items(self) -> tuple[Product, ...]:
        """Snapshot of the cart entries in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """Register *observer* and return a function that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
