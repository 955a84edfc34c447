# src/ui/formatting.py

"""Display helpers for product and cart cards."""

import math

from src.config.settings import Settings
from src.models.product import Product


def format_price(price: float) -> str:
    """Render a price with the storefront currency label."""
    if float(price).is_integer():
        return f"{Settings.CURRENCY_LABEL} {int(price)}"
    return f"{Settings.CURRENCY_LABEL} {price:.2f}"


def list_price(price: int) -> float:
    """Pre-discount "original" price shown struck through on cards."""
    return round(price * Settings.LIST_PRICE_MARKUP, 2)


def discount_label() -> str:
    """Badge text matching the list-price markup, e.g. ``20% OFF``."""
    percent = round((Settings.LIST_PRICE_MARKUP - 1) * 100)
    return f"{percent}% OFF"


def star_bar(rating: float) -> str:
    """Five stars with ``floor(rating)`` of them filled."""
    filled = max(0, min(5, math.floor(rating)))
    return "★" * filled + "☆" * (5 - filled)


def is_best_seller(product: Product) -> bool:
    return product.rating >= Settings.BEST_SELLER_RATING
