# tests/test_formatting.py

"""Tests for product card display helpers."""

import unittest

from src.models.product import Product
from src.ui.formatting import (
    discount_label,
    format_price,
    is_best_seller,
    list_price,
    star_bar,
)


class TestFormatting(unittest.TestCase):
    """Price, rating and badge helpers."""

    def test_format_integer_price(self) -> None:
        self.assertEqual(format_price(2999), "RS 2999")

    def test_format_large_price(self) -> None:
        self.assertEqual(format_price(1234567), "RS 1234567")

    def test_format_fractional_price(self) -> None:
        self.assertEqual(format_price(3598.8), "RS 3598.80")

    def test_list_price_markup(self) -> None:
        self.assertEqual(list_price(2999), 3598.8)
        self.assertEqual(list_price(0), 0)

    def test_discount_label(self) -> None:
        self.assertEqual(discount_label(), "20% OFF")

    def test_star_bar_floors_rating(self) -> None:
        self.assertEqual(star_bar(4.7), "★★★★☆")
        self.assertEqual(star_bar(4.0), "★★★★☆")

    def test_star_bar_bounds(self) -> None:
        self.assertEqual(star_bar(0), "☆☆☆☆☆")
        self.assertEqual(star_bar(5), "★★★★★")
        self.assertEqual(len(star_bar(7)), 5)

    def test_best_seller_threshold(self) -> None:
        def make(rating: float) -> Product:
            return Product(
                id=1, name="X", price=1, category="Shoes", rating=rating
            )

        self.assertTrue(is_best_seller(make(4.5)))
        self.assertTrue(is_best_seller(make(4.8)))
        self.assertFalse(is_best_seller(make(4.4)))


if __name__ == "__main__":
    unittest.main()
