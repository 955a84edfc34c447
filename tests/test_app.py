# tests/test_app.py

"""Smoke tests for the TUI application using Textual's Pilot."""

import unittest
from typing import Any, cast
from unittest.mock import MagicMock

from textual.widgets import Button, DataTable, Input, Static, TabbedContent

from src.models.product import Product
from src.services.contact_client import STATUS_SUCCESS
from src.services.storefront import Storefront
from src.ui.app import StorefrontApp

CATALOG = (
    Product(id=1, name="Rose Gold Serum", price=2999, category="Beauty",
            brand="ROSE", rating=4.5,
            description="Hydrating facial serum with vitamin C"),
    Product(id=2, name="Classic Sneakers", price=5999, category="Shoes",
            brand="Sporty", rating=4.4,
            description="Everyday casual sneakers"),
    Product(id=3, name="Smart Watch", price=19999, category="Electronics",
            brand="Wear", rating=4.5,
            description="Fitness tracking smart watch"),
)


def _make_app() -> StorefrontApp:
    contact = MagicMock()
    contact.submit.return_value = STATUS_SUCCESS
    return StorefrontApp(
        storefront=Storefront(catalog=CATALOG), contact_client=contact
    )


class TestStorefrontApp(unittest.IsolatedAsyncioTestCase):
    """Smoke tests for the Textual TUI."""

    async def test_app_composes_without_crash(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#search_input", Input)
            app.query_one("#search_btn", Button)
            app.query_one("#results_table", DataTable)
            app.query_one("#cart_table", DataTable)
            app.query_one("#cart_count", Static)
            app.query_one("#tabs", TabbedContent)
            await pilot.pause()

    async def test_initial_listing_shows_all_products(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            table = app.query_one("#results_table", DataTable)
            self.assertEqual(table.row_count, 3)
            self.assertEqual(len(app.displayed), 3)

    async def test_category_buttons_present(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            for name in app.storefront.categories():
                app.query_one(f"#cat_{name.lower()}", Button)
            await pilot.pause()

    async def test_category_button_filters(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#cat_shoes", Button).press()
            await pilot.pause()
            self.assertEqual([p.id for p in app.displayed], [2])

    async def test_empty_query_keeps_listing(self) -> None:
        app = _make_app()
        async with app.run_test(notifications=True) as pilot:
            await pilot.click("#search_btn")
            await pilot.pause()
            self.assertEqual(len(app.displayed), 3)
            self.assertFalse(app.storefront.handoff.has_pending())

    async def test_search_populates_table(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#search_input", Input).value = "smart"
            await pilot.click("#search_btn")
            await pilot.pause()
            self.assertEqual([p.id for p in app.displayed], [3])
            table = app.query_one("#results_table", DataTable)
            self.assertEqual(table.row_count, 1)
            # Handoff consumed by the shop view
            self.assertFalse(app.storefront.handoff.has_pending())

    async def test_search_without_results_clears_input(self) -> None:
        app = _make_app()
        async with app.run_test(notifications=True) as pilot:
            search_input = app.query_one("#search_input", Input)
            search_input.value = "laptop"
            await pilot.click("#search_btn")
            await pilot.pause()
            self.assertEqual(search_input.value, "")
            self.assertEqual(len(app.displayed), 3)

    async def test_add_and_remove_update_cart_count(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.action_add_to_cart()
            app.action_add_to_cart()
            await pilot.pause()
            self.assertEqual(app.storefront.cart.count(), 2)
            cart_table = app.query_one("#cart_table", DataTable)
            self.assertEqual(cart_table.row_count, 2)

            app.action_remove_from_cart()
            await pilot.pause()
            self.assertEqual(app.storefront.cart.count(), 0)
            self.assertEqual(cart_table.row_count, 0)

    async def test_back_to_categories_resets_listing(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#cat_beauty", Button).press()
            await pilot.pause()
            app.action_back_to_categories()
            await pilot.pause()
            self.assertEqual(len(app.displayed), 3)

    async def test_home_tab_opens_on_trending(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            tabs = app.query_one("#tabs", TabbedContent)
            self.assertEqual(tabs.active, "tab_home")
            home = app.query_one("#home_table", DataTable)
            self.assertEqual(home.row_count, 3)
            self.assertEqual(
                [p.id for p in app.home_displayed], [1, 2, 3]
            )

    async def test_home_menu_hides_all(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            self.assertEqual(len(app.query("#home_all")), 0)
            app.query_one("#home_kitchen", Button)

    async def test_home_category_button_filters_strip(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#home_shoes", Button).press()
            await pilot.pause()
            self.assertEqual([p.id for p in app.home_displayed], [2])
            # Shop listing is untouched
            self.assertEqual(len(app.displayed), 3)

    async def test_add_from_home_tab(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#home_electronics", Button).press()
            await pilot.pause()
            app.action_add_to_cart()
            await pilot.pause()
            self.assertEqual(
                [p.id for p in app.storefront.cart.items()], [3]
            )

    async def test_contact_submission_success(self) -> None:
        app = _make_app()
        async with app.run_test(notifications=True) as pilot:
            app.query_one("#tabs", TabbedContent).active = "tab_contact"
            await pilot.pause()
            app.query_one("#contact_name", Input).value = "Feeza"
            app.query_one("#contact_email", Input).value = "f@example.com"
            app.query_one("#contact_message", Input).value = "Hi"
            await app.send_contact()
            await pilot.pause()
            contact = cast(Any, app.contact_client)
            contact.submit.assert_called_once()
            self.assertEqual(
                app.query_one("#contact_name", Input).value, ""
            )

    async def test_contact_missing_fields_not_sent(self) -> None:
        app = _make_app()
        async with app.run_test(notifications=True) as pilot:
            await app.send_contact()
            await pilot.pause()
            contact = cast(Any, app.contact_client)
            contact.submit.assert_not_called()


if __name__ == "__main__":
    unittest.main()
