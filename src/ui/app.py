# src/ui/app.py

"""Terminal UI for the storefront."""

import asyncio
import logging
from collections.abc import Callable
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
    TabbedContent,
    TabPane,
)

from src.config.settings import Settings
from src.models.contact_message import ContactMessage
from src.models.product import Product
from src.services.cart_store import CartStore
from src.services.contact_client import (
    STATUS_FAILURE,
    STATUS_SUCCESS,
    ContactClient,
)
from src.services.storefront import ShopView, Storefront
from src.ui.formatting import (
    discount_label,
    format_price,
    is_best_seller,
    list_price,
    star_bar,
)

logger = logging.getLogger("storefront.ui")


class StorefrontApp(App[object]):
    """Terminal UI for browsing, searching and filling the cart."""

    CSS_PATH = "styles.tcss"
    TITLE = "S-Hive"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_to_cart", "Add to Cart"),
        Binding("d", "remove_from_cart", "Remove"),
        Binding("b", "back_to_categories", "All Products"),
    ]

    def __init__(
        self,
        storefront: Storefront | None = None,
        contact_client: ContactClient | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.storefront = storefront or Storefront()
        self.contact_client = contact_client or ContactClient()
        self.displayed: list[Product] = []
        self.home_displayed: list[Product] = []
        self._unsubscribers: list[Callable[[], None]] = []
        self._category_ids: dict[str, str] = {
            f"cat_{name.lower()}": name
            for name in self.storefront.categories()
        }
        self._home_category_ids: dict[str, str] = {
            f"home_{name.lower()}": name
            for name in self.storefront.categories(include_all=False)
        }

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        category_buttons = [
            Button(name, id=button_id, classes="category")
            for button_id, name in self._category_ids.items()
        ]
        home_buttons = [
            Button(name, id=button_id, classes="category")
            for button_id, name in self._home_category_ids.items()
        ]

        yield Header()
        yield Container(
            Horizontal(
                Input(placeholder="Search Items...", id="search_input"),
                Button("Search", variant="primary", id="search_btn"),
                Static("🛒 0", id="cart_count"),
                id="search_bar",
            ),
            TabbedContent(
                TabPane(
                    "Home",
                    Static(
                        "SHOP SMART  UP TO 20% OFF", id="home_banner"
                    ),
                    Horizontal(*home_buttons, id="home_category_bar"),
                    Static("Trending Products", id="home_title"),
                    cast(
                        DataTable[str | Text],
                        DataTable(
                            id="home_table",
                            zebra_stripes=True,
                            cursor_type="row",
                        ),
                    ),
                    id="tab_home",
                ),
                TabPane(
                    "Shop",
                    Horizontal(*category_buttons, id="category_bar"),
                    Static("All Products", id="shop_title"),
                    cast(
                        DataTable[str | Text],
                        DataTable(
                            id="results_table",
                            zebra_stripes=True,
                            cursor_type="row",
                        ),
                    ),
                    id="tab_shop",
                ),
                TabPane(
                    "Cart",
                    Static("Your cart is empty", id="cart_summary"),
                    cast(
                        DataTable[str | Text],
                        DataTable(
                            id="cart_table",
                            zebra_stripes=True,
                            cursor_type="row",
                        ),
                    ),
                    id="tab_cart",
                ),
                TabPane(
                    "Contact",
                    Vertical(
                        Input(placeholder="Your Name", id="contact_name"),
                        Input(
                            placeholder="Email Address",
                            id="contact_email",
                        ),
                        Input(
                            placeholder="How can we help you?",
                            id="contact_message",
                        ),
                        Button(
                            "Send Message",
                            variant="primary",
                            id="contact_btn",
                        ),
                        Static("", id="contact_status"),
                        id="contact_form",
                    ),
                    id="tab_contact",
                ),
                id="tabs",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure tables, wire observers and show the full catalog."""
        for table in (self._home_table(), self._results_table()):
            table.add_columns(
                "Brand", "Name", "Price", "Was", "Rating", ""
            )
        self._cart_table().add_columns("Name", "Price")

        self._unsubscribers.append(
            self.storefront.subscribe_results(self.show_view)
        )
        self._unsubscribers.append(
            self.storefront.cart.subscribe(self.refresh_cart)
        )
        self.show_home()
        self.storefront.open_shop()
        self.refresh_cart(self.storefront.cart)

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # ── Widget lookups ───────────────────────────────────

    def _results_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )

    def _home_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#home_table", DataTable),
        )

    def _cart_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#cart_table", DataTable),
        )

    # ── Observers ────────────────────────────────────────

    def show_view(self, view: ShopView) -> None:
        """Render a shop view into the results table."""
        self.displayed = list(view.products)
        self.query_one("#shop_title", Static).update(
            f"{view.title} ({len(view.products)} products found)"
        )
        self._fill_products(self._results_table(), view.products)

    def show_home(self, category: str = Settings.ALL_CATEGORY) -> None:
        """Render the home page strip for *category*."""
        view = self.storefront.home(category)
        self.home_displayed = list(view.products)
        self.query_one("#home_title", Static).update(view.title)
        self._fill_products(self._home_table(), view.products)

    @staticmethod
    def _fill_products(
        table: DataTable[str | Text], products: list[Product]
    ) -> None:
        table.clear()
        for p in products:
            badge = (
                Text("Best Seller", style="bold yellow")
                if is_best_seller(p)
                else ""
            )
            table.add_row(
                p.brand,
                p.name,
                Text(format_price(p.price), style="bold green"),
                Text(
                    f"{format_price(list_price(p.price))} "
                    f"{discount_label()}",
                    style="dim strike",
                ),
                f"{star_bar(p.rating)} ({p.rating})",
                badge,
            )

    def refresh_cart(self, cart: CartStore) -> None:
        """Re-render the cart table, count and total."""
        entries = cart.items()
        self.query_one("#cart_count", Static).update(f"🛒 {len(entries)}")

        summary = self.query_one("#cart_summary", Static)
        if not entries:
            summary.update("Your cart is empty")
        else:
            summary.update(
                f"Total Products: {len(entries)}    "
                f"Total Price: {format_price(cart.total())}"
            )

        table = self._cart_table()
        table.clear()
        for p in entries:
            table.add_row(p.name, format_price(p.price))

    # ── Events ───────────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        button_id = event.button.id or ""
        if button_id == "search_btn":
            self.perform_search()
        elif button_id == "contact_btn":
            await self.send_contact()
        elif button_id in self._category_ids:
            self.storefront.browse(self._category_ids[button_id])
        elif button_id in self._home_category_ids:
            self.show_home(self._home_category_ids[button_id])

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the search input."""
        if event.input.id == "search_input":
            self.perform_search()

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Enter on a product adds it; Enter on a cart line removes it."""
        if event.data_table.id in ("home_table", "results_table"):
            self.action_add_to_cart()
        elif event.data_table.id == "cart_table":
            self.action_remove_from_cart()

    def perform_search(self) -> None:
        """Run the search bar query and open the shop on the results."""
        search_input = self.query_one("#search_input", Input)
        outcome = self.storefront.submit_search(search_input.value)

        if outcome.status == "invalid":
            self.notify("Please enter a search term", severity="warning")
            return
        if outcome.status == "empty":
            self.notify(
                "No matching products found! Please try another search.",
                severity="warning",
            )
            search_input.value = ""
            return

        self.query_one("#tabs", TabbedContent).active = "tab_shop"
        self.storefront.open_shop()

    # ── Actions ──────────────────────────────────────────

    def action_add_to_cart(self) -> None:
        """Add the highlighted product on the Home or Shop tab."""
        if self.query_one("#tabs", TabbedContent).active == "tab_home":
            table, products = self._home_table(), self.home_displayed
        else:
            table, products = self._results_table(), self.displayed
        row = table.cursor_row
        if not 0 <= row < len(products):
            return
        self.storefront.add_to_cart(products[row].id)
        self.notify("Item added to cart")

    def action_remove_from_cart(self) -> None:
        """Remove every cart entry matching the highlighted line."""
        entries = self.storefront.cart.items()
        row = self._cart_table().cursor_row
        if not 0 <= row < len(entries):
            return
        self.storefront.remove_from_cart(entries[row].id)
        self.notify("Item removed from cart")

    def action_back_to_categories(self) -> None:
        """Reset the shop listing to every product."""
        self.query_one("#search_input", Input).value = ""
        self.storefront.browse(self.settings.ALL_CATEGORY)
        self.show_home()

    async def send_contact(self) -> None:
        """Submit the contact form without blocking the UI."""
        status = self.query_one("#contact_status", Static)
        fields = {
            key: self.query_one(f"#contact_{key}", Input)
            for key in ("name", "email", "message")
        }
        message = ContactMessage(
            name=fields["name"].value,
            email=fields["email"].value,
            message=fields["message"].value,
        )
        missing = message.missing_fields()
        if missing:
            self.notify(
                f"Please fill in: {', '.join(missing)}",
                severity="warning",
            )
            return

        button = self.query_one("#contact_btn", Button)
        button.disabled = True
        button.label = "Sending..."
        status.update("Sending...")
        try:
            result = await asyncio.to_thread(
                self.contact_client.submit, message
            )
        finally:
            button.disabled = False
            button.label = "Send Message"

        if result == STATUS_SUCCESS:
            status.update("✓ Message sent successfully!")
            for field_input in fields.values():
                field_input.value = ""
        elif result == STATUS_FAILURE:
            status.update("✗ Something went wrong. Please try again.")
