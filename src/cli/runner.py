# src/cli/runner.py

"""Headless CLI: search or browse the catalog without the TUI."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.filters.catalog_query import CatalogQuery
from src.models.product import Product
from src.services.storefront import Storefront
from src.ui.formatting import format_price, is_best_seller, star_bar

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [p.to_dict() for p in products]


def _print_table(title: str, products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Brand", style="magenta")
    table.add_column("Category")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")

    for p in products:
        name = p.name
        if is_best_seller(p):
            name = f"{name} [bold yellow](Best Seller)[/bold yellow]"
        table.add_row(
            str(p.id),
            name,
            p.brand,
            p.category,
            format_price(p.price),
            f"{star_bar(p.rating)} ({p.rating})",
        )

    Console().print(table)


def list_categories(storefront: Storefront | None = None) -> int:
    """Print the category menu, one per line."""
    storefront = storefront or Storefront()
    for name in storefront.categories():
        sys.stdout.write(f"{name}\n")
    return 0


def cli_search(
    query: str | None,
    category: str | None,
    output_format: str,
    storefront: Storefront | None = None,
) -> int:
    """Run a headless search/browse and return an exit code (0=ok, 1=fail)."""
    storefront = storefront or Storefront()

    if category is not None and category not in storefront.categories():
        valid = ", ".join(storefront.categories())
        _err.print(f"[red]Unknown category: {category}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        return 1

    if query is not None and not CatalogQuery.is_valid_term(query):
        _err.print("[red]Please enter a search term[/red]")
        return 1

    if query is not None:
        view = storefront.open_shop(search=query)
        products = view.products
        if category is not None:
            products = CatalogQuery.filter_by_category(
                products, category
            )
        title = view.title
    else:
        view = storefront.browse(category or Settings.ALL_CATEGORY)
        products = view.products
        title = view.title

    if not products:
        _err.print("[yellow]No matching products found.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(products)} products found[/green]")
    logger.info("CLI listed %d products (%s)", len(products), title)

    if output_format == "table":
        _print_table(title, products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
