# main.py

"""Entry point for the storefront (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    valid_categories = ", ".join(
        [*Settings.CATEGORIES, Settings.ALL_CATEGORY]
    )

    parser = argparse.ArgumentParser(
        prog="storefront",
        description="S-Hive storefront: browse, search and shop.",
        epilog=f"Categories: {valid_categories}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search term. Omit (with no --category) to launch the TUI.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Restrict the listing to one category.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        default=False,
        dest="list_categories",
        help="List the category menu and exit.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search or category listing and exit."""
    from src.cli.runner import cli_search

    exit_code = cli_search(
        query=args.query,
        category=args.category,
        output_format=args.output_format,
    )
    sys.exit(exit_code)


def _run_list_categories() -> None:
    from src.cli.runner import list_categories

    sys.exit(list_categories())


def main() -> None:
    """Route to TUI (no args) or headless CLI (query/category provided)."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.list_categories:
        _run_list_categories()
    elif args.query is None and args.category is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
