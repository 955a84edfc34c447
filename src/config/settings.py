# src/config/settings.py

"""Central configuration for the storefront."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront."""

    # --- Catalog ---
    ALL_CATEGORY: str = "All"
    # Display order of the category menu ("All" is appended last)
    CATEGORIES: list[str] = [
        "Kitchen",
        "Electronics",
        "Sports",
        "Fashion",
        "Shoes",
        "Beauty",
    ]

    # --- Product cards ---
    CURRENCY_LABEL: str = "RS"
    BEST_SELLER_RATING: float = 4.5     # Rating at which the badge shows
    HOME_LIMIT: int = 7                 # Products listed on the home page
    LIST_PRICE_MARKUP: float = 1.2      # Struck-through "original" price

    # --- Search handoff ---
    HANDOFF_TERM_KEY: str = "searchTerm"
    HANDOFF_RESULTS_KEY: str = "searchResults"

    # --- Contact form ---
    CONTACT_ENDPOINT: str = os.getenv(
        "STOREFRONT_CONTACT_ENDPOINT",
        "https://formspree.io/f/mkovqgra",
    )
    CONTACT_TIMEOUT: int = 15           # Seconds before the POST times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING")

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = BASE_DIR / "src" / "data" / "catalog.json"
    LOGS_DIR: Path = BASE_DIR / "logs"
