"""
Storefront Price Radar — Configuration & Constants

Every lookup table and tunable used by the pricing pipeline lives here.
No hardcoded tables in business logic.

Usage:
    from storefront_prices.config import settings
"""

from __future__ import annotations

from enum import Enum

from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SortDirection(str, Enum):
    """Table sort direction."""
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortKey(str, Enum):
    """Sortable table columns."""
    PRODUCT = "product"
    CURRENCY = "currency"
    COST = "cost"
    COUNTRIES = "countries"
    CONVERTED_COST = "convertedCost"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for Storefront Price Radar.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    LOG_LEVEL: str = "INFO"

    # -----------------------------------------------------------------------
    # Exchange rates (open.er-api.com, keyless)
    # GET {EXCHANGE_RATE_API_URL}/latest/{BASE} -> {"rates": {...}}
    # -----------------------------------------------------------------------
    EXCHANGE_RATE_API_URL: str = "https://open.er-api.com/v6"
    EXCHANGE_RATE_TIMEOUT_SECONDS: float = 15.0

    # -----------------------------------------------------------------------
    # Currency symbols that identify exactly one currency.
    # Matched longest-first, so "CA$" wins over "A$" and "US$" over "S$".
    # A bare "$" and "¥" are ambiguous and must never be listed.
    # -----------------------------------------------------------------------
    CURRENCY_SYMBOL_MAP: dict[str, str] = {
        "US$": "USD",
        "CA$": "CAD",
        "A$": "AUD",
        "NZ$": "NZD",
        "HK$": "HKD",
        "NT$": "TWD",
        "MX$": "MXN",
        "S$": "SGD",
        "R$": "BRL",
        "€": "EUR",
        "£": "GBP",
        "₹": "INR",
        "₩": "KRW",
        "₺": "TRY",
        "₽": "RUB",
        "₫": "VND",
        "₱": "PHP",
        "₪": "ILS",
        "฿": "THB",
        "₦": "NGN",
        "₸": "KZT",
        "zł": "PLN",
        "Rp": "IDR",
        "RM": "MYR",
    }

    # -----------------------------------------------------------------------
    # Indonesian magnitude words ("Rp 2,5juta"). Checked in insertion order.
    # -----------------------------------------------------------------------
    MAGNITUDE_WORDS: dict[str, int] = {
        "juta": 1_000_000,
        "ribu": 1_000,
    }

    # -----------------------------------------------------------------------
    # Table presentation
    # -----------------------------------------------------------------------
    DEFAULT_SORT_KEY: str = SortKey.CONVERTED_COST.value
    DEFAULT_SORT_DIRECTION: SortDirection = SortDirection.ASCENDING
    PRICE_DISPLAY_PLACES: int = 2


# Singleton instance
settings = Settings()
