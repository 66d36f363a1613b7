"""
Storefront Price Radar — Currency Resolution

Decides which currency a scraped price is actually denominated in.

Resolution hierarchy (first match wins):
1. Unambiguous symbol in the cost text ("€", "£", "US$", "CA$", ...)
2. Bare "$" in the cost text AND the record carries a pricing override
3. The storefront country's default currency

A bare "$" alone says nothing about which dollar is meant, so a per-record
override beats the country default but never beats an explicit symbol.
"""

from __future__ import annotations

from typing import Mapping

import structlog

from storefront_prices.config import settings
from storefront_prices.models.scraped_record import ScrapedRecord

logger = structlog.get_logger(__name__)

_AMBIGUOUS_DOLLAR = "$"


class CurrencyResolver:
    """
    Resolves the effective currency of a ScrapedRecord.

    Usage:
        resolver = CurrencyResolver()
        currency = resolver.resolve(record)

    The symbol table is injected so new storefront symbols can be added
    through configuration without touching the resolution logic.
    """

    def __init__(self, symbol_map: Mapping[str, str] | None = None):
        table = settings.CURRENCY_SYMBOL_MAP if symbol_map is None else symbol_map
        # Longest first: "CA$" must be tried before "A$"
        self._symbols: list[tuple[str, str]] = sorted(
            table.items(), key=lambda item: len(item[0]), reverse=True
        )

    def currency_from_symbol(self, cost: str) -> str | None:
        """Return the currency of the first unambiguous symbol found in `cost`."""
        for symbol, currency in self._symbols:
            if symbol in cost:
                return currency
        return None

    def resolve(self, record: ScrapedRecord) -> str:
        """
        Resolve the effective currency of a record.

        Args:
            record: The scraped listing.

        Returns:
            An ISO currency code.
        """
        from_symbol = self.currency_from_symbol(record.cost)
        if from_symbol:
            currency, rule = from_symbol, "symbol"
        elif _AMBIGUOUS_DOLLAR in record.cost and record.pricing_currency_override:
            currency, rule = record.pricing_currency_override, "dollar_override"
        else:
            currency, rule = record.default_currency, "country_default"

        logger.debug(
            "currency_resolved",
            cost=record.cost,
            country_code=record.country_code,
            currency=currency,
            rule=rule,
            source="currency",
        )
        return currency


_default_resolver: CurrencyResolver | None = None


def _get_default_resolver() -> CurrencyResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = CurrencyResolver()
    return _default_resolver


def get_currency_from_symbol(cost: str) -> str | None:
    """Currency for an unambiguous symbol in `cost`, using the configured table."""
    return _get_default_resolver().currency_from_symbol(cost)


def resolve_currency(record: ScrapedRecord) -> str:
    """Resolve a record's currency using the configured symbol table."""
    return _get_default_resolver().resolve(record)
