"""
Storefront Price Radar — Table Sorting

Orders grouped price points by a table column.

Sort keys:
- product, currency: case-insensitive text
- cost: the entry's own-currency cost
- countries: number of countries sharing the price point
- convertedCost: cost in the selected conversion currency

Entries with no converted cost (no target selected, or no rate for their
currency) are "unrankable" and always land at the tail of the list,
whatever the direction. Python's sort is stable, including with
reverse=True, so equal keys keep their prior relative order.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Sequence

import structlog

from storefront_prices.config import SortKey
from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.sort_config import ExchangeRateTable, SortConfig
from storefront_prices.utils.forex import convert_cost

logger = structlog.get_logger(__name__)

_INFINITY = Decimal("Infinity")


def converted_cost(
    entry: GroupedEntry,
    conversion_currency: str | None,
    rates: ExchangeRateTable,
) -> Decimal | None:
    """Entry cost in conversion_currency, or None if it cannot be computed."""
    if not conversion_currency:
        return None
    return convert_cost(entry.cost, entry.currency, conversion_currency, rates)


def _sort_key_func(
    key: str,
    ascending: bool,
    conversion_currency: str | None,
    rates: ExchangeRateTable,
) -> Callable[[GroupedEntry], Any] | None:
    if key in (SortKey.PRODUCT.value, SortKey.CURRENCY.value):
        return lambda entry: getattr(entry, key).lower()
    if key == SortKey.COST.value:
        return lambda entry: entry.cost
    if key == SortKey.COUNTRIES.value:
        return lambda entry: len(entry.countries)
    if key == SortKey.CONVERTED_COST.value:
        unrankable = _INFINITY if ascending else -_INFINITY

        def _converted(entry: GroupedEntry) -> Decimal:
            value = converted_cost(entry, conversion_currency, rates)
            return unrankable if value is None else value

        return _converted
    return None


def sort_grouped_products(
    entries: Sequence[GroupedEntry],
    sort_config: SortConfig,
    conversion_currency: str | None = None,
    rates: ExchangeRateTable | None = None,
) -> list[GroupedEntry]:
    """
    Return a sorted copy of `entries`; the input sequence is untouched.

    Args:
        entries: Price points of one product.
        sort_config: Column and direction.
        conversion_currency: Target currency for convertedCost, if any.
        rates: {base: {target: rate}} table; may be partial or empty.

    Returns:
        A new list. Unknown sort keys return the entries in their
        original order.
    """
    rates = rates or {}
    key_func = _sort_key_func(
        sort_config.key, sort_config.ascending, conversion_currency, rates
    )
    if key_func is None:
        logger.debug("sort_key_unknown", key=sort_config.key, source="sorting")
        return list(entries)

    return sorted(entries, key=key_func, reverse=not sort_config.ascending)
