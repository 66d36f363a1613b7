"""
Storefront Price Radar — Currency Conversion

Converts a grouped cost into a target currency using a caller-supplied
exchange-rate table shaped {base: {target: rate}}.

All money values use Decimal. Rates arriving as float (straight from a
JSON response) are converted through str() so no binary rounding leaks in.
A missing or zero rate is not an error: conversion returns None and the
caller decides how to rank or render the entry.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Mapping

import structlog

from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.sort_config import ExchangeRateTable

logger = structlog.get_logger(__name__)


def lookup_rate(
    rates: ExchangeRateTable,
    from_currency: str,
    to_currency: str,
) -> Decimal | None:
    """
    Return rates[from_currency][to_currency] as a Decimal.

    Returns None when either level is missing or the rate is zero,
    NaN, infinite or not a number at all.
    """
    rate = rates.get(from_currency, {}).get(to_currency)
    if rate is None:
        return None
    try:
        value = Decimal(str(rate))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or value.is_zero():
        return None
    return value


def convert_cost(
    cost: Decimal,
    from_currency: str,
    to_currency: str,
    rates: ExchangeRateTable,
) -> Decimal | None:
    """
    Convert `cost` from one currency to another.

    Args:
        cost: Amount in from_currency.
        from_currency: Currency of `cost`.
        to_currency: Target currency.
        rates: Exchange-rate table, never mutated.

    Returns:
        The converted amount, `cost` itself when the currencies match,
        or None when no usable rate is available.
    """
    if from_currency == to_currency:
        return cost

    rate = lookup_rate(rates, from_currency, to_currency)
    if rate is None:
        logger.debug(
            "forex_rate_missing",
            from_currency=from_currency,
            to_currency=to_currency,
            source="forex",
        )
        return None
    return cost * rate


def currencies_needing_rates(
    entries: Iterable[GroupedEntry],
    conversion_currency: str | None,
    rates: Mapping[str, object],
) -> list[str]:
    """
    Base currencies that still have to be fetched to convert `entries`.

    Currencies equal to the target, or already present as a base in
    `rates`, are skipped.

    Returns:
        Sorted, de-duplicated currency codes; empty when no target is set.
    """
    if not conversion_currency:
        return []
    needed = {
        entry.currency
        for entry in entries
        if entry.currency != conversion_currency and entry.currency not in rates
    }
    return sorted(needed)
