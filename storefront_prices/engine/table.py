"""
Storefront Price Radar — Table Rows

Formats sorted price points into render-ready rows for the comparison table.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Mapping, NamedTuple, Sequence

from storefront_prices.config import settings
from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.sort_config import ExchangeRateTable, SortConfig
from storefront_prices.engine.sorting import converted_cost, sort_grouped_products

NO_CONVERSION = "--"
PENDING = "..."
FAILED = "Error"


class TableRow(NamedTuple):
    """One rendered row of the comparison table."""
    currency: str
    cost: str
    converted_cost: str
    countries: str


def product_names(grouped: Mapping[str, Sequence[GroupedEntry]]) -> list[str]:
    """Product names in display order (alphabetical)."""
    return sorted(grouped)


def format_cost(cost: Decimal) -> str:
    places = Decimal(1).scaleb(-settings.PRICE_DISPLAY_PLACES)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the display places
        ctx.prec = max(ctx.prec, cost.adjusted() + settings.PRICE_DISPLAY_PLACES + 2)
        return str(cost.quantize(places, rounding=ROUND_HALF_UP))


def format_countries(entry: GroupedEntry) -> str:
    return ", ".join(sorted(entry.countries))


def format_converted_cost(
    entry: GroupedEntry,
    conversion_currency: str | None,
    rates: ExchangeRateTable,
    loading: bool = False,
    failed: bool = False,
) -> str:
    """
    Render the converted-cost cell.

    Args:
        entry: The price point.
        conversion_currency: Selected target currency, if any.
        rates: Rates fetched so far.
        loading: A rate fetch is still in flight.
        failed: The rate fetch for this entry's currency failed.

    Returns:
        "--" with no target, "<amount> <CUR>" when convertible, "Error" when
        the fetch failed, otherwise "..." while the rate is pending.
    """
    if not conversion_currency:
        return NO_CONVERSION

    value = converted_cost(entry, conversion_currency, rates)
    if value is not None:
        return f"{format_cost(value)} {conversion_currency}"
    if failed and not loading:
        return FAILED
    return PENDING


def build_table_rows(
    entries: Sequence[GroupedEntry],
    sort_config: SortConfig,
    conversion_currency: str | None = None,
    rates: ExchangeRateTable | None = None,
    loading: bool = False,
    failed_currencies: Sequence[str] = (),
) -> list[TableRow]:
    """Sort one product's price points and format them as table rows."""
    rates = rates or {}
    rows = []
    for entry in sort_grouped_products(entries, sort_config, conversion_currency, rates):
        rows.append(
            TableRow(
                currency=entry.currency,
                cost=format_cost(entry.cost),
                converted_cost=format_converted_cost(
                    entry,
                    conversion_currency,
                    rates,
                    loading=loading,
                    failed=entry.currency in failed_currencies,
                ),
                countries=format_countries(entry),
            )
        )
    return rows
