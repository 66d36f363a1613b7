"""
Storefront Price Radar — Product Grouping

Collapses per-country scraped records into unique price points.

GroupKey = (product, resolved_currency, normalized_cost). Every record that
maps to the same key is the same price point; its country is folded into
that entry's country set.

Records whose cost cannot be normalized are dropped silently: one bad
listing must not cost the user the whole comparison table.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

import structlog

from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.scraped_record import ScrapedRecord
from storefront_prices.utils.currency import CurrencyResolver
from storefront_prices.utils.price_parser import normalize_price

logger = structlog.get_logger(__name__)


def group_products(
    records: Iterable[ScrapedRecord],
    resolver: CurrencyResolver | None = None,
) -> dict[str, list[GroupedEntry]]:
    """
    Group scraped records into price points, bucketed by product name.

    Args:
        records: Scraped records in any order.
        resolver: Currency resolver; defaults to one built from settings.

    Returns:
        {product_name: [GroupedEntry, ...]}. Products and the entries within
        each product keep first-seen order; entries are not sorted.
    """
    resolver = resolver or CurrencyResolver()
    by_key: dict[tuple[str, str, Decimal], GroupedEntry] = {}
    dropped = 0

    for record in records:
        cost = normalize_price(record.cost)
        if cost.is_nan():
            dropped += 1
            logger.debug(
                "grouping_record_dropped",
                product=record.product,
                cost=record.cost,
                country_code=record.country_code,
                reason="unparseable_cost",
                source="grouping",
            )
            continue

        currency = resolver.resolve(record)
        key = (record.product, currency, cost)
        entry = by_key.get(key)
        if entry is None:
            entry = GroupedEntry(product=record.product, currency=currency, cost=cost)
            by_key[key] = entry
        entry.countries.add(record.country_name)

    grouped: dict[str, list[GroupedEntry]] = {}
    for entry in by_key.values():
        grouped.setdefault(entry.product, []).append(entry)

    logger.debug(
        "products_grouped",
        products=len(grouped),
        price_points=len(by_key),
        dropped=dropped,
        source="grouping",
    )
    return grouped


def keep_highest_price_per_country(
    records: Iterable[ScrapedRecord],
) -> list[ScrapedRecord]:
    """
    Keep only the highest-priced record per (country_code, product).

    Storefronts often list tiered or bundled variants of one purchase under
    the same name; this collapses them to the most expensive listing.

    Ties keep the first record seen. A record whose cost does not normalize
    is only kept when no record for the same key parses.

    Args:
        records: Scraped records in any order.

    Returns:
        At most one record per (country_code, product), in first-seen key order.
    """
    kept: dict[tuple[str, str], tuple[ScrapedRecord, Decimal]] = {}

    for record in records:
        key = (record.country_code, record.product)
        cost = normalize_price(record.cost)
        existing = kept.get(key)

        if existing is None:
            kept[key] = (record, cost)
            continue
        if cost.is_nan():
            continue

        existing_cost = existing[1]
        if existing_cost.is_nan() or cost > existing_cost:
            kept[key] = (record, cost)

    return [record for record, _ in kept.values()]
