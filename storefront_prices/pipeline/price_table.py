"""
Storefront Price Radar — Price Table Pipeline

Scraped records -> (optional highest-price pre-filter) -> grouped price points.

The scraping fan-out hands over per-country batches as they complete; this
module is called once per completed batch set and does no I/O itself.
"""

from __future__ import annotations

from typing import Iterable, Mapping

import structlog

from storefront_prices.engine.grouping import group_products, keep_highest_price_per_country
from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.scraped_record import ScrapedRecord
from storefront_prices.utils.countries import build_scraped_records
from storefront_prices.utils.currency import CurrencyResolver

logger = structlog.get_logger(__name__)


def records_from_storefronts(
    scraped: Mapping[str, Iterable[Mapping[str, str]]],
) -> list[ScrapedRecord]:
    """
    Flatten {country_code: [{product, cost}, ...]} into ScrapedRecords.

    Unknown country codes are skipped with a warning so one bad batch does
    not drop the others.
    """
    records: list[ScrapedRecord] = []
    for country_code, products in scraped.items():
        try:
            records.extend(build_scraped_records(country_code, products))
        except ValueError as e:
            logger.warning(
                "storefront_batch_skipped",
                country_code=country_code,
                error=str(e),
                source="price_table",
            )
    return records


def build_price_table(
    records: Iterable[ScrapedRecord],
    keep_highest: bool = False,
    resolver: CurrencyResolver | None = None,
) -> dict[str, list[GroupedEntry]]:
    """
    Build the grouped price table from scraped records.

    Args:
        records: Scraped records from every storefront.
        keep_highest: Collapse duplicate listings per (country, product)
            to the highest price before grouping.
        resolver: Currency resolver; defaults to one built from settings.

    Returns:
        {product_name: [GroupedEntry, ...]} as produced by group_products.
    """
    records = list(records)
    if keep_highest:
        before = len(records)
        records = keep_highest_price_per_country(records)
        logger.debug(
            "duplicate_listings_collapsed",
            before=before,
            after=len(records),
            source="price_table",
        )

    grouped = group_products(records, resolver=resolver)
    logger.info(
        "price_table_built",
        records=len(records),
        products=len(grouped),
        price_points=sum(len(entries) for entries in grouped.values()),
        source="price_table",
    )
    return grouped
