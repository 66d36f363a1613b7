"""
Storefront Price Radar — Shared pytest Fixtures

Provides common fixtures for all test modules:
- ScrapedRecord factory
- Grouped entry factory
- A small multi-country scrape of one app
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.scraped_record import ScrapedRecord


@pytest.fixture
def make_record() -> Callable[..., ScrapedRecord]:
    """Factory for ScrapedRecord with US defaults."""

    def _make(
        product: str = "Pro Pack",
        cost: str = "$4.99",
        country_code: str = "us",
        country_name: str = "United States",
        default_currency: str = "USD",
        pricing_currency_override: str | None = None,
    ) -> ScrapedRecord:
        return ScrapedRecord(
            product=product,
            cost=cost,
            country_code=country_code,
            country_name=country_name,
            default_currency=default_currency,
            pricing_currency_override=pricing_currency_override,
        )

    return _make


@pytest.fixture
def make_entry() -> Callable[..., GroupedEntry]:
    """Factory for GroupedEntry."""

    def _make(
        currency: str = "USD",
        cost: str = "4.99",
        countries: set[str] | None = None,
        product: str = "Pro Pack",
    ) -> GroupedEntry:
        return GroupedEntry(
            product=product,
            currency=currency,
            cost=Decimal(cost),
            countries=countries if countries is not None else {"United States"},
        )

    return _make


@pytest.fixture
def multi_country_records(make_record: Callable[..., ScrapedRecord]) -> list[ScrapedRecord]:
    """One app scraped from six storefronts, including an unparseable price."""
    return [
        make_record(product="Pro Pack", cost="$4.99"),
        make_record(product="Lifetime", cost="$49.99"),
        make_record(
            product="Pro Pack", cost="4,99 €",
            country_code="de", country_name="Germany", default_currency="EUR",
        ),
        make_record(
            product="Pro Pack", cost="4,99 €",
            country_code="fr", country_name="France", default_currency="EUR",
        ),
        make_record(
            product="Pro Pack", cost="£4.99",
            country_code="gb", country_name="United Kingdom", default_currency="GBP",
        ),
        make_record(
            product="Pro Pack", cost="Rp 75ribu",
            country_code="id", country_name="Indonesia", default_currency="IDR",
        ),
        make_record(
            product="Lifetime", cost="Free",
            country_code="jp", country_name="Japan", default_currency="JPY",
        ),
    ]
