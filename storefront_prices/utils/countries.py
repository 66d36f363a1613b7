"""
Storefront Price Radar — Storefront Country Table

App Store storefront country codes with their display name and official
currency. Some storefronts list prices with a bare "$" in a dollar currency
other than their official one; those carry a pricing currency that the
CurrencyResolver uses as the bare-"$" override.
"""

from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple

import structlog

from storefront_prices.models.scraped_record import ScrapedRecord

logger = structlog.get_logger(__name__)


class StorefrontCountry(NamedTuple):
    """Static facts about one storefront."""
    name: str
    currency: str
    pricing_currency: str | None = None


# ---------------------------------------------------------------------------
# Storefronts
# ---------------------------------------------------------------------------

COUNTRY_DATA: dict[str, StorefrontCountry] = {
    "ae": StorefrontCountry("United Arab Emirates", "AED"),
    "ar": StorefrontCountry("Argentina", "ARS", pricing_currency="USD"),
    "at": StorefrontCountry("Austria", "EUR"),
    "au": StorefrontCountry("Australia", "AUD"),
    "be": StorefrontCountry("Belgium", "EUR"),
    "br": StorefrontCountry("Brazil", "BRL"),
    "ca": StorefrontCountry("Canada", "CAD"),
    "ch": StorefrontCountry("Switzerland", "CHF"),
    "cl": StorefrontCountry("Chile", "CLP"),
    "cn": StorefrontCountry("China", "CNY"),
    "co": StorefrontCountry("Colombia", "COP"),
    "cz": StorefrontCountry("Czechia", "CZK"),
    "de": StorefrontCountry("Germany", "EUR"),
    "dk": StorefrontCountry("Denmark", "DKK"),
    "eg": StorefrontCountry("Egypt", "EGP"),
    "es": StorefrontCountry("Spain", "EUR"),
    "fi": StorefrontCountry("Finland", "EUR"),
    "fr": StorefrontCountry("France", "EUR"),
    "gb": StorefrontCountry("United Kingdom", "GBP"),
    "hk": StorefrontCountry("Hong Kong", "HKD"),
    "hu": StorefrontCountry("Hungary", "HUF"),
    "id": StorefrontCountry("Indonesia", "IDR"),
    "ie": StorefrontCountry("Ireland", "EUR"),
    "il": StorefrontCountry("Israel", "ILS"),
    "in": StorefrontCountry("India", "INR"),
    "it": StorefrontCountry("Italy", "EUR"),
    "jp": StorefrontCountry("Japan", "JPY"),
    "kr": StorefrontCountry("South Korea", "KRW"),
    "kz": StorefrontCountry("Kazakhstan", "KZT"),
    "mx": StorefrontCountry("Mexico", "MXN"),
    "my": StorefrontCountry("Malaysia", "MYR"),
    "ng": StorefrontCountry("Nigeria", "NGN"),
    "nl": StorefrontCountry("Netherlands", "EUR"),
    "no": StorefrontCountry("Norway", "NOK"),
    "nz": StorefrontCountry("New Zealand", "NZD"),
    "pe": StorefrontCountry("Peru", "PEN"),
    "ph": StorefrontCountry("Philippines", "PHP"),
    "pk": StorefrontCountry("Pakistan", "PKR"),
    "pl": StorefrontCountry("Poland", "PLN"),
    "pt": StorefrontCountry("Portugal", "EUR"),
    "qa": StorefrontCountry("Qatar", "QAR"),
    "ro": StorefrontCountry("Romania", "RON"),
    "ru": StorefrontCountry("Russia", "RUB"),
    "sa": StorefrontCountry("Saudi Arabia", "SAR"),
    "se": StorefrontCountry("Sweden", "SEK"),
    "sg": StorefrontCountry("Singapore", "SGD"),
    "th": StorefrontCountry("Thailand", "THB"),
    "tr": StorefrontCountry("Turkey", "TRY"),
    "tw": StorefrontCountry("Taiwan", "TWD"),
    "tz": StorefrontCountry("Tanzania", "TZS"),
    "ua": StorefrontCountry("Ukraine", "UAH", pricing_currency="USD"),
    "us": StorefrontCountry("United States", "USD"),
    "vn": StorefrontCountry("Vietnam", "VND"),
    "za": StorefrontCountry("South Africa", "ZAR"),
}


def get_country(country_code: str) -> StorefrontCountry:
    """
    Look up a storefront by country code (case-insensitive).

    Raises:
        ValueError: If the code is not a known storefront.
    """
    try:
        return COUNTRY_DATA[country_code.lower()]
    except KeyError:
        raise ValueError(f"Unknown storefront country code '{country_code}'") from None


def build_scraped_records(
    country_code: str,
    products: Iterable[Mapping[str, str]],
) -> list[ScrapedRecord]:
    """
    Enrich raw {product, cost} pairs from one storefront with country info.

    Args:
        country_code: Storefront code the products were scraped from.
        products: Scraper output, each with "product" and "cost" keys.

    Returns:
        One ScrapedRecord per product, in input order.

    Raises:
        ValueError: If country_code is not a known storefront.
    """
    country = get_country(country_code)
    records = [
        ScrapedRecord(
            product=item["product"],
            cost=item["cost"],
            country_code=country_code.lower(),
            country_name=country.name,
            default_currency=country.currency,
            pricing_currency_override=country.pricing_currency,
        )
        for item in products
    ]
    logger.debug(
        "scraped_records_built",
        country_code=country_code,
        count=len(records),
        source="countries",
    )
    return records


def available_currencies() -> list[str]:
    """Sorted unique currencies offered as conversion targets."""
    currencies: set[str] = set()
    for country in COUNTRY_DATA.values():
        currencies.add(country.currency)
        if country.pricing_currency:
            currencies.add(country.pricing_currency)
    return sorted(currencies)
