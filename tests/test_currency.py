"""
Storefront Price Radar — Currency Resolution Tests

Hierarchy: unambiguous symbol > bare-"$" override > country default.
"""

from __future__ import annotations

from typing import Callable

from storefront_prices.models.scraped_record import ScrapedRecord
from storefront_prices.utils.currency import (
    CurrencyResolver,
    get_currency_from_symbol,
    resolve_currency,
)


class TestCurrencyFromSymbol:
    """Symbol table lookups."""

    def test_euro_and_pound(self) -> None:
        assert get_currency_from_symbol("€5.399,99") == "EUR"
        assert get_currency_from_symbol("£4.99") == "GBP"

    def test_prefixed_dollars(self) -> None:
        assert get_currency_from_symbol("US$4.99") == "USD"
        assert get_currency_from_symbol("A$7.99") == "AUD"

    def test_longest_symbol_wins(self) -> None:
        """"CA$" contains "A$"; the longer symbol must be matched first."""
        assert get_currency_from_symbol("CA$6.99") == "CAD"
        assert get_currency_from_symbol("NZ$8.99") == "NZD"

    def test_bare_dollar_is_ambiguous(self) -> None:
        assert get_currency_from_symbol("$4.99") is None

    def test_no_symbol(self) -> None:
        assert get_currency_from_symbol("4,99") is None


class TestResolveCurrency:
    """First matching tier wins."""

    def test_symbol_beats_override_and_default(
        self, make_record: Callable[..., ScrapedRecord]
    ) -> None:
        record = make_record(
            cost="US$4.99",
            country_code="ca",
            country_name="Canada",
            default_currency="CAD",
            pricing_currency_override="CAD",
        )
        assert resolve_currency(record) == "USD"

    def test_bare_dollar_uses_override(
        self, make_record: Callable[..., ScrapedRecord]
    ) -> None:
        record = make_record(
            cost="$4.99",
            country_code="ar",
            country_name="Argentina",
            default_currency="ARS",
            pricing_currency_override="USD",
        )
        assert resolve_currency(record) == "USD"

    def test_bare_dollar_without_override_uses_default(
        self, make_record: Callable[..., ScrapedRecord]
    ) -> None:
        record = make_record(
            cost="$6.99",
            country_code="ca",
            country_name="Canada",
            default_currency="CAD",
        )
        assert resolve_currency(record) == "CAD"

    def test_override_ignored_without_dollar(
        self, make_record: Callable[..., ScrapedRecord]
    ) -> None:
        """An override only disambiguates a "$"; plain digits use the default."""
        record = make_record(
            cost="1.099,00",
            country_code="ar",
            country_name="Argentina",
            default_currency="ARS",
            pricing_currency_override="USD",
        )
        assert resolve_currency(record) == "ARS"


class TestInjectedSymbolTable:
    """The symbol table is configuration."""

    def test_custom_table(self, make_record: Callable[..., ScrapedRecord]) -> None:
        resolver = CurrencyResolver(symbol_map={"kr": "SEK"})
        record = make_record(cost="49 kr", default_currency="NOK")
        assert resolver.resolve(record) == "SEK"

    def test_empty_table_falls_through(
        self, make_record: Callable[..., ScrapedRecord]
    ) -> None:
        resolver = CurrencyResolver(symbol_map={})
        record = make_record(cost="€4.99", default_currency="EUR")
        assert resolver.currency_from_symbol("€4.99") is None
        assert resolver.resolve(record) == "EUR"
