"""
Storefront Price Radar — Table Row Formatting Tests
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from storefront_prices.config import SortDirection
from storefront_prices.engine.table import (
    TableRow,
    build_table_rows,
    format_converted_cost,
    format_cost,
    format_countries,
    product_names,
)
from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.sort_config import SortConfig


class TestFormatting:
    """Cell formatting."""

    def test_cost_two_places(self) -> None:
        assert format_cost(Decimal("4.5")) == "4.50"
        assert format_cost(Decimal("4.5908")) == "4.59"
        assert format_cost(Decimal("2500000.0")) == "2500000.00"

    def test_cost_rounds_half_up(self) -> None:
        assert format_cost(Decimal("0.125")) == "0.13"

    def test_cost_beyond_default_precision(self) -> None:
        """Values with more digits than the default context still render."""
        assert format_cost(Decimal("9" * 27)) == "9" * 27 + ".00"

    def test_countries_sorted(self, make_entry: Callable[..., GroupedEntry]) -> None:
        entry = make_entry(countries={"Germany", "Austria", "France"})
        assert format_countries(entry) == "Austria, France, Germany"

    def test_product_names_sorted(self, make_entry: Callable[..., GroupedEntry]) -> None:
        grouped = {"Pro Pack": [make_entry()], "Coins": [make_entry(product="Coins")]}
        assert product_names(grouped) == ["Coins", "Pro Pack"]


class TestConvertedCell:
    """The converted-cost cell has five states."""

    def test_no_target(self, make_entry: Callable[..., GroupedEntry]) -> None:
        assert format_converted_cost(make_entry(), None, {}) == "--"

    def test_same_currency(self, make_entry: Callable[..., GroupedEntry]) -> None:
        assert format_converted_cost(make_entry(), "USD", {}) == "4.99 USD"

    def test_converted(self, make_entry: Callable[..., GroupedEntry]) -> None:
        rates = {"USD": {"EUR": 0.92}}
        assert format_converted_cost(make_entry(), "EUR", rates) == "4.59 EUR"

    def test_pending(self, make_entry: Callable[..., GroupedEntry]) -> None:
        assert format_converted_cost(make_entry(), "EUR", {}, loading=True) == "..."
        assert format_converted_cost(make_entry(), "EUR", {}) == "..."

    def test_failed(self, make_entry: Callable[..., GroupedEntry]) -> None:
        assert format_converted_cost(make_entry(), "EUR", {}, failed=True) == "Error"

    def test_known_rate_beats_failure_flag(
        self, make_entry: Callable[..., GroupedEntry]
    ) -> None:
        rates = {"USD": {"EUR": 0.92}}
        assert format_converted_cost(make_entry(), "EUR", rates, failed=True) == "4.59 EUR"


class TestBuildTableRows:
    """Sort then format."""

    def test_rows(self, make_entry: Callable[..., GroupedEntry]) -> None:
        entries = [
            make_entry(currency="USD", cost="4.99", countries={"United States"}),
            make_entry(currency="GBP", cost="3.99", countries={"United Kingdom"}),
            make_entry(currency="EUR", cost="4.99", countries={"Germany", "Austria"}),
        ]
        rows = build_table_rows(
            entries,
            SortConfig(key="convertedCost", direction=SortDirection.ASCENDING),
            conversion_currency="EUR",
            rates={"USD": {"EUR": 0.92}},
            failed_currencies=["GBP"],
        )

        assert rows == [
            TableRow("USD", "4.99", "4.59 EUR", "United States"),
            TableRow("EUR", "4.99", "4.99 EUR", "Austria, Germany"),
            TableRow("GBP", "3.99", "Error", "United Kingdom"),
        ]
