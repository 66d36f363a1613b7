from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.scraped_record import ScrapedRecord
from storefront_prices.models.sort_config import ExchangeRateTable, SortConfig

__all__ = [
    "ExchangeRateTable",
    "GroupedEntry",
    "ScrapedRecord",
    "SortConfig",
]
