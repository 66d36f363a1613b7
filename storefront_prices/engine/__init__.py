from storefront_prices.engine.grouping import group_products, keep_highest_price_per_country
from storefront_prices.engine.sorting import converted_cost, sort_grouped_products
from storefront_prices.engine.table import (
    TableRow,
    build_table_rows,
    format_converted_cost,
    product_names,
)

__all__ = [
    "TableRow",
    "build_table_rows",
    "converted_cost",
    "format_converted_cost",
    "group_products",
    "keep_highest_price_per_country",
    "product_names",
    "sort_grouped_products",
]
