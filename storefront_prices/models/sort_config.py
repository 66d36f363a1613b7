"""
SortConfig and the exchange-rate table shape consumed by the sorter.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Union

from pydantic import BaseModel, ConfigDict

from storefront_prices.config import SortDirection, settings

# {base_currency: {target_currency: rate}}, as returned by open.er-api.com
ExchangeRateTable = Mapping[str, Mapping[str, Union[Decimal, float, int]]]


class SortConfig(BaseModel):
    """
    Column and direction for a table sort.

    `key` is a plain string on purpose: unknown keys are accepted and
    produce a no-op sort rather than a validation error.
    """

    model_config = ConfigDict(frozen=True)

    key: str = settings.DEFAULT_SORT_KEY
    direction: SortDirection = settings.DEFAULT_SORT_DIRECTION

    @property
    def ascending(self) -> bool:
        return self.direction == SortDirection.ASCENDING

    def toggled(self, key: str) -> SortConfig:
        """
        Config for a click on column `key`.

        Clicking the current ascending column flips it to descending;
        any other click sorts `key` ascending.
        """
        if self.key == key and self.ascending:
            return SortConfig(key=key, direction=SortDirection.DESCENDING)
        return SortConfig(key=key, direction=SortDirection.ASCENDING)
