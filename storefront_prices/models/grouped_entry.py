"""
GroupedEntry — one unique (product, currency, cost) price point.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class GroupedEntry(BaseModel):
    """A price point and the set of countries that share it."""

    product: str
    currency: str
    cost: Decimal
    countries: set[str] = Field(default_factory=set)

    @property
    def group_key(self) -> tuple[str, str, Decimal]:
        return (self.product, self.currency, self.cost)
