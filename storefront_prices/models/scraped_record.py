"""
ScrapedRecord — one (country, listed product) observation from a storefront page.

Produced by the scraping collaborator; immutable once created.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScrapedRecord(BaseModel):
    """A raw storefront listing enriched with its country info."""

    model_config = ConfigDict(frozen=True)

    product: str = Field(..., description="Product display name as listed")
    cost: str = Field(..., description="Raw price text, e.g. '€5.399,99'")
    country_code: str = Field(..., description="Storefront country code, e.g. 'us'")
    country_name: str = Field(..., description="Storefront country display name")
    default_currency: str = Field(..., description="Country's official currency code")
    pricing_currency_override: str | None = Field(
        default=None,
        description="Currency to use when the cost shows a bare '$'",
    )
