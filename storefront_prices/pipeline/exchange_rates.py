"""
Storefront Price Radar — Exchange Rate API Client

Fetches latest rates from open.er-api.com (keyless):

    GET {EXCHANGE_RATE_API_URL}/latest/{BASE}
    -> {"result": "success", "base_code": "EUR", "rates": {"USD": 1.08, ...}}

Only the base currencies the current table is missing are fetched, all at
once. A failure for one base is logged and reported back; the rest of the
table is still returned so the sorter can rank what it can.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, NamedTuple

import httpx
import structlog
from pydantic import BaseModel, Field, field_validator

from storefront_prices.config import settings
from storefront_prices.models.grouped_entry import GroupedEntry
from storefront_prices.models.sort_config import ExchangeRateTable
from storefront_prices.utils.forex import currencies_needing_rates

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Pydantic Response Models
# ---------------------------------------------------------------------------


class LatestRatesResponse(BaseModel):
    """Response from the /latest/{base} endpoint."""

    result: str = Field(default="success")
    base_code: str | None = Field(default=None)
    rates: dict[str, Decimal] = Field(default_factory=dict)

    @field_validator("rates", mode="before")
    @classmethod
    def parse_rates(cls, v: Any) -> dict[str, Decimal]:
        """Convert rates to Decimal via str(); drop values that are not numbers."""
        if not isinstance(v, dict):
            return {}
        parsed: dict[str, Decimal] = {}
        for code, rate in v.items():
            try:
                parsed[code] = Decimal(str(rate))
            except (InvalidOperation, ValueError):
                continue
        return parsed


class RatesFetchResult(NamedTuple):
    """Merged rate table plus the base currencies that could not be fetched."""
    rates: dict[str, dict[str, Any]]
    failed: list[str]


# ---------------------------------------------------------------------------
# API Client
# ---------------------------------------------------------------------------


class ExchangeRateClient:
    """
    Async client for the open.er-api.com latest-rates endpoint.

    Usage:
        async with ExchangeRateClient() as client:
            result = await client.fetch_missing_rates(entries, "EUR", rates)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url or settings.EXCHANGE_RATE_API_URL
        self._timeout = timeout or settings.EXCHANGE_RATE_TIMEOUT_SECONDS
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> ExchangeRateClient:
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    async def fetch_rates(self, base_currency: str) -> dict[str, Decimal]:
        """
        Fetch every quotable rate for one base currency.

        Args:
            base_currency: ISO code, e.g. "EUR".

        Returns:
            {target_currency: rate}.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses.
            ValueError: If the API reports an error result.
        """
        assert self._client is not None, "Client not initialized. Use 'async with'."

        response = await self._client.get(f"/latest/{base_currency}")
        response.raise_for_status()
        payload = LatestRatesResponse.model_validate(response.json())

        if payload.result != "success":
            raise ValueError(
                f"Exchange rate API returned '{payload.result}' for {base_currency}"
            )

        logger.info(
            "exchange_rates_fetched",
            base_currency=base_currency,
            targets=len(payload.rates),
            source="exchange_rates",
        )
        return payload.rates

    async def fetch_missing_rates(
        self,
        entries: Iterable[GroupedEntry],
        conversion_currency: str | None,
        rates: ExchangeRateTable,
    ) -> RatesFetchResult:
        """
        Fetch rates for every base currency in `entries` not yet in `rates`.

        The input table is not mutated; a merged copy is returned.

        Args:
            entries: All grouped price points currently displayed.
            conversion_currency: Selected target currency, if any.
            rates: Rates already known.

        Returns:
            RatesFetchResult with the merged table and failed base currencies.
        """
        merged: dict[str, dict[str, Any]] = {base: dict(targets) for base, targets in rates.items()}
        to_fetch = currencies_needing_rates(entries, conversion_currency, rates)
        if not to_fetch:
            return RatesFetchResult(rates=merged, failed=[])

        results = await asyncio.gather(
            *(self.fetch_rates(base) for base in to_fetch),
            return_exceptions=True,
        )

        failed: list[str] = []
        for base, result in zip(to_fetch, results):
            if isinstance(result, BaseException):
                if not isinstance(result, (httpx.HTTPError, ValueError)):
                    raise result
                failed.append(base)
                logger.warning(
                    "exchange_rates_fetch_failed",
                    base_currency=base,
                    error=str(result),
                    source="exchange_rates",
                )
                continue
            merged[base] = dict(result)

        logger.info(
            "exchange_rates_merged",
            requested=len(to_fetch),
            failed=len(failed),
            conversion_currency=conversion_currency,
            source="exchange_rates",
        )
        return RatesFetchResult(rates=merged, failed=failed)
