"""
Storefront Price Radar — Price Normalization

Turns free-form storefront price text into a Decimal.

Storefronts in dozens of locales format the same number differently:
"€5.399,99", "R5,399.99", "49.000", "Rp 2,5juta". No locale database is
consulted; the decimal separator is inferred from separator position and
count alone, so every input string resolves deterministically.

Unparseable text yields Decimal("NaN"), never an exception. Callers test
the result with .is_nan().
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Mapping

import structlog

from storefront_prices.config import settings

logger = structlog.get_logger(__name__)

NAN = Decimal("NaN")

# ASCII digits only
_DIGIT_RE = re.compile(r"[0-9]")
_NUMBER_RE = re.compile(r"[0-9]*\.?[0-9]*")
_NON_NUMERIC_RE = re.compile(r"[^0-9.,]")
_NON_DECIMAL_RE = re.compile(r"[^0-9.]")
_THOUSANDS_GROUP_LEN = 3


def _to_decimal(text: str) -> Decimal:
    """Parse a plain "123.45" string; anything else is NaN."""
    if not _DIGIT_RE.search(text) or not _NUMBER_RE.fullmatch(text):
        return NAN
    try:
        return Decimal(text)
    except (InvalidOperation, ValueError):
        return NAN


def _parse_magnitude_word(price_lower: str, word: str, multiplier: int) -> Decimal | None:
    """
    Parse "<number><word>" where the number uses ',' as its decimal mark.

    Returns None when the word is absent or no number precedes it.
    """
    if word not in price_lower:
        return None

    numeric_part = price_lower.split(word, 1)[0]
    # Only the first comma is the decimal mark; later ones are dropped
    number_text = _NON_DECIMAL_RE.sub("", numeric_part.replace(".", "").replace(",", ".", 1))
    base = _to_decimal(number_text)
    if base.is_nan():
        return None
    return base * multiplier


def _resolve_single_separator(clean: str, separator: str) -> str:
    parts = clean.split(separator)

    # 1.000.000 — repeated separators can only be thousands groups
    if len(parts) > 2:
        return clean.replace(separator, "")

    if len(parts) == 2:
        integer_part, fractional_part = parts
        if (
            len(fractional_part) == _THOUSANDS_GROUP_LEN
            and integer_part
            and integer_part.strip("0")
        ):
            return integer_part + fractional_part
        return f"{integer_part}.{fractional_part}"

    return clean


def parse_number_with_separators(price: str) -> Decimal:
    """
    Parse a number whose '.' and ',' roles are inferred from the text.

    Rules:
    - Only one separator type present:
        - two or more occurrences: thousands separators ("1.000.000")
        - one occurrence followed by exactly 3 digits, with a non-zero
          integer part before it: thousands separator ("49.000")
        - any other single occurrence: decimal separator ("539,99", "0,001")
    - Both present: the last one is the decimal separator and the other
      is removed ("1.234,56", "5,399.99").

    Args:
        price: Raw price text; anything other than digits, '.' and ','
            is discarded first.

    Returns:
        The parsed Decimal, or Decimal("NaN") when no number can be read.
    """
    clean = _NON_NUMERIC_RE.sub("", price)
    if not _DIGIT_RE.search(clean):
        return NAN

    last_dot = clean.rfind(".")
    last_comma = clean.rfind(",")

    if last_dot == -1 or last_comma == -1:
        separator = "." if last_dot > -1 else ","
        return _to_decimal(_resolve_single_separator(clean, separator))

    if last_dot > last_comma:
        return _to_decimal(clean.replace(",", ""))
    return _to_decimal(clean.replace(".", "").replace(",", "."))


def normalize_price(
    price: str,
    magnitude_words: Mapping[str, int] | None = None,
) -> Decimal:
    """
    Normalize a storefront price string into a Decimal.

    Magnitude words ("juta" = million, "ribu" = thousand) take precedence
    over the generic separator parser; in that notation ',' is always the
    decimal mark.

    Args:
        price: Raw price text, e.g. "R5,399.99", "€5.399,99", "Rp 75ribu".
        magnitude_words: Word -> multiplier table, checked in order.
            Defaults to settings.MAGNITUDE_WORDS.

    Returns:
        The price as a Decimal, or Decimal("NaN") if it cannot be parsed.

    Examples:
        >>> normalize_price("€5.399,99")
        Decimal('5399.99')
        >>> normalize_price("Rp 75ribu")
        Decimal('75000')
    """
    words = settings.MAGNITUDE_WORDS if magnitude_words is None else magnitude_words
    price_lower = price.lower()

    for word, multiplier in words.items():
        result = _parse_magnitude_word(price_lower, word, multiplier)
        if result is not None:
            logger.debug(
                "price_normalized_magnitude_word",
                raw=price,
                word=word,
                result=str(result),
                source="price_parser",
            )
            return result

    result = parse_number_with_separators(price)
    if result.is_nan():
        logger.debug("price_unparseable", raw=price, source="price_parser")
    return result
