"""Parsing -- major-unit text or Decimal into Money."""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from money_kernel.domain.formatting import resolve_options
from money_kernel.domain.rounding import quantize_to_exponent
from money_kernel.domain.settings import MoneySettings, resolve_settings
from money_kernel.domain.values import Money, resolve_currency
from money_kernel.exceptions import InvalidArgumentError
from money_kernel.logging_config import get_logger

logger = get_logger("domain.parsing")

_NUMBER = re.compile(r"^-?\d+(\.\d+)?$")


def _clean_text(text: str, symbol: str, code: str, separator: str, delimiter: str) -> str:
    cleaned = text.strip()
    # Code before symbol: symbols such as "R" or "kr" can be substrings of codes
    cleaned = re.sub(re.escape(code), "", cleaned, flags=re.IGNORECASE)
    if symbol:
        cleaned = cleaned.replace(symbol, "")
    cleaned = "".join(cleaned.split())
    if separator:
        cleaned = cleaned.replace(separator, "")
    if delimiter and delimiter != ".":
        cleaned = cleaned.replace(delimiter, ".")
    return cleaned


def parse(
    value: str | Decimal,
    currency: str | None = None,
    options: Mapping[str, Any] | None = None,
    *,
    settings: MoneySettings | None = None,
) -> Money:
    """
    Parse a major-unit amount into Money.

    Accepts ``"$1,234.56"``, ``"1.234,56 €"`` (with matching separator and
    delimiter options), ``"-12.5 USD"`` or a ``Decimal``. Values with more
    fractional digits than the currency allows are rounded ROUND_HALF_EVEN.

    Raises:
        InvalidArgumentError: malformed text, floats, or other types.
        UnknownCurrencyError: unknown currency.
    """
    resolved = resolve_settings(settings)
    code = resolve_currency(currency, resolved)
    info = resolved.currencies.get(code)

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, str):
        opts = resolve_options(info, options, settings=resolved)
        cleaned = _clean_text(value, info.symbol, info.code, opts.separator, opts.delimiter)
        if not _NUMBER.match(cleaned):
            raise InvalidArgumentError("money text", value, "not a recognizable amount")
        try:
            number = Decimal(cleaned)
        except InvalidOperation as e:
            raise InvalidArgumentError("money text", value, "not a recognizable amount") from e
    else:
        raise InvalidArgumentError(
            "value", value, "must be str or Decimal; use Money.of for minor units"
        )

    minor_units, rounded = quantize_to_exponent(number, info.exponent)
    if rounded:
        logger.debug(
            "parse_rounded",
            extra={"currency": code, "input": str(value), "result": minor_units},
        )
    return Money(minor_units, code)
