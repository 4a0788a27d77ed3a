"""
Serialization -- Money to and from storage primitives.

Responsibility:
    The boundary used by persistence adapters: a Money becomes ``(amount,
    currency)`` or ``{"amount": ..., "currency": ...}`` and comes back through
    strict parsers that reject anything malformed.

Invariants enforced:
    - Stored amounts are integers. Floats, bools and fractional text are
      rejected, never rounded.
    - Unknown currencies are rejected with InvalidArgumentError (the
      UnknownCurrencyError is chained as ``__cause__``).
    - from_primitives(*to_primitives(m)) == m for every valid m.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from money_kernel.domain.settings import MoneySettings, resolve_settings
from money_kernel.domain.values import Money
from money_kernel.exceptions import InvalidArgumentError, UnknownCurrencyError

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")

MAPPING_KEYS = frozenset({"amount", "currency"})


def to_primitives(money: Money) -> tuple[int, str]:
    return money.amount, money.currency


def to_mapping(money: Money) -> dict[str, Any]:
    return {"amount": money.amount, "currency": money.currency}


def parse_stored_amount(value: Any) -> int:
    """
    Validate a stored amount.

    Ints pass through; digit-only strings (from text columns) are converted.

    Raises:
        InvalidArgumentError: for anything else.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError("stored amount", value, "booleans are not amounts")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_TEXT.match(value.strip()):
        return int(value.strip())
    raise InvalidArgumentError("stored amount", value, "must be an integer number of minor units")


def from_primitives(
    amount: Any,
    currency: Any,
    *,
    settings: MoneySettings | None = None,
) -> Money:
    """
    Rebuild Money from stored primitives.

    Raises:
        InvalidArgumentError: non-integer amount or unknown/malformed currency.
    """
    value = parse_stored_amount(amount)
    try:
        code = resolve_settings(settings).currencies.validate(currency)
    except UnknownCurrencyError as e:
        raise InvalidArgumentError("stored currency", currency, "unknown currency code") from e
    return Money(value, code)


def from_mapping(data: Any, *, settings: MoneySettings | None = None) -> Money:
    """
    Rebuild Money from ``{"amount": int, "currency": str}``.

    Raises:
        InvalidArgumentError: not a mapping, wrong keys, or invalid values.
    """
    if not isinstance(data, Mapping):
        raise InvalidArgumentError("stored money", data, "must be a mapping")
    keys = set(data)
    if keys != MAPPING_KEYS:
        raise InvalidArgumentError(
            "stored money", data, f"expected keys {sorted(MAPPING_KEYS)}, got {sorted(map(str, keys))}"
        )
    return from_primitives(data["amount"], data["currency"], settings=settings)
