"""
Pure domain layer.

This module contains the Money value type and the pure logic around it
with NO dependencies on:
- ORM (SQLAlchemy)
- Database
- Files or environment variables
- I/O

All domain objects are immutable and deterministic.
"""

from money_kernel.domain.currency import (
    BUILTIN_CURRENCIES,
    BUILTIN_TABLE,
    CurrencyInfo,
    CurrencyTable,
)
from money_kernel.domain.factory import CurrencyConstructor, for_currency
from money_kernel.domain.formatting import resolve_options, to_string
from money_kernel.domain.parsing import parse
from money_kernel.domain.serialization import (
    from_mapping,
    from_primitives,
    to_mapping,
    to_primitives,
)
from money_kernel.domain.settings import (
    BUILTIN_FORMAT_OPTIONS,
    DEFAULT_SETTINGS,
    FormatOptions,
    MoneySettings,
    currency_table,
    format_options,
    get_settings,
    init_settings,
    reset_settings,
)
from money_kernel.domain.values import Money, Ordering, sum_money

__all__ = [
    "BUILTIN_CURRENCIES",
    "BUILTIN_FORMAT_OPTIONS",
    "BUILTIN_TABLE",
    "CurrencyConstructor",
    "CurrencyInfo",
    "CurrencyTable",
    "DEFAULT_SETTINGS",
    "FormatOptions",
    "Money",
    "MoneySettings",
    "Ordering",
    "currency_table",
    "for_currency",
    "format_options",
    "from_mapping",
    "from_primitives",
    "get_settings",
    "init_settings",
    "parse",
    "reset_settings",
    "resolve_options",
    "sum_money",
    "to_mapping",
    "to_primitives",
    "to_string",
]
