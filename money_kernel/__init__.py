"""
Money Kernel

An integer minor-unit money type with:
- Exact arithmetic, never floating point
- Fair allocation when dividing amounts
- Explicit ROUND_HALF_EVEN rounding for rational factors
- Configurable formatting and a static ISO 4217 currency table
- SQLAlchemy column types for persistence
"""

__version__ = "0.1.0"

from money_kernel.domain import (
    CurrencyInfo,
    FormatOptions,
    Money,
    MoneySettings,
    Ordering,
    for_currency,
    parse,
    to_string,
)
from money_kernel.exceptions import (
    CurrencyMismatchError,
    InvalidArgumentError,
    MoneyKernelError,
    UnknownCurrencyError,
)

__all__ = [
    "CurrencyInfo",
    "CurrencyMismatchError",
    "FormatOptions",
    "InvalidArgumentError",
    "Money",
    "MoneyKernelError",
    "MoneySettings",
    "Ordering",
    "UnknownCurrencyError",
    "for_currency",
    "parse",
    "to_string",
]
