"""
Typed Exception Hierarchy for the Money Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers handling money errors should catch by type and read structured
fields, never parse message strings:

    try:
        total = add(invoice_total, refund)
    except CurrencyMismatchError as e:
        log.warning("mixed currencies", extra={"left": e.currency1, "right": e.currency2})
        api_response(code=e.code)

Every exception carries a ``code`` class attribute (machine-readable, API-safe)
and keeps its context as attributes.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    MoneyKernelError (base)
    |
    +-- CurrencyError
    |   +-- UnknownCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- InvalidArgumentError
    |
    +-- SettingsError
        +-- SettingsAlreadyInitializedError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                          | When Raised
-----------|-------------------------------|------------------------------------------
Currency   | UNKNOWN_CURRENCY              | Code absent from the currency table
           | CURRENCY_MISMATCH             | Operands carry different currencies
-----------|-------------------------------|------------------------------------------
Argument   | INVALID_ARGUMENT              | Non-integer amount, float factor,
           |                               | non-positive divisor, malformed storage
-----------|-------------------------------|------------------------------------------
Settings   | SETTINGS_ALREADY_INITIALIZED  | Second, different settings install

All failures are synchronous and atomic: an operation either returns a valid
value or raises with no side effect.
"""

from typing import Any


class MoneyKernelError(Exception):
    """
    Base exception for all money kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "MONEY_KERNEL_ERROR"


# Currency-related exceptions


class CurrencyError(MoneyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class UnknownCurrencyError(CurrencyError):
    """Currency code is not present in the currency table."""

    code: str = "UNKNOWN_CURRENCY"

    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Unknown currency code: {currency!r}")


class CurrencyMismatchError(CurrencyError):
    """Attempted operation on mismatched currencies."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str, operation: str = "operate"):
        self.currency1 = currency1
        self.currency2 = currency2
        self.operation = operation
        super().__init__(
            f"Cannot {operation} Money with different currencies: "
            f"{currency1} vs {currency2}"
        )


# Argument validation


class InvalidArgumentError(MoneyKernelError):
    """
    An argument is outside the accepted domain.

    Raised for non-integer amounts, float factors, non-positive divisors and
    malformed stored representations.
    """

    code: str = "INVALID_ARGUMENT"

    def __init__(self, argument: str, value: Any, reason: str):
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {argument} {value!r}: {reason}")


# Settings lifecycle


class SettingsError(MoneyKernelError):
    """Base exception for process-wide settings errors."""

    code: str = "SETTINGS_ERROR"


class SettingsAlreadyInitializedError(SettingsError):
    """Process-wide settings were already installed with a different object."""

    code: str = "SETTINGS_ALREADY_INITIALIZED"

    def __init__(self, installed_default_currency: str | None):
        self.installed_default_currency = installed_default_currency
        super().__init__(
            "Money settings are already initialized "
            f"(default_currency={installed_default_currency!r}); "
            "settings are read-only after startup"
        )
