"""
Pytest fixtures for the money kernel test suite.

Provides:
- Isolation of process-wide state (installed settings, logging config)
- Settings objects used across modules
"""

import pytest

from money_kernel.domain.currency import CurrencyInfo
from money_kernel.domain.settings import (
    FormatOptions,
    MoneySettings,
    reset_settings,
)
from money_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _isolated_process_state():
    """Every test starts with no installed settings and default logging."""
    reset_settings()
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
    reset_settings()


@pytest.fixture
def eur_settings() -> MoneySettings:
    """Continental settings: EUR default, dot thousands, comma decimals."""
    return MoneySettings(
        default_currency="EUR",
        format_options=FormatOptions(separator=".", delimiter=","),
    )


@pytest.fixture
def bitcoin() -> CurrencyInfo:
    return CurrencyInfo("XBT", "Bitcoin", "₿", 8)


@pytest.fixture
def crypto_settings(bitcoin) -> MoneySettings:
    """Built-in table extended with one custom currency."""
    return MoneySettings.build(default_currency="XBT", custom_currencies=(bitcoin,))
