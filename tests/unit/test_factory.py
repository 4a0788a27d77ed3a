"""
Tests for table-driven per-currency constructors.
"""

import pytest

from money_kernel.domain.currency import BUILTIN_TABLE
from money_kernel.domain.factory import CurrencyConstructor, for_currency
from money_kernel.domain.values import Money
from money_kernel.exceptions import InvalidArgumentError, UnknownCurrencyError


class TestForCurrency:
    """for_currency builds bound constructors."""

    def test_call(self):
        usd = for_currency("USD")
        assert usd(1234) == Money(1234, "USD")
        assert usd.code == "USD"

    def test_units_and_zero(self):
        kwd = for_currency("kwd")
        assert kwd.units(1, 5) == Money(1005, "KWD")
        assert kwd.units(3) == Money(3000, "KWD")
        assert kwd.zero() == Money(0, "KWD")

    def test_unknown_code_fails_at_creation(self):
        with pytest.raises(UnknownCurrencyError):
            for_currency("ZZZ")

    def test_custom_currency(self, crypto_settings):
        xbt = for_currency("XBT", settings=crypto_settings)
        assert xbt.units(1) == Money(100_000_000, "XBT")

    def test_custom_currency_unknown_without_settings(self):
        with pytest.raises(UnknownCurrencyError):
            for_currency("XBT")

    def test_every_builtin_code_has_a_constructor(self):
        for code in BUILTIN_TABLE.all_codes():
            assert for_currency(code)(1) == Money(1, code)

    def test_float_rejected(self):
        with pytest.raises(InvalidArgumentError):
            for_currency("USD")(12.34)

    def test_repr(self):
        constructor = for_currency("EUR")
        assert isinstance(constructor, CurrencyConstructor)
        assert repr(constructor) == "CurrencyConstructor('EUR')"
