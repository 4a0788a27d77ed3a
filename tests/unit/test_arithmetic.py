"""
Tests for Money arithmetic.

Verifies:
- add/subtract are exact and currency-checked
- multiply rounds ROUND_HALF_EVEN and rejects floats
- divide conserves the total and gives the remainder to earlier parts
- The functional facade mirrors the methods
"""

import logging
from decimal import Decimal
from fractions import Fraction

import pytest

from money_kernel.domain import arithmetic
from money_kernel.domain.rounding import as_fraction, round_half_even, split_evenly
from money_kernel.domain.values import Money, Ordering
from money_kernel.exceptions import CurrencyMismatchError, InvalidArgumentError


class TestAddSubtract:
    """Exact integer addition."""

    def test_add(self):
        assert Money(500, "EUR") + Money(500, "EUR") == Money(1000, "EUR")

    def test_subtract_can_go_negative(self):
        assert Money(100, "EUR") - Money(250, "EUR") == Money(-150, "EUR")

    def test_add_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            Money(500, "EUR") + Money(500, "USD")
        assert exc_info.value.operation == "add"

    def test_subtract_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            Money(500, "EUR").subtract(Money(500, "USD"))
        assert exc_info.value.operation == "subtract"

    def test_add_non_money(self):
        with pytest.raises(InvalidArgumentError):
            Money(500, "EUR").add(500)
        with pytest.raises(TypeError):
            Money(500, "EUR") + 500

    def test_large_amounts_stay_exact(self):
        big = Money(10**30 + 1, "USD")
        assert (big + big).amount == 2 * 10**30 + 2


class TestMultiply:
    """Scaling with banker's rounding."""

    @pytest.mark.parametrize(
        "amount, factor, expected",
        [
            (5, Fraction(1, 2), 2),
            (15, Fraction(1, 2), 8),
            (25, Fraction(1, 2), 12),
            (-5, Fraction(1, 2), -2),
            (-15, Fraction(1, 2), -8),
            (100, Decimal("1.075"), 108),
            (1000, Decimal("0.0125"), 12),
            (1000, Decimal("0.0135"), 14),
            (333, 3, 999),
            (100, Fraction(1, 3), 33),
            (200, Fraction(1, 3), 67),
        ],
    )
    def test_half_even(self, amount, factor, expected):
        assert Money(amount, "USD").multiply(factor) == Money(expected, "USD")

    def test_operator_both_sides(self):
        assert Money(10, "USD") * 3 == Money(30, "USD")
        assert 3 * Money(10, "USD") == Money(30, "USD")

    def test_money_times_money_unsupported(self):
        with pytest.raises(TypeError):
            Money(10, "USD") * Money(2, "USD")

    @pytest.mark.parametrize(
        "factor",
        [1.5, 0.1, Decimal("NaN"), Decimal("Infinity"), True, "2", None],
    )
    def test_bad_factor_rejected(self, factor):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Money(10, "USD").multiply(factor)
        assert exc_info.value.argument == "factor"

    def test_rounding_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="money_kernel"):
            Money(5, "USD").multiply(Fraction(1, 2))
        assert "multiply_rounded" in caplog.messages

    def test_exact_product_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="money_kernel"):
            Money(4, "USD").multiply(Fraction(1, 2))
        assert "multiply_rounded" not in caplog.messages


class TestDivide:
    """Fair allocation."""

    @pytest.mark.parametrize(
        "amount, parts, expected",
        [
            (99, 2, [50, 49]),
            (100, 3, [34, 33, 33]),
            (2, 5, [1, 1, 0, 0, 0]),
            (0, 3, [0, 0, 0]),
            (7, 1, [7]),
            (-99, 2, [-49, -50]),
            (-100, 3, [-33, -33, -34]),
        ],
    )
    def test_allocation(self, amount, parts, expected):
        result = Money(amount, "EUR").divide(parts)
        assert [m.amount for m in result] == expected
        assert all(m.currency == "EUR" for m in result)

    @pytest.mark.parametrize("amount", [99, 100, 1, -7, 123456789])
    @pytest.mark.parametrize("parts", [1, 2, 3, 7, 12])
    def test_sum_conserved_and_spread_at_most_one(self, amount, parts):
        result = [m.amount for m in Money(amount, "EUR").divide(parts)]
        assert sum(result) == amount
        assert len(result) == parts
        assert max(result) - min(result) <= 1
        assert result == sorted(result, reverse=True)

    @pytest.mark.parametrize("parts", [0, -1, 1.5, True, "2", None])
    def test_invalid_divisor(self, parts):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Money(100, "EUR").divide(parts)
        assert exc_info.value.argument == "divisor"


class TestRoundingPrimitives:
    """The rounding module on its own."""

    def test_round_half_even(self):
        assert round_half_even(Fraction(5, 2)) == 2
        assert round_half_even(Fraction(7, 2)) == 4
        assert round_half_even(Fraction(-5, 2)) == -2
        assert round_half_even(Fraction(8, 3)) == 3

    def test_as_fraction_accepts_exact_types(self):
        assert as_fraction(3) == Fraction(3)
        assert as_fraction(Decimal("0.1")) == Fraction(1, 10)
        assert as_fraction(Fraction(2, 7)) == Fraction(2, 7)

    def test_split_evenly(self):
        assert split_evenly(10, 4) == [3, 3, 2, 2]


class TestFunctionalFacade:
    """money_kernel.domain.arithmetic delegates to Money."""

    def test_functions(self):
        a, b = Money(500, "EUR"), Money(200, "EUR")
        assert arithmetic.add(a, b) == Money(700, "EUR")
        assert arithmetic.subtract(a, b) == Money(300, "EUR")
        assert arithmetic.multiply(a, Fraction(1, 2)) == Money(250, "EUR")
        assert arithmetic.divide(Money(99, "EUR"), 2) == [Money(50, "EUR"), Money(49, "EUR")]
        assert arithmetic.neg(a) == Money(-500, "EUR")
        assert arithmetic.abs_(Money(-5, "EUR")) == Money(5, "EUR")

    def test_comparisons(self):
        a, b = Money(500, "EUR"), Money(200, "EUR")
        assert arithmetic.compare(a, b) is Ordering.GT
        assert arithmetic.cmp(b, a) == -1
        assert arithmetic.equals(a, Money(500, "EUR"))
        assert not arithmetic.equals(a, Money(500, "USD"))

    def test_predicates(self):
        assert arithmetic.is_zero(Money(0, "EUR"))
        assert arithmetic.is_positive(Money(1, "EUR"))
        assert arithmetic.is_negative(Money(-1, "EUR"))

    def test_sum_money(self):
        assert arithmetic.sum_money([Money(1, "EUR"), Money(2, "EUR")]) == Money(3, "EUR")
