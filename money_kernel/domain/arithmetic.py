"""
Arithmetic -- functional API over Money.

Responsibility:
    Module-level functions for callers that prefer ``add(a, b)`` to
    ``a + b``. Each function delegates to the corresponding Money method so
    currency checks and rounding live in exactly one place.

Invariants enforced:
    - add/subtract/compare across currencies raise CurrencyMismatchError.
    - multiply rounds non-integral products ROUND_HALF_EVEN.
    - divide conserves the total: sum(divide(m, n)) == m.amount.

Usage:
    from money_kernel.domain.arithmetic import add, divide
    from money_kernel.domain.values import Money

    add(Money(500, "EUR"), Money(500, "EUR"))   # Money(1000, 'EUR')
    divide(Money(99, "EUR"), 2)                  # [Money(50, 'EUR'), Money(49, 'EUR')]
"""

from __future__ import annotations

from money_kernel.domain.rounding import Factor
from money_kernel.domain.values import Money, Ordering, sum_money

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "neg",
    "abs_",
    "equals",
    "compare",
    "cmp",
    "is_zero",
    "is_positive",
    "is_negative",
    "sum_money",
]


def add(a: Money, b: Money) -> Money:
    return a.add(b)


def subtract(a: Money, b: Money) -> Money:
    return a.subtract(b)


def multiply(a: Money, factor: Factor) -> Money:
    """Scale by an int, Fraction or Decimal; ROUND_HALF_EVEN to minor units."""
    return a.multiply(factor)


def divide(a: Money, parts: int) -> list[Money]:
    """Fair allocation into ``parts`` values; earlier entries get the remainder."""
    return a.divide(parts)


def neg(a: Money) -> Money:
    return a.negate()


def abs_(a: Money) -> Money:
    return a.absolute()


def equals(a: Money, b: Money) -> bool:
    """True iff same currency and amount; never raises on differing currencies."""
    return a.equals(b)


def compare(a: Money, b: Money) -> Ordering:
    return a.compare(b)


def cmp(a: Money, b: Money) -> int:
    return a.cmp(b)


def is_zero(a: Money) -> bool:
    return a.is_zero


def is_positive(a: Money) -> bool:
    return a.is_positive


def is_negative(a: Money) -> bool:
    return a.is_negative
