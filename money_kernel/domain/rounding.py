"""
Rounding -- the single sanctioned bridge from rational math to minor units.

Responsibility:
    Scaling an integer minor-unit amount by a rational factor, rounding
    rationals to integers, and splitting an integer amount into fair parts.
    Money arithmetic delegates here so that every rounding decision in the
    kernel goes through one policy.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O. Operates on ints,
    Fractions and Decimals only; knows nothing about Money or currencies.

Invariants enforced:
    - ROUND_HALF_EVEN is the only rounding mode (ties go to the even
      neighbour, so repeated rounding carries no systematic bias).
    - Floats are rejected, never converted.
    - split_evenly conserves the total exactly.

Failure modes:
    - InvalidArgumentError on float, non-finite Decimal, or non-positive parts.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from numbers import Rational

from money_kernel.exceptions import InvalidArgumentError

Factor = int | Fraction | Decimal

ROUNDING_MODE = "ROUND_HALF_EVEN"


def as_fraction(value: object, argument: str = "factor") -> Fraction:
    """
    Convert an exact rational (int, Fraction, Decimal) to a Fraction.

    Raises:
        InvalidArgumentError: for floats, bools, non-finite Decimals and any
            other type.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(argument, value, "booleans are not numbers")
    if isinstance(value, float):
        raise InvalidArgumentError(
            argument, value, "floats are not accepted; use int, Fraction or Decimal"
        )
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(argument, value, "must be finite")
        return Fraction(value)
    if isinstance(value, Rational):
        return Fraction(value)
    raise InvalidArgumentError(argument, value, "must be int, Fraction or Decimal")


def round_half_even(value: Fraction) -> int:
    """
    Round a rational to the nearest integer; ties go to the even integer.

    ``round()`` on a Fraction already implements banker's rounding exactly,
    without passing through floating point.
    """
    return round(value)


def scale(amount: int, factor: object) -> tuple[int, bool]:
    """
    Multiply a minor-unit amount by a rational factor.

    Returns:
        (result, rounded) -- the rounded integer result and whether rounding
        changed the exact product.
    """
    exact = Fraction(amount) * as_fraction(factor)
    result = round_half_even(exact)
    return result, exact != result


def split_evenly(amount: int, parts: int) -> list[int]:
    """
    Split an integer into ``parts`` integers that differ by at most one.

    ``base, remainder = divmod(amount, parts)``; the first ``remainder``
    entries get ``base + 1``. Floor division keeps every entry at ``base``
    or ``base + 1`` for negative amounts as well.

    Postconditions:
        - sum(result) == amount
        - len(result) == parts

    Raises:
        InvalidArgumentError: if ``parts`` is not a positive int.
    """
    if isinstance(parts, bool) or not isinstance(parts, int):
        raise InvalidArgumentError("divisor", parts, "must be a positive integer")
    if parts <= 0:
        raise InvalidArgumentError("divisor", parts, "must be a positive integer")

    base, remainder = divmod(amount, parts)
    return [base + 1 if i < remainder else base for i in range(parts)]


def quantize_to_exponent(value: Decimal, exponent: int) -> tuple[int, bool]:
    """
    Convert a major-unit Decimal into minor units for a given exponent.

    Returns:
        (minor_units, rounded) using ROUND_HALF_EVEN.
    """
    exact = as_fraction(value, "amount") * (10 ** exponent)
    result = round_half_even(exact)
    return result, exact != result
