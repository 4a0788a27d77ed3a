"""
Values -- the immutable Money value object.

Responsibility:
    Pairs an integer amount in minor units (cents, pence, fils) with a
    currency code. Provides construction, equality, ordering, sign
    predicates and the operator protocol; the arithmetic itself goes through
    ``money_kernel.domain.rounding``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O. Imported by every
    other domain module.

Invariants enforced:
    - amount is always an int (never float, never bool, never Decimal).
    - currency is always a normalized three-letter code.
    - Arithmetic and ordering never mix currencies (CurrencyMismatchError).
    - Every operation returns a new Money; instances are never mutated.

Failure modes:
    - InvalidArgumentError on non-integer amounts or bad arguments.
    - UnknownCurrencyError on malformed codes, or codes missing from the
      currency table when built through ``Money.of`` / ``from_units``.
    - CurrencyMismatchError when operands carry different currencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from money_kernel.domain import formatting, rounding
from money_kernel.domain.settings import MoneySettings, resolve_settings
from money_kernel.exceptions import (
    CurrencyMismatchError,
    InvalidArgumentError,
    UnknownCurrencyError,
)
from money_kernel.logging_config import get_logger

logger = get_logger("domain.values")


class Ordering(str, Enum):
    """Result of comparing two Money values."""

    LT = "lt"
    EQ = "eq"
    GT = "gt"

    @property
    def as_int(self) -> int:
        return {Ordering.LT: -1, Ordering.EQ: 0, Ordering.GT: 1}[self]


def _require_int(value: Any, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(argument, value, "must be an integer number of minor units")
    return value


def _normalize_currency(code: Any) -> str:
    if not isinstance(code, str):
        raise UnknownCurrencyError(code)
    normalized = code.upper().strip()
    if len(normalized) != 3 or not normalized.isalpha():
        raise UnknownCurrencyError(code)
    return normalized


def resolve_currency(currency: str | None, settings: MoneySettings) -> str:
    if currency is None:
        if settings.default_currency is None:
            raise InvalidArgumentError(
                "currency", None, "no currency given and no default currency configured"
            )
        return settings.default_currency
    return settings.currencies.validate(currency)


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        ``amount`` is the value in the currency's smallest unit.
        ``Money.of(1234, "USD")`` is $12.34.

        Build values with ``Money.of``, ``Money.from_units`` or
        ``for_currency``: these check the code against the currency table
        and apply the default currency. The bare ``Money(amount, currency)``
        constructor checks the code's shape only. It exists for storage
        adapters (SQLAlchemy composites, ``from_primitives``) that rebuild
        already-validated values. A code missing from the table is still
        rejected by ``to_string``, ``to_decimal`` and ``from_primitives``.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - No floating-point value is ever accepted or produced
        - ``==`` is True iff currency and amount match; it never raises
        - Ordering and arithmetic raise CurrencyMismatchError across currencies

    Non-goals:
        - Does NOT perform currency conversion
    """

    amount: int
    currency: str

    def __post_init__(self) -> None:
        _require_int(self.amount, "amount")
        object.__setattr__(self, "currency", _normalize_currency(self.currency))

    # -- construction --------------------------------------------------------

    @classmethod
    def of(
        cls,
        amount: int,
        currency: str | None = None,
        *,
        settings: MoneySettings | None = None,
    ) -> Money:
        """
        Create Money from minor units, defaulting the currency.

        Raises:
            InvalidArgumentError: non-integer amount, or no currency and no
                configured default.
            UnknownCurrencyError: currency not in the table.
        """
        _require_int(amount, "amount")
        code = resolve_currency(currency, resolve_settings(settings))
        return cls(amount, code)

    @classmethod
    def from_units(
        cls,
        major: int,
        minor: int,
        currency: str | None = None,
        *,
        settings: MoneySettings | None = None,
    ) -> Money:
        """
        Combine major and minor units: ``from_units(12, 34, "USD")`` is 1234.

        The sign follows ``major``; ``minor`` must be in
        ``[0, 10 ** exponent)``.
        """
        _require_int(major, "major")
        _require_int(minor, "minor")
        resolved = resolve_settings(settings)
        code = resolve_currency(currency, resolved)
        per_major = resolved.currencies.get(code).minor_units_per_major
        if not 0 <= minor < per_major:
            raise InvalidArgumentError(
                "minor", minor, f"must be between 0 and {per_major - 1} for {code}"
            )
        sign = -1 if major < 0 else 1
        return cls(major * per_major + sign * minor, code)

    @classmethod
    def zero(
        cls,
        currency: str | None = None,
        *,
        settings: MoneySettings | None = None,
    ) -> Money:
        """Create a zero amount in the given (or default) currency."""
        return cls.of(0, currency, settings=settings)

    # -- predicates ----------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    # -- comparison ----------------------------------------------------------

    def _check_same_currency(self, other: Money, operation: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency, operation)

    def equals(self, other: Money) -> bool:
        """Same currency and same amount. Differing currencies are just unequal."""
        return self == other

    def compare(self, other: Money) -> Ordering:
        """
        Order two values of the same currency.

        Raises:
            CurrencyMismatchError: if currencies differ.
        """
        if not isinstance(other, Money):
            raise InvalidArgumentError("other", other, "must be Money")
        self._check_same_currency(other, "compare")
        if self.amount < other.amount:
            return Ordering.LT
        if self.amount > other.amount:
            return Ordering.GT
        return Ordering.EQ

    def cmp(self, other: Money) -> int:
        """Like ``compare`` but returns -1, 0 or 1."""
        return self.compare(other).as_int

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Ordering.LT

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Ordering.GT

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Ordering.GT

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Ordering.LT

    # -- arithmetic ----------------------------------------------------------

    def add(self, other: Money) -> Money:
        """Add two Money values. Must be same currency."""
        if not isinstance(other, Money):
            raise InvalidArgumentError("other", other, "must be Money")
        self._check_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        """Subtract two Money values. Must be same currency."""
        if not isinstance(other, Money):
            raise InvalidArgumentError("other", other, "must be Money")
        self._check_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: rounding.Factor) -> Money:
        """
        Scale by an int, Fraction or Decimal factor.

        Non-integral products are rounded to the nearest minor unit with
        ROUND_HALF_EVEN. Floats raise InvalidArgumentError.
        """
        result, rounded = rounding.scale(self.amount, factor)
        if rounded:
            logger.debug(
                "multiply_rounded",
                extra={
                    "currency": self.currency,
                    "amount": self.amount,
                    "factor": str(factor),
                    "result": result,
                    "rounding": rounding.ROUNDING_MODE,
                },
            )
        return Money(result, self.currency)

    def divide(self, parts: int) -> list[Money]:
        """
        Fairly allocate this amount into ``parts`` values.

        Earlier entries receive the remainder first, one minor unit each:
        ``Money(99, "EUR").divide(2) == [Money(50, "EUR"), Money(49, "EUR")]``.
        The parts always sum to exactly ``self.amount``.
        """
        shares = rounding.split_evenly(self.amount, parts)
        logger.debug(
            "divide_allocated",
            extra={
                "currency": self.currency,
                "amount": self.amount,
                "parts": parts,
                "remainder": self.amount % parts,
            },
        )
        return [Money(share, self.currency) for share in shares]

    def negate(self) -> Money:
        return Money(-self.amount, self.currency)

    def absolute(self) -> Money:
        return Money(abs(self.amount), self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: rounding.Factor) -> Money:
        if isinstance(factor, Money):
            return NotImplemented
        return self.multiply(factor)

    def __rmul__(self, factor: rounding.Factor) -> Money:
        return self.__mul__(factor)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self.absolute()

    # -- conversion ----------------------------------------------------------

    def to_decimal(self, *, settings: MoneySettings | None = None) -> Decimal:
        """Exact major-unit Decimal: ``Money(1234, "USD").to_decimal() == Decimal("12.34")``."""
        exponent = resolve_settings(settings).currencies.exponent(self.currency)
        # Built from the digit tuple; scaleb would round to the context precision
        sign, digits, _ = Decimal(self.amount).as_tuple()
        return Decimal((sign, digits, -exponent))

    def to_string(self, options: formatting.FormatOptions | None = None, **kwargs: Any) -> str:
        return formatting.to_string(self, options, **kwargs)

    def __str__(self) -> str:
        return formatting.to_string(self)

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency!r})"


def sum_money(
    values: Iterable[Money],
    currency: str | None = None,
    *,
    settings: MoneySettings | None = None,
) -> Money:
    """
    Add up Money values of one currency.

    An empty iterable yields zero in ``currency`` (or the default currency).
    """
    total: Money | None = Money.zero(currency, settings=settings) if currency is not None else None
    for value in values:
        total = value if total is None else total.add(value)
    if total is None:
        return Money.zero(settings=settings)
    return total
