"""
Module: money_kernel.db.types
Responsibility: SQLAlchemy column types that persist Money values.  They are
    thin adapters over ``money_kernel.domain.serialization``; all validation
    lives there.
Architecture position: Kernel > DB.  May import from domain/.  Nothing in
    domain/ imports from here.

Column shapes:
    MoneyAmount       -- one BigInteger column holding the minor-unit amount;
                         the currency is fixed per column (or the default).
    MoneyMap          -- one JSON column holding {"amount", "currency"}.
    money_composite() -- two columns (BigInteger amount, String(3) currency)
                         mapped onto one Money attribute.

Failure modes:
    - CurrencyMismatchError when binding a Money whose currency differs from
      a MoneyAmount column's fixed currency.
    - InvalidArgumentError when binding a non-Money value, or when a stored
      row is malformed (non-integer amount, unknown currency).
"""

from typing import Any

from sqlalchemy import JSON, BigInteger, String
from sqlalchemy.orm import composite, mapped_column
from sqlalchemy.types import TypeDecorator

from money_kernel.domain.serialization import (
    from_mapping,
    from_primitives,
    to_mapping,
)
from money_kernel.domain.settings import get_settings
from money_kernel.domain.values import Money
from money_kernel.exceptions import CurrencyMismatchError, InvalidArgumentError

CURRENCY_CODE_LENGTH = 3


def _require_money(value: Any) -> Money:
    if not isinstance(value, Money):
        raise InvalidArgumentError("bound value", value, "must be Money")
    return value


class MoneyAmount(TypeDecorator):
    """
    Money stored as its integer amount only.

    Contract:
        The column carries one currency: ``currency`` if given, otherwise the
        process default currency at bind/load time.

    Guarantees:
        - process_bind_param: Money -> int, currency checked.
        - process_result_value: int -> Money in the column currency.
        - cache_ok=True enables SQLAlchemy statement caching.
    """

    impl = BigInteger
    cache_ok = True

    def __init__(self, currency: str | None = None, *args: Any, **kwargs: Any):
        self.currency = currency.upper().strip() if currency else None
        super().__init__(*args, **kwargs)

    def column_currency(self) -> str:
        if self.currency is not None:
            return self.currency
        default = get_settings().default_currency
        if default is None:
            raise InvalidArgumentError(
                "column currency", None, "MoneyAmount needs a currency or a configured default"
            )
        return default

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        money = _require_money(value)
        expected = self.column_currency()
        if money.currency != expected:
            raise CurrencyMismatchError(expected, money.currency, "store")
        return money.amount

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return from_primitives(value, self.column_currency())


class MoneyMap(TypeDecorator):
    """
    Money stored as a JSON object ``{"amount": int, "currency": str}``.

    Guarantees:
        - process_bind_param: Money -> dict.
        - process_result_value: dict -> Money via the strict mapping parser.
    """

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return to_mapping(_require_money(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return from_mapping(value)


def money_composite(amount_column: str, currency_column: str, **kwargs: Any):
    """
    Map two columns onto one Money attribute.

    Usage:
        class Invoice(Base):
            __tablename__ = "invoices"
            id: Mapped[int] = mapped_column(primary_key=True)
            total: Mapped[Money] = money_composite("total_amount", "total_currency")
    """
    return composite(
        Money,
        mapped_column(amount_column, BigInteger, nullable=False),
        mapped_column(currency_column, String(CURRENCY_CODE_LENGTH), nullable=False),
        **kwargs,
    )
