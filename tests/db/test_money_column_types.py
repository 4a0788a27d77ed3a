"""
Tests for the SQLAlchemy Money column types against in-memory SQLite.

Verifies:
- MoneyAmount stores the integer amount and enforces the column currency
- MoneyMap stores {"amount", "currency"} and rejects tampered rows
- money_composite maps two columns onto one Money attribute and is queryable
"""

import pytest
from sqlalchemy import Integer, create_engine, select, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from money_kernel.db import MoneyAmount, MoneyMap, money_composite
from money_kernel.domain.settings import MoneySettings, init_settings
from money_kernel.domain.values import Money
from money_kernel.exceptions import CurrencyMismatchError, InvalidArgumentError


class Base(DeclarativeBase):
    pass


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    total: Mapped[Money] = money_composite("total_amount", "total_currency")
    fee: Mapped[Money | None] = mapped_column(MoneyAmount("USD"), nullable=True)
    snapshot: Mapped[Money | None] = mapped_column(MoneyMap, nullable=True)


class LedgerLine(Base):
    __tablename__ = "ledger_lines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    amount: Mapped[Money] = mapped_column(MoneyAmount(), nullable=False)


def _root_cause(exc: BaseException) -> BaseException:
    """SQLAlchemy wraps errors raised in bind processors; the original is .orig."""
    return getattr(exc, "orig", None) or exc


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def engine():
    eng = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# Tests
# =============================================================================


class TestMoneyComposite:
    """Two-column Money mapping."""

    def test_round_trip(self, db_session):
        db_session.add(Invoice(id=1, total=Money(123456, "EUR")))
        db_session.commit()

        loaded = db_session.get(Invoice, 1)
        assert loaded.total == Money(123456, "EUR")

    def test_query_by_money(self, db_session):
        db_session.add_all([
            Invoice(id=1, total=Money(1000, "USD")),
            Invoice(id=2, total=Money(1000, "EUR")),
            Invoice(id=3, total=Money(2000, "USD")),
        ])
        db_session.commit()

        rows = db_session.scalars(
            select(Invoice).where(Invoice.total == Money(1000, "USD"))
        ).all()
        assert [row.id for row in rows] == [1]

    def test_raw_columns(self, db_session):
        db_session.add(Invoice(id=1, total=Money(-5, "JPY")))
        db_session.commit()

        row = db_session.execute(
            text("SELECT total_amount, total_currency FROM invoices WHERE id = 1")
        ).one()
        assert tuple(row) == (-5, "JPY")


class TestMoneyAmount:
    """Single integer column with a fixed currency."""

    def test_round_trip(self, db_session):
        db_session.add(Invoice(id=1, total=Money(0, "USD"), fee=Money(250, "USD")))
        db_session.commit()

        assert db_session.get(Invoice, 1).fee == Money(250, "USD")
        raw = db_session.execute(text("SELECT fee FROM invoices WHERE id = 1")).scalar_one()
        assert raw == 250

    def test_null(self, db_session):
        db_session.add(Invoice(id=1, total=Money(0, "USD"), fee=None))
        db_session.commit()
        assert db_session.get(Invoice, 1).fee is None

    def test_currency_mismatch_on_store(self, db_session):
        db_session.add(Invoice(id=1, total=Money(0, "USD"), fee=Money(250, "EUR")))
        with pytest.raises(Exception) as exc_info:
            db_session.flush()
        cause = _root_cause(exc_info.value)
        assert isinstance(cause, CurrencyMismatchError)
        assert cause.currency1 == "USD"
        assert cause.currency2 == "EUR"
        assert cause.operation == "store"

    def test_default_currency_column(self, db_session):
        init_settings(MoneySettings(default_currency="GBP"))
        db_session.add(LedgerLine(id=1, amount=Money(999, "GBP")))
        db_session.commit()
        assert db_session.get(LedgerLine, 1).amount == Money(999, "GBP")

    def test_process_bind_param(self):
        column_type = MoneyAmount("usd")
        assert column_type.process_bind_param(Money(5, "USD"), None) == 5
        assert column_type.process_bind_param(None, None) is None
        with pytest.raises(InvalidArgumentError):
            column_type.process_bind_param(5, None)
        with pytest.raises(CurrencyMismatchError):
            column_type.process_bind_param(Money(5, "EUR"), None)

    def test_process_result_value(self):
        column_type = MoneyAmount("USD")
        assert column_type.process_result_value(5, None) == Money(5, "USD")
        assert column_type.process_result_value(None, None) is None
        with pytest.raises(InvalidArgumentError):
            column_type.process_result_value(5.5, None)

    def test_no_currency_and_no_default(self):
        with pytest.raises(InvalidArgumentError):
            MoneyAmount().process_bind_param(Money(5, "USD"), None)


class TestMoneyMap:
    """JSON column."""

    def test_round_trip(self, db_session):
        db_session.add(Invoice(id=1, total=Money(0, "USD"), snapshot=Money(1005, "KWD")))
        db_session.commit()
        assert db_session.get(Invoice, 1).snapshot == Money(1005, "KWD")

    def test_tampered_row_rejected(self, db_session):
        db_session.add(Invoice(id=1, total=Money(0, "USD"), snapshot=Money(1, "USD")))
        db_session.commit()
        db_session.execute(
            text("UPDATE invoices SET snapshot = :v WHERE id = 1"),
            {"v": '{"amount": 1.5, "currency": "USD"}'},
        )

        with pytest.raises(Exception) as exc_info:
            db_session.execute(select(Invoice.snapshot)).scalar_one()
        assert isinstance(_root_cause(exc_info.value), InvalidArgumentError)

    def test_bind_rejects_non_money(self):
        with pytest.raises(InvalidArgumentError):
            MoneyMap().process_bind_param({"amount": 1, "currency": "USD"}, None)
