"""Database layer - SQLAlchemy column types for Money."""

from money_kernel.db.types import MoneyAmount, MoneyMap, money_composite

__all__ = [
    "MoneyAmount",
    "MoneyMap",
    "money_composite",
]
