"""
Factory -- per-currency constructors driven by the currency table.

``for_currency("USD")(1234)`` is ``Money(1234, "USD")``. There is no
hand-written constructor per currency; whatever the table knows, the factory
can build, custom currencies included.
"""

from __future__ import annotations

from dataclasses import dataclass

from money_kernel.domain.currency import CurrencyInfo
from money_kernel.domain.settings import MoneySettings, resolve_settings
from money_kernel.domain.values import Money


@dataclass(frozen=True)
class CurrencyConstructor:
    """Callable bound to one validated currency."""

    info: CurrencyInfo
    settings: MoneySettings

    @property
    def code(self) -> str:
        return self.info.code

    def __call__(self, amount: int) -> Money:
        return Money.of(amount, self.info.code, settings=self.settings)

    def units(self, major: int, minor: int = 0) -> Money:
        return Money.from_units(major, minor, self.info.code, settings=self.settings)

    def zero(self) -> Money:
        return Money.zero(self.info.code, settings=self.settings)

    def __repr__(self) -> str:
        return f"CurrencyConstructor({self.info.code!r})"


def for_currency(code: str, *, settings: MoneySettings | None = None) -> CurrencyConstructor:
    """
    Constructor for Money in ``code``.

    Raises:
        UnknownCurrencyError: at factory creation, if ``code`` is unknown.
    """
    resolved = resolve_settings(settings)
    return CurrencyConstructor(info=resolved.currencies.get(code), settings=resolved)
