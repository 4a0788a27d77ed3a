"""
Settings -- process-wide, read-only money configuration.

Responsibility:
    Holds the default currency, the default format options and the currency
    table for the process. Core operations accept an explicit ``settings``
    argument and fall back to the installed settings only when it is omitted.

Architecture position:
    Kernel > Domain. The YAML loader lives in ``money_config`` (which imports
    this module); the kernel never reads files or environment variables.

Invariants enforced:
    - Settings are frozen records; nothing in the kernel mutates them.
    - ``init_settings`` installs at most one settings object per process.

Failure modes:
    - SettingsAlreadyInitializedError on a second, different install.
    - UnknownCurrencyError when the default currency is not in the table.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields, replace
from typing import Any

from money_kernel.domain.currency import BUILTIN_TABLE, CurrencyInfo, CurrencyTable
from money_kernel.exceptions import (
    InvalidArgumentError,
    SettingsAlreadyInitializedError,
)
from money_kernel.logging_config import get_logger

logger = get_logger("settings")


@dataclass(frozen=True)
class FormatOptions:
    """
    Formatting options; ``None`` means "not set at this level".

    Levels are merged with ``merged_over``: call-site options over
    process defaults over built-in defaults.
    """

    separator: str | None = None
    delimiter: str | None = None
    symbol: bool | None = None
    symbol_on_right: bool | None = None
    symbol_space: bool | None = None
    fractional_unit: bool | None = None
    strip_insignificant_zeros: bool | None = None
    code: bool | None = None

    def __post_init__(self) -> None:
        for name in ("separator", "delimiter"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidArgumentError(name, value, "must be a string")
        for name in (
            "symbol",
            "symbol_on_right",
            "symbol_space",
            "fractional_unit",
            "strip_insignificant_zeros",
            "code",
        ):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise InvalidArgumentError(name, value, "must be a boolean")

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def merged_over(self, lower: FormatOptions) -> FormatOptions:
        """Fields set here win; unset fields come from ``lower``."""
        overrides = {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not None
        }
        return replace(lower, **overrides)


BUILTIN_FORMAT_OPTIONS = FormatOptions(
    separator=",",
    delimiter=".",
    symbol=True,
    symbol_on_right=False,
    symbol_space=False,
    fractional_unit=True,
    strip_insignificant_zeros=False,
    code=False,
)


def format_options(**kwargs: Any) -> FormatOptions:
    """
    Build FormatOptions from keyword arguments.

    Raises:
        InvalidArgumentError: for keys that are not format options.
    """
    unknown = set(kwargs) - set(FormatOptions.field_names())
    if unknown:
        raise InvalidArgumentError(
            "format option", sorted(unknown)[0], "unknown format option"
        )
    return FormatOptions(**kwargs)


@dataclass(frozen=True)
class MoneySettings:
    """
    Process-wide money configuration.

    Contract:
        Constructed once at startup, then only read. ``default_currency`` is
        validated against ``currencies`` at construction.
    """

    default_currency: str | None = None
    format_options: FormatOptions = field(default_factory=FormatOptions)
    currencies: CurrencyTable = BUILTIN_TABLE

    def __post_init__(self) -> None:
        if self.default_currency is not None:
            object.__setattr__(
                self, "default_currency", self.currencies.validate(self.default_currency)
            )

    @classmethod
    def build(
        cls,
        *,
        default_currency: str | None = None,
        format_options: FormatOptions | None = None,
        custom_currencies: tuple[CurrencyInfo, ...] = (),
    ) -> MoneySettings:
        table = BUILTIN_TABLE.with_custom(custom_currencies) if custom_currencies else BUILTIN_TABLE
        return cls(
            default_currency=default_currency,
            format_options=format_options or FormatOptions(),
            currencies=table,
        )


DEFAULT_SETTINGS = MoneySettings()


# ---------------------------------------------------------------------------
# Process-wide holder
# ---------------------------------------------------------------------------

_installed: MoneySettings | None = None
_lock = threading.Lock()


def init_settings(settings: MoneySettings) -> MoneySettings:
    """
    Install the process-wide settings (once).

    Installing the same object again is a no-op.

    Raises:
        SettingsAlreadyInitializedError: if different settings are installed.
    """
    global _installed
    if not isinstance(settings, MoneySettings):
        raise InvalidArgumentError("settings", settings, "must be MoneySettings")
    with _lock:
        if _installed is not None:
            if _installed == settings:
                return _installed
            raise SettingsAlreadyInitializedError(_installed.default_currency)
        _installed = settings

    logger.info(
        "money_settings_installed",
        extra={
            "default_currency": settings.default_currency,
            "currency_count": len(settings.currencies),
        },
    )
    return settings


def get_settings() -> MoneySettings:
    """Installed settings, or the built-in defaults when none are installed."""
    return _installed if _installed is not None else DEFAULT_SETTINGS


def resolve_settings(settings: MoneySettings | None) -> MoneySettings:
    return settings if settings is not None else get_settings()


def currency_table(settings: MoneySettings | None = None) -> CurrencyTable:
    """Currency table of the given (or installed) settings."""
    return resolve_settings(settings).currencies


def reset_settings() -> None:
    """Uninstall process-wide settings. FOR TESTING ONLY."""
    global _installed
    with _lock:
        _installed = None
