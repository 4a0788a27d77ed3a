"""
Formatting -- render Money as human-readable text.

Option precedence, highest first:
    1. call-site options (``FormatOptions`` and/or keyword overrides)
    2. process-wide defaults (``MoneySettings.format_options``)
    3. the currency's own symbol placement (``symbol_on_right`` only)
    4. built-in defaults (``BUILTIN_FORMAT_OPTIONS``)

Output is plain text; escaping for HTML or other markup is the caller's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from money_kernel.domain.currency import CurrencyInfo
from money_kernel.domain.settings import (
    BUILTIN_FORMAT_OPTIONS,
    FormatOptions,
    MoneySettings,
    format_options,
    resolve_settings,
)
from money_kernel.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from money_kernel.domain.values import Money

__all__ = ["FormatOptions", "resolve_options", "to_string", "group_digits"]


def _as_options(options: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    if isinstance(options, Mapping):
        return format_options(**options)
    raise InvalidArgumentError("options", options, "must be FormatOptions or a mapping")


def resolve_options(
    info: CurrencyInfo,
    options: FormatOptions | Mapping[str, Any] | None = None,
    *,
    settings: MoneySettings | None = None,
    **overrides: Any,
) -> FormatOptions:
    """
    Merge option levels into a fully populated FormatOptions.

    Raises:
        InvalidArgumentError: if the merged separator equals the delimiter,
            which would make ``"1,234,56"`` unreadable.
    """
    call_site = format_options(**overrides).merged_over(_as_options(options))
    currency_level = FormatOptions(symbol_on_right=info.symbol_on_right)
    base = currency_level.merged_over(BUILTIN_FORMAT_OPTIONS)
    process = resolve_settings(settings).format_options
    resolved = call_site.merged_over(process.merged_over(base))
    if resolved.separator and resolved.separator == resolved.delimiter:
        raise InvalidArgumentError(
            "separator", resolved.separator, "must differ from the delimiter"
        )
    return resolved


def group_digits(digits: str, separator: str) -> str:
    """Insert ``separator`` every three digits from the right."""
    if not separator or len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def _number(amount: int, exponent: int, opts: FormatOptions) -> str:
    integer_part, fractional_part = divmod(abs(amount), 10 ** exponent)
    text = group_digits(str(integer_part), opts.separator)

    # Zero-exponent currencies never show a fraction
    if opts.fractional_unit and exponent > 0:
        fraction = str(fractional_part).zfill(exponent)
        if opts.strip_insignificant_zeros:
            fraction = fraction.rstrip("0")
        if fraction:
            text = f"{text}{opts.delimiter}{fraction}"

    if amount < 0:
        text = f"-{text}"
    return text


def to_string(
    money: Money,
    options: FormatOptions | Mapping[str, Any] | None = None,
    *,
    settings: MoneySettings | None = None,
    **overrides: Any,
) -> str:
    """
    Format Money as text.

    ``to_string(Money(123456, "EUR"), separator=".", delimiter=",", symbol=False)``
    gives ``"1.234,56"``.

    Raises:
        UnknownCurrencyError: if the currency is not in the table.
        InvalidArgumentError: on unknown option names or wrongly typed values.
    """
    resolved = resolve_settings(settings)
    info = resolved.currencies.get(money.currency)
    opts = resolve_options(info, options, settings=resolved, **overrides)

    text = _number(money.amount, info.exponent, opts)

    if opts.symbol:
        space = " " if opts.symbol_space else ""
        if opts.symbol_on_right:
            text = f"{text}{space}{info.symbol}"
        else:
            text = f"{info.symbol}{space}{text}"

    if opts.code:
        text = f"{text} {info.code}"
    return text
