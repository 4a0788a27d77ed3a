"""
Configuration Loader (``money_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into a frozen
``money_kernel.domain.settings.MoneySettings``.  Callers normally go through
``money_config.get_active_settings()``; the parse functions are public so
that tests and tooling can build settings from plain dicts.

Document shape
--------------
::

    default_currency: EUR
    format:
      separator: "."
      delimiter: ","
      symbol_on_right: true
      symbol_space: true
    custom_currencies:
      - code: XBT
        name: Bitcoin
        symbol: "₿"
        exponent: 8

Invariants enforced
-------------------
* Unknown top-level, format, or currency keys are rejected; no silent
  defaults for typos.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the parsed
  document for the configuration trace.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Structurally invalid document  -> ``ConfigurationError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from money_kernel.domain.currency import CurrencyInfo
from money_kernel.domain.settings import FormatOptions, MoneySettings
from money_kernel.exceptions import MoneyKernelError

TOP_LEVEL_KEYS = frozenset({"default_currency", "format", "custom_currencies"})
CURRENCY_KEYS = frozenset({"code", "name", "symbol", "exponent", "symbol_on_right"})
REQUIRED_CURRENCY_KEYS = frozenset({"code", "name", "symbol", "exponent"})


class ConfigurationError(Exception):
    """Settings document is structurally invalid.

    Attributes:
        source: File path or "<dict>" the document came from.
        problem: What is wrong with it.
    """

    code: str = "CONFIGURATION_INVALID"

    def __init__(self, source: str, problem: str):
        self.source = source
        self.problem = problem
        super().__init__(f"Invalid money configuration in {source}: {problem}")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigurationError: if the top level is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top level must be a mapping")
    return data


def _check_keys(data: dict[str, Any], allowed: frozenset[str], where: str, source: str) -> None:
    unknown = set(data) - allowed
    if unknown:
        raise ConfigurationError(source, f"unknown {where} key(s): {sorted(map(str, unknown))}")


def parse_format_options(data: dict[str, Any] | None, source: str = "<dict>") -> FormatOptions:
    """Parse the ``format`` section into FormatOptions."""
    if not data:
        return FormatOptions()
    if not isinstance(data, dict):
        raise ConfigurationError(source, "format must be a mapping")
    _check_keys(data, frozenset(FormatOptions.field_names()), "format", source)
    try:
        return FormatOptions(**data)
    except MoneyKernelError as e:
        raise ConfigurationError(source, str(e)) from e


def parse_custom_currency(data: dict[str, Any], source: str = "<dict>") -> CurrencyInfo:
    """Parse one ``custom_currencies`` entry into CurrencyInfo."""
    if not isinstance(data, dict):
        raise ConfigurationError(source, "custom currency entries must be mappings")
    _check_keys(data, CURRENCY_KEYS, "custom currency", source)
    missing = REQUIRED_CURRENCY_KEYS - set(data)
    if missing:
        raise ConfigurationError(source, f"custom currency missing key(s): {sorted(missing)}")
    symbol_on_right = data.get("symbol_on_right", False)
    if not isinstance(symbol_on_right, bool):
        raise ConfigurationError(source, "custom currency symbol_on_right must be a boolean")
    try:
        return CurrencyInfo(
            code=data["code"],
            name=data["name"],
            symbol=str(data["symbol"]),
            exponent=data["exponent"],
            symbol_on_right=symbol_on_right,
        )
    except MoneyKernelError as e:
        raise ConfigurationError(source, str(e)) from e


def parse_settings(data: dict[str, Any], source: str = "<dict>") -> MoneySettings:
    """
    Parse a whole settings document.

    Raises:
        ConfigurationError: on unknown keys, bad values, or a default currency
            missing from the (extended) currency table.
    """
    _check_keys(data, TOP_LEVEL_KEYS, "top-level", source)

    custom_raw = data.get("custom_currencies") or []
    if not isinstance(custom_raw, list):
        raise ConfigurationError(source, "custom_currencies must be a list")
    custom = tuple(parse_custom_currency(item, source) for item in custom_raw)

    try:
        return MoneySettings.build(
            default_currency=data.get("default_currency"),
            format_options=parse_format_options(data.get("format"), source),
            custom_currencies=custom,
        )
    except MoneyKernelError as e:
        raise ConfigurationError(source, str(e)) from e


def load_settings(path: Path) -> MoneySettings:
    """Load and parse a YAML settings file (does not install it)."""
    return parse_settings(load_yaml_file(path), str(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
