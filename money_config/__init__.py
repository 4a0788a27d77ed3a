"""
money_config -- single public entrypoint for money settings.

Responsibility:
    Turns a YAML settings file into the process-wide ``MoneySettings`` and
    installs it once through ``money_kernel.domain.settings.init_settings``.
    This is the only place that reads configuration files or the
    ``MONEY_KERNEL_CONFIG`` environment variable.

Architecture position:
    Configuration -- sits above ``money_kernel``.  The kernel MUST NEVER
    import from ``money_config``.

Audit relevance:
    Every successful ``get_active_settings()`` call emits a
    ``MONEY_CONFIG_TRACE`` log entry with the source, checksum, default
    currency and custom-currency count.  Records emitted while loading and
    installing carry ``operation="get_active_settings"`` via ``LogContext``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from money_config.loader import (
    ConfigurationError,
    compute_checksum,
    load_settings,
    load_yaml_file,
    parse_settings,
)
from money_kernel.domain.settings import DEFAULT_SETTINGS, MoneySettings, init_settings
from money_kernel.logging_config import LogContext

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigurationError",
    "get_active_settings",
    "load_settings",
    "parse_settings",
]

_logger = logging.getLogger("money_kernel.config")

CONFIG_ENV_VAR = "MONEY_KERNEL_CONFIG"


def get_active_settings(path: Path | str | None = None) -> MoneySettings:
    """The public configuration entrypoint; call once at process start.

    Reads ``path`` (or the file named by ``MONEY_KERNEL_CONFIG``), installs
    the parsed settings process-wide and returns them.  With neither, the
    built-in defaults are installed.

    Raises:
        FileNotFoundError: if the named file does not exist.
        ConfigurationError: if the document is invalid.
        SettingsAlreadyInitializedError: if different settings were
            already installed.
    """
    raw_path = path if path is not None else os.environ.get(CONFIG_ENV_VAR)

    with LogContext.bind(operation="get_active_settings"):
        if raw_path:
            source = Path(raw_path)
            data = load_yaml_file(source)
            settings = parse_settings(data, str(source))
            checksum = compute_checksum(data)
        else:
            source = None
            settings = DEFAULT_SETTINGS
            checksum = compute_checksum({})

        installed = init_settings(settings)

        _logger.info(
            "MONEY_CONFIG_TRACE",
            extra={
                "trace_type": "MONEY_CONFIG_TRACE",
                "source": str(source) if source else "<builtin>",
                "checksum": checksum,
                "default_currency": installed.default_currency,
                "currency_count": len(installed.currencies),
            },
        )
    return installed
