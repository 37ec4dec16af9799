"""Centralized logging setup for the change log catalog."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "changelog_catalog_stream"
_FILE_HANDLER_NAME = "changelog_catalog_file"


def _remove_handlers(name: str) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == name:
            root.removeHandler(handler)
            handler.close()


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").strip().upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None, quiet: bool = False) -> None:
    """Install the console handler on the root logger.

    The level comes from ``level`` when given, else from the
    CHANGELOG_CATALOG_LOG_LEVEL environment variable, else INFO. Calling
    this more than once replaces the previous console handler and drops any
    file handler added by :func:`add_file_handler`.
    """
    root = logging.getLogger()
    _remove_handlers(_HANDLER_NAME)
    _remove_handlers(_FILE_HANDLER_NAME)

    root.setLevel(_resolve_level(level))
    handler = logging.NullHandler() if quiet else logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(handler)


def add_file_handler(log_file: str) -> logging.Handler:
    """Mirror log records into ``log_file``, replacing a previous log file."""
    _remove_handlers(_FILE_HANDLER_NAME)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.set_name(_FILE_HANDLER_NAME)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.getLogger().addHandler(file_handler)
    return file_handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Check whether DEBUG records of ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}
