"""
Logging configuration for applications embedding parsing_strings.

The library itself only creates module loggers; setup_logging wires a single
console handler onto the root logger for scripts and services that want the
same output format everywhere.
"""

import logging
import sys
import threading
from typing import Optional, Union

from .config import ConfigurationError, read_setting, setting_name
from .config.settings import LOG_LEVEL

LOG_LEVEL_ENV = setting_name(LOG_LEVEL)

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_HANDLER_NAME = "parsing_strings.console"
_TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = read_setting(LOG_LEVEL) or "INFO"
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_setting(LOG_LEVEL_ENV, level, "a logging level name")
    return resolved


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def _find_console_handler(root_logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def setup_logging(level: Union[int, str, None] = None) -> logging.Handler:
    """Configure root logging; repeated calls only adjust the level."""

    resolved = _resolve_level(level)
    with _config_lock:
        root_logger = logging.getLogger()
        handler = _find_console_handler(root_logger)
        if handler is None:
            handler = _build_console_handler(resolved)
            root_logger.addHandler(handler)
        else:
            handler.setLevel(resolved)
        root_logger.setLevel(resolved)
        return handler


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]
