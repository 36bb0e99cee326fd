"""PARSING_STRINGS_* configuration."""

from .errors import ConfigurationError
from .settings import load_decimal_limits, read_setting, setting_name

__all__ = [
    "ConfigurationError",
    "load_decimal_limits",
    "read_setting",
    "setting_name",
]
