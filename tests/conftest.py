"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os

import pytest

_ENV_PREFIX = "PARSING_STRINGS_"


@pytest.fixture(autouse=True)
def clean_parsing_env(monkeypatch):
    """Remove PARSING_STRINGS_* variables so tests see default configuration."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    """Remove the parsing_strings console handler and restore the root level afterwards."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler.get_name() == "parsing_strings.console":
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
