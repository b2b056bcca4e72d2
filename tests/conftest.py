"""Root test configuration: shared fixtures for all test modules.

IMPORTANT: Environment variables are set BEFORE any besttrack imports
so that config.py loads test Settings without a .env file.
"""

from __future__ import annotations

import io
import logging
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("MAX_INPUT_BYTES", "65536")

# Now safe to import besttrack modules
import pytest

from besttrack.common.config import Settings, get_settings
from besttrack.common.logging import MODULE_TAGS, StructuredFormatter, get_logger

# ─── Clear cached settings so test env vars are used ───
get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings as loaded under the test environment."""
    return get_settings()


@pytest.fixture
def log_output():
    """Formatted log lines from every tagged logger during one test.

    Module loggers bind sys.stdout when they are first created, which for
    most of them happens at import time during collection, so capfd cannot
    see their output. A fresh handler per test can.
    """
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())

    loggers = [get_logger(tag).logger for tag in MODULE_TAGS]
    for logger in loggers:
        logger.addHandler(handler)
    yield stream
    for logger in loggers:
        logger.removeHandler(handler)
