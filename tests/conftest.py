"""Shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from loguru import logger

from period_formatter.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and any PERIOD_FORMATTER_* variables around each test."""
    for name in (
        "PERIOD_FORMATTER_DEFAULT_SEPARATOR",
        "PERIOD_FORMATTER_DEFAULT_MAX_LENGTH",
        "PERIOD_FORMATTER_DEBUG",
        "PERIOD_FORMATTER_LOG_LEVEL",
        "PERIOD_FORMATTER_APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Remove sinks the CLI installs so they never outlive a captured stream."""
    yield
    logger.remove()
    logger.disable("period_formatter")
