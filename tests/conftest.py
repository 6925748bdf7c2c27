"""Fixtures compartidas."""

from __future__ import annotations

import io

import pytest
import structlog
from rich.console import Console

from adapters.async_mapping import shutdown_background_executor
from core.config import AppSettings, reset_settings_cache


@pytest.fixture
def debug_settings() -> AppSettings:
    return AppSettings(debug=True)


@pytest.fixture
def release_settings() -> AppSettings:
    return AppSettings(debug=False)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=400, soft_wrap=True)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MODEL_MAPPER_DEBUG", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session", autouse=True)
def _shutdown_executor():
    yield
    shutdown_background_executor()
