"""Shared test configuration for hookpoint tests."""

import os
from collections.abc import Generator

import pytest

from hookpoint.config import get_settings
from hookpoint.core.logging import setup_logging


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Reuse the library logging pipeline so structlog processors behave
    # identically in tests.
    setup_logging(json_logs=False, log_level_name="DEBUG")


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Generator[None, None, None]:
    """Run each test outside any hookpoint config file or HOOKPOINT_* env."""
    for key in list(os.environ):
        if key.upper().startswith("HOOKPOINT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
