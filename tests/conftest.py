"""Shared test fixtures for pagenav."""

from __future__ import annotations

import pytest

from pagenav.core.config import get_config
from pagenav.urls import reset_current_request_url, set_current_request_url


@pytest.fixture(autouse=True)
def _reset_runtime_state(monkeypatch):
    """Reset the cached config and the context-local request URL around each test."""
    monkeypatch.delenv("PAGENAV_CONFIG_NAME", raising=False)
    get_config.cache_clear()
    token = set_current_request_url("")
    yield
    reset_current_request_url(token)
    get_config.cache_clear()
