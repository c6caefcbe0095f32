"""Shared fixtures for integration tests."""

import pytest

from osdf.client import ClientSettings


@pytest.fixture
def osdf_settings() -> ClientSettings:
    """Settings from OSDF_* variables, with the test:test account by default."""
    settings = ClientSettings.from_env()
    if settings.auth is None:
        settings = ClientSettings.from_mapping({**settings.model_dump(), "auth": "test:test"})
    return settings
