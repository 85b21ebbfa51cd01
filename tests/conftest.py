"""Shared test fixtures and configuration."""

import os
from typing import Generator, List

import httpx
import pytest

# Set TESTING flag to prevent loading .env file
os.environ['TESTING'] = '1'

from gmaps_geocode.config import Settings, get_settings


@pytest.fixture(autouse=True)
def setup_test_env() -> Generator[None, None, None]:
    """Isolate each test from geocoding variables set in the environment."""
    original_env = os.environ.copy()

    os.environ['TESTING'] = '1'
    for name in list(os.environ):
        if name.startswith('GEOCODE_'):
            del os.environ[name]
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment for tests that need to test missing variables."""
    original_env = os.environ.copy()

    os.environ.clear()
    os.environ['TESTING'] = '1'

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_settings() -> Settings:
    """Settings without credentials and with the default endpoint."""
    return Settings()


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by a mock transport, in order."""
    return []
