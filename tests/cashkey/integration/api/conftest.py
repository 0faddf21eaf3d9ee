"""Pytest fixtures for API integration tests.

The API is stateless, so every test gets a fresh app built from explicit
settings and talks to it through TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from cashkey.infrastructure.codec import encode
from cashkey.presentation.api.app import API_V1_PREFIX, create_app
from cashkey_config.settings import Settings

TEST_BASE_URL = "https://cashkey.example/app"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def cashflow_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/cashflow"


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        public_base_url=TEST_BASE_URL,
        sample_data_enabled=True,
    )


@pytest.fixture
def client(api_settings):
    with TestClient(create_app(api_settings)) as test_client:
        yield test_client


@pytest.fixture
def no_sample_client(api_settings):
    settings = api_settings.model_copy(update={"sample_data_enabled": False})
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def fragment(mixed_state) -> str:
    return encode(mixed_state)
