import pytest
from fastapi.testclient import TestClient

from avatar_api import create_app
from avatar_api.plugins.cache import CacheManager
from tests.fixtures import TEST_API_KEY
from tests.helpers import build_settings


@pytest.fixture()
def cache_manager():
    """A fresh cache manager."""
    return CacheManager(max_entries=10000)


@pytest.fixture()
def test_client(cache_manager):
    """Create a test client without authentication."""
    app = create_app(settings=build_settings(), cache_manager=cache_manager)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def secured_client(cache_manager):
    """Create a test client requiring the test API key."""
    app = create_app(
        settings=build_settings(AVATAR_API_KEY=TEST_API_KEY), cache_manager=cache_manager
    )
    with TestClient(app) as test_client:
        yield test_client
