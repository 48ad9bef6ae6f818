"""Test helper functions for the avatar API tests."""

from typing import Optional

from config import Settings
from tests.fixtures import TEST_AVATAR_BASE_URL


def build_settings(**overrides) -> Settings:
    """Settings isolated from the host environment."""
    values = {
        "AVATAR_API_KEY": None,
        "AVATAR_BASE_URL": TEST_AVATAR_BASE_URL,
        "CACHE_MAX_ENTRIES": 10000,
    }
    values.update(overrides)
    return Settings(**values)


def assert_error_response(
    response, expected_status: int, expected_error: Optional[str] = None
) -> dict:
    """
    Assert that a response is an error response with expected status and error.

    Args:
        response: Response object
        expected_status: Expected HTTP status code
        expected_error: Optional expected ``error`` value

    Returns:
        The decoded error body
    """
    assert response.status_code == expected_status
    body = response.json()
    assert "error" in body
    if expected_error:
        assert body["error"] == expected_error
    return body
