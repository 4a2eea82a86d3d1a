"""Pytest configuration for the client test suite.

Provides:
1. Markers for unit/integration tests
2. Automatic asyncio marker on coroutine tests
3. Shared builders for backend user payloads
"""

import inspect
from typing import Any

import pytest


def build_user_payload(
    *,
    user_id: str = "u1",
    role: str = "Student",
    is_verified: bool = True,
    **extra: Any,
) -> dict[str, Any]:
    """Build a backend `user` object for testing.

    Args:
        user_id: Value of the Mongo-style `_id` field.
        role: Raw role string.
        is_verified: Value of `isVerified`.
        **extra: Additional fields merged into the payload.

    Returns:
        User dict shaped like the auth endpoints return it.
    """
    payload: dict[str, Any] = {
        "_id": user_id,
        "name": "Test User",
        "email": "test@example.com",
        "role": role,
        "isVerified": is_verified,
        "profile": {"department": "CSE"},
    }
    payload.update(extra)
    return payload


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against a mocked HTTP backend"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
