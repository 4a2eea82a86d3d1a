"""Unit tests for the dependency container.

Tests cover:
- Singleton behavior of every factory (lru_cache)
- Token store selection (file when a path is configured, memory otherwise)
- Shared HTTP client between the endpoint aggregate and the session manager
- SessionInvalidated subscription made by create_session_manager()
"""

from unittest.mock import patch

import pytest

from campus_client.core.config import Settings
from campus_client.core.container import (
    create_session_manager,
    get_api_client,
    get_campus_api,
    get_event_bus,
    get_logger,
    get_token_store,
)
from campus_client.domain.events import SessionInvalidated
from campus_client.infrastructure.events import InMemoryEventBus
from campus_client.infrastructure.logging import ConsoleAdapter
from campus_client.infrastructure.storage import FileTokenStore, MemoryTokenStore

_FACTORIES = (get_logger, get_event_bus, get_token_store, get_api_client, get_campus_api)


@pytest.fixture(autouse=True)
def clear_container():
    for factory in _FACTORIES:
        factory.cache_clear()
    yield
    for factory in _FACTORIES:
        factory.cache_clear()


@pytest.fixture
def test_settings():
    configured = Settings(
        environment="testing",
        api_base_url="http://campus.test/api/",
        auth_path="session",
        request_timeout=5.0,
    )
    with patch("campus_client.core.container.infrastructure.settings", configured):
        yield configured


@pytest.mark.unit
class TestInfrastructureFactories:
    def test_factories_are_singletons(self, test_settings):
        for factory in _FACTORIES:
            assert factory() is factory()

    def test_logger_and_bus_types(self, test_settings):
        assert isinstance(get_logger(), ConsoleAdapter)
        assert isinstance(get_event_bus(), InMemoryEventBus)

    def test_memory_token_store_without_path(self, test_settings):
        assert isinstance(get_token_store(), MemoryTokenStore)

    def test_file_token_store_with_path(self, tmp_path):
        configured = Settings(token_store_path=tmp_path / "session.json")
        with patch("campus_client.core.container.infrastructure.settings", configured):
            store = get_token_store()

        assert isinstance(store, FileTokenStore)

    def test_api_client_uses_settings(self, test_settings):
        client = get_api_client()

        assert client.base_url == "http://campus.test/api"

    def test_campus_api_shares_client(self, test_settings):
        api = get_campus_api()

        assert api.client is get_api_client()


@pytest.mark.unit
class TestCreateSessionManager:
    def test_managers_are_independent(self, test_settings):
        assert create_session_manager() is not create_session_manager()

    @pytest.mark.asyncio
    async def test_invalidation_logs_out(self, test_settings):
        manager = create_session_manager()
        get_token_store().save("abc123")
        get_api_client().set_bearer_token("abc123")

        await get_event_bus().publish(SessionInvalidated(path="/jobs"))

        assert get_token_store().load() is None
        assert get_api_client().bearer_token is None
        assert manager.state.credential is None

    @pytest.mark.asyncio
    async def test_detached_manager_ignores_invalidation(self, test_settings):
        detached = create_session_manager()
        attached = create_session_manager()
        get_event_bus().unsubscribe(SessionInvalidated, detached.handle_session_invalidated)
        seen = []
        detached.subscribe(seen.append)
        attached_states = []
        attached.subscribe(attached_states.append)

        await get_event_bus().publish(SessionInvalidated(path="/jobs"))

        assert seen == []
        assert [state.status.value for state in attached_states] == ["ready"]
