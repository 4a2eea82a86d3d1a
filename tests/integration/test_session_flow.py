"""Integration tests for the session manager over the real HTTP stack.

Tests cover:
- Bootstrap against `GET /auth/me` (no token, accepted, rejected)
- Login and registration through the real AuthAPI and CampusApiClient
- Bearer header carried by later resource requests, and dropped on logout
- 401 on a resource request → SessionInvalidated → logout via the event bus

Architecture:
- Real CampusApiClient, CampusAPI, InMemoryEventBus, MemoryTokenStore
- Backend mocked with pytest-httpx
- Logger replaced by MagicMock (output not under test)
"""

from unittest.mock import MagicMock

import httpx
import pytest
from pytest_httpx import HTTPXMock

from campus_client.application.commands import IdCardUpload, RegisterUser
from campus_client.application.session import SessionManager
from campus_client.core.constants import NETWORK_ERROR_MESSAGE
from campus_client.core.result import Failure, Success
from campus_client.domain.enums import SessionStatus
from campus_client.domain.errors import ApiAuthenticationError
from campus_client.domain.events import SessionInvalidated
from campus_client.infrastructure.api import CampusAPI
from campus_client.infrastructure.events import InMemoryEventBus
from campus_client.infrastructure.http import CampusApiClient
from campus_client.infrastructure.storage import MemoryTokenStore
from tests.conftest import build_user_payload

BASE_URL = "http://campus.test/api"


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus(logger=MagicMock())


@pytest.fixture
def api(event_bus) -> CampusAPI:
    client = CampusApiClient(base_url=BASE_URL, timeout=5.0, event_bus=event_bus)
    return CampusAPI(client)


@pytest.fixture
def manager(api, token_store, event_bus) -> SessionManager:
    manager = SessionManager(
        auth_gateway=api.auth,
        http_client=api.client,
        token_store=token_store,
        event_bus=event_bus,
        logger=MagicMock(),
    )
    event_bus.subscribe(SessionInvalidated, manager.handle_session_invalidated)
    return manager


def _auth_body(role: str, token: str) -> dict:
    return {
        "success": True,
        "message": "Login successful",
        "data": {"user": build_user_payload(role=role), "token": token},
    }


# =============================================================================
# Test: bootstrap
# =============================================================================


@pytest.mark.integration
class TestBootstrapFlow:
    @pytest.mark.asyncio
    async def test_fresh_process_makes_no_request(self, manager, httpx_mock: HTTPXMock):
        await manager.bootstrap()

        assert manager.state.status is SessionStatus.READY
        assert manager.state.identity is None
        assert httpx_mock.get_requests() == []

    @pytest.mark.asyncio
    async def test_persisted_token_restores_user(
        self, manager, token_store, httpx_mock: HTTPXMock
    ):
        token_store.save("abc123")
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/auth/me",
            match_headers={"Authorization": "Bearer abc123"},
            json={"success": True, "data": {"user": build_user_payload(user_id="u1")}},
        )

        await manager.bootstrap()

        assert manager.state.status is SessionStatus.READY
        assert manager.state.identity.id == "u1"
        assert manager.is_verified() is True

    @pytest.mark.asyncio
    async def test_rejected_token_is_dropped_silently(
        self, manager, api, token_store, httpx_mock: HTTPXMock
    ):
        token_store.save("abc123")
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/auth/me",
            status_code=401,
            json={"success": False, "message": "Token is not valid"},
        )

        await manager.bootstrap()

        assert manager.state.status is SessionStatus.READY
        assert manager.state.identity is None
        assert manager.state.last_error is None
        assert token_store.load() is None
        assert api.client.bearer_token is None


# =============================================================================
# Test: login / register
# =============================================================================


@pytest.mark.integration
class TestLoginFlow:
    @pytest.mark.asyncio
    async def test_login_then_header_on_resource_requests(
        self, manager, api, token_store, httpx_mock: HTTPXMock
    ):
        await manager.bootstrap()
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/login",
            match_json={"email": "a@b.com", "password": "secret"},
            json=_auth_body("Recruiter", "tok1"),
        )
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/jobs/my-postings",
            match_headers={"Authorization": "Bearer tok1"},
            json={"success": True, "data": []},
        )

        result = await manager.login("a@b.com", "secret")
        postings = await api.jobs.get_my_postings()

        assert isinstance(result, Success)
        assert manager.state.credential == "tok1"
        assert manager.state.identity.role == "Recruiter"
        assert token_store.load() == "tok1"
        assert manager.has_role("Recruiter") is True
        assert manager.has_role("Admin") is False
        assert postings == Success(value={"success": True, "data": []})

    @pytest.mark.asyncio
    async def test_rejected_login_surfaces_server_message(
        self, manager, event_bus, httpx_mock: HTTPXMock
    ):
        await manager.bootstrap()
        invalidations = []

        async def record(event):
            invalidations.append(event)

        event_bus.subscribe(SessionInvalidated, record)
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/login",
            status_code=401,
            json={"success": False, "message": "Invalid credentials"},
        )

        result = await manager.login("bad@x.com", "wrong")

        assert result == Failure(error="Invalid credentials")
        assert manager.state.last_error == "Invalid credentials"
        assert manager.state.status is SessionStatus.READY
        assert invalidations == []

    @pytest.mark.asyncio
    async def test_unreachable_backend(self, manager, httpx_mock: HTTPXMock):
        await manager.bootstrap()
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        result = await manager.login("a@b.com", "secret")

        assert result == Failure(error=NETWORK_ERROR_MESSAGE)

    @pytest.mark.asyncio
    async def test_student_registration_awaiting_verification(
        self, manager, token_store, httpx_mock: HTTPXMock
    ):
        await manager.bootstrap()
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/register",
            status_code=201,
            json={
                "success": True,
                "message": "Registration successful. Please wait for admin verification.",
            },
        )
        command = RegisterUser(
            name="Ada",
            email="ada@g.bracu.ac.bd",
            password="secret123",
            role="Student",
            department="CSE",
            batch="2021",
            id_card=IdCardUpload(
                filename="card.jpg", content=b"JPEGDATA", content_type="image/jpeg"
            ),
        )

        result = await manager.register(command)

        assert isinstance(result, Success)
        assert result.value.session_created is False
        assert manager.state.is_authenticated is False
        assert token_store.load() is None

        request = httpx_mock.get_request()
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="department"' in body
        assert b'name="bracuIdCard"; filename="card.jpg"' in body
        assert b"JPEGDATA" in body

    @pytest.mark.asyncio
    async def test_recruiter_registration_without_file_is_still_multipart(
        self, manager, token_store, httpx_mock: HTTPXMock
    ):
        await manager.bootstrap()
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/register",
            status_code=201,
            json=_auth_body("Recruiter", "tok2"),
        )

        result = await manager.register(
            RegisterUser(
                name="Grace",
                email="grace@acme.com",
                password="secret123",
                role="Recruiter",
                company="Acme",
                job_title="Lead",
            )
        )

        assert result.value.session_created is True
        assert token_store.load() == "tok2"
        request = httpx_mock.get_request()
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="jobTitle"' in body
        assert b"bracuIdCard" not in body


# =============================================================================
# Test: invalidation and logout
# =============================================================================


@pytest.mark.integration
class TestSessionInvalidation:
    @pytest.mark.asyncio
    async def test_401_on_resource_request_logs_out(
        self, manager, api, token_store, httpx_mock: HTTPXMock
    ):
        await manager.bootstrap()
        httpx_mock.add_response(
            method="POST", url=f"{BASE_URL}/auth/login", json=_auth_body("Student", "tok1")
        )
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/alerts",
            status_code=401,
            json={"success": False, "message": "Token expired"},
        )
        await manager.login("a@b.com", "secret")

        result = await api.alerts.list()

        assert isinstance(result, Failure)
        assert isinstance(result.error, ApiAuthenticationError)
        assert manager.state.is_authenticated is False
        assert token_store.load() is None
        assert api.client.bearer_token is None

    @pytest.mark.asyncio
    async def test_logout_stops_sending_header(self, manager, api, httpx_mock: HTTPXMock):
        await manager.bootstrap()
        httpx_mock.add_response(
            method="POST", url=f"{BASE_URL}/auth/login", json=_auth_body("Student", "tok1")
        )
        httpx_mock.add_response(
            method="GET", url=f"{BASE_URL}/courses", json={"success": True, "data": []}
        )
        await manager.login("a@b.com", "secret")

        manager.logout()
        await api.courses.list()

        courses_request = httpx_mock.get_requests()[-1]
        assert "Authorization" not in courses_request.headers
