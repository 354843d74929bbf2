"""End-to-end tests for the catalog HTTP API."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from catalog.cancellation import CancellationToken
from catalog.config import get_bind_address
from catalog.hosted_agent import HostedAgent
from catalog.models.agent_descriptor import AgentDescriptor
from catalog.registry import AgentRegistry
from catalog.sample_agents import SAMPLE_AGENTS
from catalog_server.agent_routes import get_cancellation
from catalog_server.app import create_app


EXPECTED_SAMPLE_LISTING = [
    {
        "name": "weather-agent",
        "icon": "https://example.com/icons/weather.png",
        "beta": False,
        "visibility": "Visible",
    },
    {
        "name": "travel-agent",
        "icon": "https://example.com/icons/travel.png",
        "beta": True,
        "visibility": "Visible",
    },
    {
        "name": "experimental-agent",
        "icon": "https://example.com/icons/experimental.png",
        "beta": True,
        "visibility": "Unlisted",
    },
]


class FailingRegistry(AgentRegistry):
    """Registry whose enumeration breaks after the first agent."""

    async def list_agents(self, cancellation=None):
        for descriptor in [AgentDescriptor(name="first")]:
            yield descriptor
        raise RuntimeError("registry backend unavailable")


@pytest.fixture
def client():
    with TestClient(create_app()) as client:
        yield client


class TestListAgents:
    """Test GET /agents."""

    def test_sample_catalog(self, client):
        response = client.get("/agents")
        assert response.status_code == 200
        assert response.json() == EXPECTED_SAMPLE_LISTING

    def test_listing_is_deterministic(self, client):
        first = client.get("/agents").json()
        second = client.get("/agents").json()
        assert first == second

    def test_defaults_and_missing_icon(self):
        registry = AgentRegistry([
            HostedAgent("bare", AgentDescriptor(name="bare")),
            HostedAgent("odd", AgentDescriptor(
                name="odd",
                properties={"beta": "yes", "visibility": "hidden", "icon": None},
            )),
            HostedAgent("nameless", AgentDescriptor(name="")),
        ])
        with TestClient(create_app(registry)) as client:
            body = client.get("/agents").json()

        assert body == [
            {"name": "bare", "beta": False, "visibility": "Visible"},
            {"name": "odd", "beta": False, "visibility": "Visible"},
            {"name": "Unknown", "beta": False, "visibility": "Visible"},
        ]
        assert all("icon" not in agent for agent in body)

    def test_empty_registry(self):
        with TestClient(create_app(AgentRegistry())) as client:
            response = client.get("/agents")
        assert response.status_code == 200
        assert response.json() == []

    def test_cancelled_listing_has_no_body(self):
        app = create_app()

        def cancelled_token() -> CancellationToken:
            token = CancellationToken()
            token.cancel()
            return token

        app.dependency_overrides[get_cancellation] = cancelled_token
        with TestClient(app) as client:
            response = client.get("/agents")

        assert response.status_code == 499
        assert response.content == b""

    def test_registry_failure_is_server_error(self):
        app = create_app(FailingRegistry())
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/agents")

        assert response.status_code == 500
        assert "first" not in response.text


class TestGetAgent:
    """Test GET /agents/{name}."""

    def test_hit(self, client):
        response = client.get("/agents/travel-agent")
        assert response.status_code == 200
        assert response.json() == EXPECTED_SAMPLE_LISTING[1]

    def test_miss(self, client):
        response = client.get("/agents/missing-agent")
        assert response.status_code == 404
        assert response.json()["detail"] == "Agent not found: missing-agent"


class TestRoot:
    """Test the health endpoint."""

    def test_health(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["agents"] == 3
        assert data["endpoints"]["agents"] == "/agents"


def _http_scope(path: str) -> dict:
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver")],
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
    }


class TestClientDisconnect:
    """Test the listing stops when the client goes away."""

    def test_disconnected_client_gets_no_body(self):
        app = create_app()
        app.state.registry = AgentRegistry.from_definitions(SAMPLE_AGENTS)
        sent = []

        async def receive():
            return {"type": "http.disconnect"}

        async def send(message):
            sent.append(message)

        asyncio.run(app(_http_scope("/agents"), receive, send))

        start = next(m for m in sent if m["type"] == "http.response.start")
        body = b"".join(m.get("body", b"") for m in sent if m["type"] == "http.response.body")
        assert start["status"] == 499
        assert body == b""


class TestServerConfig:
    """Test configuration read by the server."""

    def test_bad_port_does_not_break_app_creation(self, monkeypatch):
        """The port is only parsed when actually serving."""
        monkeypatch.setenv("CATALOG_PORT", "not-a-port")
        with TestClient(create_app()) as client:
            assert client.get("/agents").status_code == 200
        with pytest.raises(ValueError):
            get_bind_address()

    def test_bind_address_defaults(self, monkeypatch):
        monkeypatch.delenv("CATALOG_HOST", raising=False)
        monkeypatch.delenv("CATALOG_PORT", raising=False)
        assert get_bind_address() == ("0.0.0.0", 8000)
