"""Client SDK for reading a running catalog server.

so that a frontend or another service can list agents with one line of code
agents = CatalogClient("http://localhost:8000").list_agents()
"""

from __future__ import annotations

import httpx

from catalog.models.agent_info import AgentInfo, Visibility


class CatalogClientError(Exception):
    """Exception raised when the catalog cannot be read."""
    pass


class CatalogClient:
    """Fetch agent listings from a catalog server."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Base URL of the catalog server
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                return client.get(url)
        except httpx.RequestError as e:
            raise CatalogClientError(
                f"Failed to connect to server at {self.base_url}: {e}"
            ) from e

    def list_agents(self, include_unlisted: bool = True) -> list[AgentInfo]:
        """Get every agent in the catalog, in registration order.

        Args:
            include_unlisted: keep agents whose visibility is Unlisted
        """
        response = self._get("/agents")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogClientError(f"Agent listing failed: {e}") from e

        agents = [AgentInfo.model_validate(item) for item in response.json()]
        if include_unlisted:
            return agents
        return [agent for agent in agents if agent.visibility == Visibility.visible]

    def get_agent(self, name: str) -> AgentInfo:
        """Get a single agent's display metadata."""
        response = self._get(f"/agents/{name}")
        if response.status_code == 404:
            raise CatalogClientError(f"Agent not found: {name}")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogClientError(f"Agent lookup failed: {e}") from e
        return AgentInfo.model_validate(response.json())
