"""In-memory agent registry.

The registry is populated once at startup and never written afterwards, so
concurrent requests can enumerate it without locking.
"""

from collections.abc import AsyncIterator, Iterable

from catalog.cancellation import CancellationToken
from catalog.chat_client import ChatModelProvider
from catalog.hosted_agent import AgentDefinition, HostedAgent, build_hosted_agents
from catalog.models.agent_descriptor import AgentDescriptor


class DuplicateAgentError(Exception):
    """Raised when two agents are registered under the same key."""
    pass


class AgentRegistry:
    """Read-only mapping from agent key to hosted agent, in registration order."""

    def __init__(self, agents: Iterable[HostedAgent] = ()) -> None:
        entries: dict[str, HostedAgent] = {}
        for agent in agents:
            if agent.key in entries:
                raise DuplicateAgentError(f"Agent already registered: {agent.key}")
            entries[agent.key] = agent
        self._agents = entries

    @classmethod
    def from_definitions(
        cls,
        definitions: list[AgentDefinition],
        chat_models: ChatModelProvider | None = None,
    ) -> "AgentRegistry":
        """build the registry from static agent definitions."""
        return cls(build_hosted_agents(definitions, chat_models))

    @property
    def names(self) -> list[str]:
        return list(self._agents)

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, key: object) -> bool:
        return key in self._agents

    def get_agent(self, key: str) -> AgentDescriptor | None:
        """look up one agent's descriptor by key."""
        agent = self._agents.get(key)
        if agent is None:
            return None
        return agent.descriptor

    def get_hosted_agent(self, key: str) -> HostedAgent | None:
        """look up the hosted agent (descriptor plus chat model) by key."""
        return self._agents.get(key)

    async def list_agents(
        self,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[AgentDescriptor]:
        """Yield descriptors in registration order.

        The cancellation token is checked before every step and once more
        before the iteration finishes; if it has fired, ListingCancelled is
        raised instead of completing.
        """
        for agent in list(self._agents.values()):
            if cancellation is not None:
                await cancellation.raise_if_cancelled()
            yield agent.descriptor
        if cancellation is not None:
            await cancellation.raise_if_cancelled()
