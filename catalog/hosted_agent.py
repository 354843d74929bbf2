"""Hosted agents: a descriptor bound to the shared chat model."""

from collections.abc import Callable
from dataclasses import dataclass

from langchain_core.messages import SystemMessage

from catalog.chat_client import ChatModelConfigError, ChatModelProvider
from catalog.models.agent_descriptor import AgentDescriptor

AgentFactory = Callable[[str], AgentDescriptor]


@dataclass(frozen=True)
class AgentDefinition:
    """Static registration entry: a key and the factory that builds its descriptor."""

    key: str
    factory: AgentFactory


class HostedAgent:
    """An agent registered in the catalog."""

    def __init__(
        self,
        key: str,
        descriptor: AgentDescriptor,
        chat_models: ChatModelProvider | None = None,
    ) -> None:
        self.key = key
        self.descriptor = descriptor
        self._chat_models = chat_models

    @property
    def name(self) -> str | None:
        """the descriptor's display name (may differ from the key)."""
        return self.descriptor.name

    @property
    def chat_model(self):
        """the chat model this agent talks to (built on first access)."""
        if self._chat_models is None:
            raise ChatModelConfigError(f"No chat model configured for agent: {self.key}")
        return self._chat_models.get()

    def system_messages(self) -> list[SystemMessage]:
        """render the agent's instructions as a langchain system prompt."""
        if not self.descriptor.instructions:
            return []
        return [SystemMessage(content=self.descriptor.instructions)]

    def __repr__(self) -> str:
        return f"HostedAgent(key={self.key!r}, name={self.name!r})"


def build_hosted_agents(
    definitions: list[AgentDefinition],
    chat_models: ChatModelProvider | None = None,
) -> list[HostedAgent]:
    """run each definition's factory with its key, in registration order."""
    return [
        HostedAgent(definition.key, definition.factory(definition.key), chat_models)
        for definition in definitions
    ]
