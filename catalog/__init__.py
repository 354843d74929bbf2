"""Agent Catalog - registry of hosted agents and their display metadata."""

from catalog.cancellation import CancellationToken, ListingCancelled
from catalog.chat_client import ChatModelConfigError, ChatModelProvider
from catalog.hosted_agent import AgentDefinition, HostedAgent
from catalog.models.agent_descriptor import (
    AgentDescriptor,
    BoolProperty,
    OtherProperty,
    StringProperty,
)
from catalog.models.agent_info import AgentInfo, Visibility
from catalog.projection import collect_agent_infos, to_agent_info
from catalog.registry import AgentRegistry, DuplicateAgentError

__all__ = [
    # Models
    "AgentDescriptor",
    "BoolProperty",
    "OtherProperty",
    "StringProperty",
    "AgentInfo",
    "Visibility",
    # Registry
    "AgentDefinition",
    "AgentRegistry",
    "DuplicateAgentError",
    "HostedAgent",
    # Listing
    "CancellationToken",
    "ListingCancelled",
    "collect_agent_infos",
    "to_agent_info",
    # Chat model
    "ChatModelConfigError",
    "ChatModelProvider",
]
