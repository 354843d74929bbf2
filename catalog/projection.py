"""Project agent descriptors into the catalog's display shape.

Only three conventional property keys are trusted: `icon`, `beta` and
`visibility`. A key that is missing or holds the wrong kind of value is
treated as absent and the field keeps its default; nothing here raises.
"""

import logging

from catalog.cancellation import CancellationToken
from catalog.models.agent_descriptor import AgentDescriptor, BoolProperty, StringProperty
from catalog.models.agent_info import AgentInfo, Visibility
from catalog.registry import AgentRegistry

logger = logging.getLogger(__name__)

UNKNOWN_AGENT_NAME = "Unknown"

# exact, case-sensitive labels
_VISIBILITY_BY_LABEL = {member.value: member for member in Visibility}


def to_agent_info(descriptor: AgentDescriptor) -> AgentInfo:
    """Build the AgentInfo for a single descriptor."""
    properties = descriptor.properties or {}

    match properties.get("icon"):
        case StringProperty(value=icon):
            pass
        case _:
            icon = None

    match properties.get("beta"):
        case BoolProperty(value=beta):
            pass
        case _:
            beta = False

    match properties.get("visibility"):
        case StringProperty(value=label) if label in _VISIBILITY_BY_LABEL:
            visibility = _VISIBILITY_BY_LABEL[label]
        case _:
            visibility = Visibility.visible

    return AgentInfo(
        name=descriptor.name or UNKNOWN_AGENT_NAME,
        icon=icon,
        beta=beta,
        visibility=visibility,
    )


async def collect_agent_infos(
    registry: AgentRegistry,
    cancellation: CancellationToken | None = None,
) -> list[AgentInfo]:
    """Drain the registry into a list of AgentInfo, in registration order.

    Raises ListingCancelled if the token fires before enumeration completes;
    no partial list is ever returned.
    """
    agents: list[AgentInfo] = []
    async for descriptor in registry.list_agents(cancellation):
        agents.append(to_agent_info(descriptor))
    logger.debug("listed %d agents", len(agents))
    return agents
