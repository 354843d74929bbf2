"""API routes for the agent catalog."""

from fastapi import APIRouter, Depends, HTTPException, Request

from catalog.cancellation import CancellationToken
from catalog.models.agent_info import AgentInfo
from catalog.projection import collect_agent_infos, to_agent_info
from catalog.registry import AgentRegistry

router = APIRouter()


def get_registry(request: Request) -> AgentRegistry:
    """the registry built at startup."""
    return request.app.state.registry


def get_cancellation(request: Request) -> CancellationToken:
    """a fresh token per request, fired when the client disconnects."""
    return CancellationToken(probe=request.is_disconnected)


@router.get("/agents", response_model_exclude_none=True)
async def list_agents(
    registry: AgentRegistry = Depends(get_registry),
    cancellation: CancellationToken = Depends(get_cancellation),
) -> list[AgentInfo]:
    """list all registered agents with their display metadata."""
    return await collect_agent_infos(registry, cancellation)


@router.get("/agents/{name}", response_model_exclude_none=True)
def get_agent(
    name: str,
    registry: AgentRegistry = Depends(get_registry),
) -> AgentInfo:
    """get a single agent's display metadata."""
    descriptor = registry.get_agent(name)
    if descriptor is None:
        raise HTTPException(status_code=404, detail=f"Agent not found: {name}")
    return to_agent_info(descriptor)
