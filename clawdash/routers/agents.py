"""Agents panel endpoint."""

from fastapi import APIRouter, Depends

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.dependencies import get_runtime, get_workspaces
from clawdash.schemas.agent import AgentWorkspace
from clawdash.services import agent_service
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/agents")
async def list_agents(
    runtime: AgentRuntimeAdapter = Depends(get_runtime),
    workspaces: list[AgentWorkspace] = Depends(get_workspaces),
):
    """CLI agents + sessions merged with workspace metadata.

    Falls back to the workspaces on disk when the CLI reports nothing.
    """
    return envelope(await agent_service.collect_agents(runtime, workspaces))
