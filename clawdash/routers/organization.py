"""Organization chart endpoint."""

from fastapi import APIRouter, Depends

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.dependencies import get_runtime, get_settings, get_workspaces
from clawdash.schemas.agent import AgentWorkspace
from clawdash.services.organization_service import collect_organization
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/organization")
async def organization(
    settings: Settings = Depends(get_settings),
    runtime: AgentRuntimeAdapter = Depends(get_runtime),
    workspaces: list[AgentWorkspace] = Depends(get_workspaces),
):
    panel = await collect_organization(runtime, workspaces, settings.organization_root)
    return envelope(panel)
