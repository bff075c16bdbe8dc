"""Overview panel endpoint."""

from fastapi import APIRouter, Depends

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.dependencies import get_runtime, get_settings
from clawdash.services.system_service import collect_overview
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/overview")
async def overview(
    settings: Settings = Depends(get_settings),
    runtime: AgentRuntimeAdapter = Depends(get_runtime),
):
    """Host name, uptime and the state of xvfb + the OpenClaw runtime."""
    panel = await collect_overview(runtime, settings.workspace_root, timeout=settings.command_timeout)
    return envelope(panel)
