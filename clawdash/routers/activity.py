"""Activity feed endpoint."""

from fastapi import APIRouter, Depends

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.dependencies import get_runtime, get_settings, get_workspaces
from clawdash.schemas.agent import AgentWorkspace
from clawdash.services.activity_service import collect_activity
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/activity")
async def activity(
    settings: Settings = Depends(get_settings),
    runtime: AgentRuntimeAdapter = Depends(get_runtime),
    workspaces: list[AgentWorkspace] = Depends(get_workspaces),
):
    """OpenClaw log, today's agent memory notes and the dashboard log, newest first."""
    panel = await collect_activity(
        runtime, workspaces, settings.dashboard_log, timeout=settings.command_timeout,
    )
    return envelope(panel)
