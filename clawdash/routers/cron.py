"""Cron panel endpoints."""

from fastapi import APIRouter, Depends

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.dependencies import get_runtime, get_settings
from clawdash.services.cron_service import collect_cron
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/cron")
@router.get("/cron-jobs")
async def cron(
    settings: Settings = Depends(get_settings),
    runtime: AgentRuntimeAdapter = Depends(get_runtime),
):
    panel = await collect_cron(runtime, settings.syslog_path, timeout=settings.command_timeout)
    return envelope(panel)
