"""FastAPI dependencies — everything a route needs comes from ``app.state``."""

from fastapi import Depends, Request

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.schemas.agent import AgentWorkspace
from clawdash.services.workspace_service import scan_workspaces


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_runtime(request: Request) -> AgentRuntimeAdapter:
    return request.app.state.runtime


def get_workspaces(settings: Settings = Depends(get_settings)) -> list[AgentWorkspace]:
    """Fresh scan on every request; nothing is cached between requests."""
    return scan_workspaces(settings.workspace_root)
