"""Projects and memory endpoints."""

from fastapi import APIRouter, Depends

from clawdash.config import Settings
from clawdash.dependencies import get_settings
from clawdash.schemas.panels import ProjectsPanel
from clawdash.services import project_service
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/projects")
async def list_projects(settings: Settings = Depends(get_settings)):
    projects = project_service.list_projects(settings.projects_dir)
    return envelope(ProjectsPanel(count=len(projects), projects=projects))


@router.get("/memory")
async def memory(settings: Settings = Depends(get_settings)):
    """Long-term MEMORY.md and the daily memory logs."""
    return envelope(project_service.read_memory(settings.workspace_root, settings.memory_dir))
