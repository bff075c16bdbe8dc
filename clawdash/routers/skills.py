"""Skill registry endpoints."""

from fastapi import APIRouter, Depends

from clawdash.config import Settings
from clawdash.dependencies import get_settings, get_workspaces
from clawdash.schemas.agent import AgentWorkspace
from clawdash.schemas.skill import SkillsPanel
from clawdash.services import skill_service
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/skills")
@router.get("/skills-docs")
async def list_skills(
    settings: Settings = Depends(get_settings),
    workspaces: list[AgentWorkspace] = Depends(get_workspaces),
):
    """Installed skills with the agents whose AGENTS.md or cron jobs mention them."""
    skills = skill_service.attach_usage(skill_service.list_skills(settings.skills_dir), workspaces)
    return envelope(SkillsPanel(count=len(skills), skills=skills))
