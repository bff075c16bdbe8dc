"""Skill registry schemas."""

from pydantic import Field

from clawdash.schemas.base import CamelModel


class Skill(CamelModel):
    name: str
    title: str
    description: str | None = None
    path: str
    used_by_agents: list[str] = Field(default_factory=list)


class SkillsPanel(CamelModel):
    count: int
    skills: list[Skill]
