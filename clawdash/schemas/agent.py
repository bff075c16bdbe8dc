"""Agent workspace + dashboard agent schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from clawdash.schemas.base import CamelModel


class AgentMeta(CamelModel):
    """Metadata scraped from an agent workspace's markdown files."""

    title: str | None = None
    soul: str | None = None  # excerpt of SOUL.md
    active_skills: list[str] = Field(default_factory=list)
    cron_count: int = 0
    has_memory: bool = False
    has_soul: bool = False
    has_daily_log: bool = False


class AgentWorkspace(AgentMeta):
    name: str
    dir: str

    @property
    def display_name(self) -> str:
        return self.title or self.name


class AgentRecord(CamelModel):
    name: str
    key: str | None = None
    role: str
    status: str
    model: Any = None  # plain id, or {"primary": ...} on some CLI versions
    total_tokens: int | float | None = None
    updated_at: Any = None  # CLI reports epoch ms or ISO strings
    age_ms: int | float | None = None
    kind: str | None = None
    description: str | None = None
    soul: str | None = None
    active_skills: list[str] = Field(default_factory=list)
    cron_count: int = 0
    has_memory: bool = False
    has_soul: bool = False
    has_daily_log: bool = False
    workspace_dir: str | None = None


class AgentsPanel(CamelModel):
    agents: list[AgentRecord]
    sessions: list[dict[str, Any]]
    session_count: int
    count: int
    raw_agent_output: str
    raw_session_output: str
