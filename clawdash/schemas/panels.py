"""Schemas for the remaining dashboard panels."""

from __future__ import annotations

from pydantic import Field

from clawdash.schemas.base import CamelModel


# ── Overview ─────────────────────────────────────────────────────────


class ServiceStatus(CamelModel):
    xvfb: str
    openclaw_status: str


class OverviewPanel(CamelModel):
    hostname: str
    uptime_sec: float | None = None
    workspace: str
    now: str
    services: ServiceStatus


# ── Projects & memory ────────────────────────────────────────────────


class Project(CamelModel):
    name: str
    file: str
    preview: str
    content: str


class ProjectsPanel(CamelModel):
    count: int
    projects: list[Project]


class MemoryFile(CamelModel):
    name: str
    date: str | None = None
    file: str
    preview: str


class MemoryPanel(CamelModel):
    long_term: str | None = None
    count: int
    files: list[MemoryFile]


# ── Channels ─────────────────────────────────────────────────────────


class Channel(CamelModel):
    id: str
    name: str
    type: str
    description: str
    icon_color: str
    config_paths: list[str]
    env_keys: list[str]
    active: bool = False
    has_env_key: bool = False
    has_skill_dir: bool = False


class ChannelsPanel(CamelModel):
    channels: list[Channel]


# ── Organization ─────────────────────────────────────────────────────


class OrgNode(CamelModel):
    name: str
    role: str
    status: str
    children: list[OrgNode] = Field(default_factory=list)


class OrganizationPanel(CamelModel):
    hierarchy: OrgNode
    raw: str
