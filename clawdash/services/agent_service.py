"""Agent service — merges CLI agent/session lists with workspace metadata."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.agent import AgentRecord, AgentsPanel, AgentWorkspace
from clawdash.services.commands import try_parse_json

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Autonomous OpenClaw Agent"


def extract_sessions(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, dict) and isinstance(payload.get("sessions"), list):
        return [s for s in payload["sessions"] if isinstance(s, dict)]
    return []


def extract_agents(payload: Any) -> list[dict[str, Any]]:
    """``{"agents": [...]}`` or a bare list, depending on the CLI version."""
    if isinstance(payload, dict) and isinstance(payload.get("agents"), list):
        items = payload["agents"]
    elif isinstance(payload, list):
        items = payload
    else:
        return []
    return [a for a in items if isinstance(a, dict)]


def as_text(value: Any) -> str | None:
    """CLI scalar as a string; objects, lists, booleans and empty values become None."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return str(value) or None


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def agent_key(agent: dict[str, Any]) -> str | None:
    return as_text(agent.get("key")) or as_text(agent.get("id")) or as_text(agent.get("name"))


def agent_display_name(agent: dict[str, Any], workspace: AgentWorkspace | None) -> str:
    return (
        (workspace.title if workspace else None)
        or as_text(agent.get("name"))
        or as_text(agent.get("identityName"))
        or as_text(agent.get("id"))
        or as_text(agent.get("key"))
        or "Unknown Agent"
    )


def find_workspace(workspaces: list[AgentWorkspace], key: str | None) -> AgentWorkspace | None:
    if not key:
        return None
    return next((ws for ws in workspaces if ws.name == key), None)


def _session_matches(session: dict[str, Any], agent: dict[str, Any]) -> bool:
    key = as_text(session.get("key"))
    if key is None:
        return False
    own_key = as_text(agent.get("key")) or as_text(agent.get("id"))
    return key == own_key or key == as_text(agent.get("name"))


def _workspace_fields(ws: AgentWorkspace | None) -> dict[str, Any]:
    if ws is None:
        return {}
    return {
        "soul": ws.soul,
        "active_skills": ws.active_skills,
        "cron_count": ws.cron_count,
        "has_memory": ws.has_memory,
        "has_soul": ws.has_soul,
        "has_daily_log": ws.has_daily_log,
        "workspace_dir": ws.dir,
    }


def _session_fields(session: dict[str, Any]) -> dict[str, Any]:
    return {
        "total_tokens": _as_number(session.get("totalTokens")),
        "updated_at": session.get("updatedAt"),
        "age_ms": _as_number(session.get("ageMs")),
    }


def merge_agents(
    raw_agents: list[dict[str, Any]],
    raw_sessions: list[dict[str, Any]],
    workspaces: list[AgentWorkspace],
) -> list[AgentRecord]:
    records: list[AgentRecord] = []

    for agent in raw_agents:
        session = next((s for s in raw_sessions if _session_matches(s, agent)), None) or {}
        ws = find_workspace(workspaces, agent_key(agent))
        records.append(AgentRecord(
            name=agent_display_name(agent, ws),
            key=as_text(agent.get("key")) or as_text(agent.get("id")),
            role=as_text(agent.get("role")) or DEFAULT_ROLE,
            status=as_text(agent.get("status")) or ("active" if session else "idle"),
            model=session.get("model") or agent.get("model"),
            kind=as_text(session.get("kind")) or as_text(agent.get("kind")),
            description=as_text(agent.get("description")),
            **_session_fields(session),
            **_workspace_fields(ws),
        ))

    for session in raw_sessions:
        if any(_session_matches(session, agent) for agent in raw_agents):
            continue
        key = as_text(session.get("key"))
        kind = as_text(session.get("kind"))
        records.append(AgentRecord(
            name=key or "Session Agent",
            key=key,
            role=kind or "session",
            status="active",
            model=session.get("model"),
            kind=kind,
            **_session_fields(session),
        ))

    # Nothing from the CLI: show what is on disk instead
    if not records:
        records = [
            AgentRecord(
                name=ws.display_name,
                key=ws.name,
                role="agent",
                status="idle",
                kind="workspace",
                **_workspace_fields(ws),
            )
            for ws in workspaces
        ]
    return records


async def collect_agents(runtime: AgentRuntimeAdapter, workspaces: list[AgentWorkspace]) -> AgentsPanel:
    sessions, agents = await asyncio.gather(runtime.list_sessions(), runtime.list_agents())

    raw_sessions = extract_sessions(try_parse_json(sessions.stdout))
    raw_agents = extract_agents(try_parse_json(agents.stdout))
    if not raw_agents and agents.stdout:
        logger.debug("agents list output is not JSON, falling back to workspaces")

    records = merge_agents(raw_agents, raw_sessions, workspaces)
    return AgentsPanel(
        agents=records,
        sessions=raw_sessions,
        session_count=len(raw_sessions),
        count=len(records),
        raw_agent_output=agents.output or "No openclaw output",
        raw_session_output=sessions.output or "No session output",
    )
