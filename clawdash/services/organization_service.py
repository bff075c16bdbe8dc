"""Organization chart — groups agents into departments by role keywords."""

from __future__ import annotations

import asyncio
import re
from typing import Any

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.agent import AgentWorkspace
from clawdash.schemas.panels import OrganizationPanel, OrgNode
from clawdash.services.agent_service import agent_display_name, agent_key, as_text, extract_agents, find_workspace
from clawdash.services.commands import try_parse_json

GENERAL_DEPARTMENT = "General Assistants"

# First match wins
DEPARTMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"frontend|ui|ux|design|css|react", re.I), "Design & Frontend"),
    (re.compile(r"backend|api|database|sql|server|cto|architect", re.I), "Backend & Architecture (CTO)"),
    (re.compile(r"marketing|social|twitter|reddit|seo|blog", re.I), "Marketing & Growth (CMO)"),
    (re.compile(r"support|service|mail|whatsapp", re.I), "Cust. Service & Operations (COO)"),
]

MAX_ROLE_LENGTH = 20


def department_for(role_text: str) -> str:
    for pattern, name in DEPARTMENTS:
        if pattern.search(role_text):
            return name
    return GENERAL_DEPARTMENT


def _member(name: str, role_text: str, status: str, original_role: str) -> dict[str, Any]:
    return {"name": name, "role_text": role_text.lower(), "status": status, "original_role": original_role}


def collect_members(raw_agents: list[dict[str, Any]], workspaces: list[AgentWorkspace]) -> list[dict[str, Any]]:
    members = []
    matched: set[str] = set()
    for agent in raw_agents:
        ws = find_workspace(workspaces, agent_key(agent))
        if ws:
            matched.add(ws.name)
        role = as_text(agent.get("role"))
        role_text = role or as_text(agent.get("kind")) or (ws.soul if ws else None) or "assistant"
        members.append(_member(
            agent_display_name(agent, ws),
            role_text,
            as_text(agent.get("status")) or "idle",
            role or "Agent",
        ))

    # Workspaces on disk the CLI does not know about
    for ws in workspaces:
        if ws.name in matched or any(ws.name.lower() in m["name"].lower() for m in members):
            continue
        members.append(_member(ws.display_name, ws.soul or "assistant", "offline", "Agent"))
    return members


def build_hierarchy(members: list[dict[str, Any]], root_name: str) -> OrgNode:
    departments: dict[str, list[dict[str, Any]]] = {}
    for member in members:
        departments.setdefault(department_for(member["role_text"]), []).append(member)

    children = [
        OrgNode(
            name=dept,
            role="group",
            status="active" if any(m["status"] in ("active", "online") for m in group) else "idle",
            children=[
                OrgNode(
                    name=m["name"],
                    role=m["original_role"] if len(m["original_role"]) < MAX_ROLE_LENGTH else "Agent",
                    status=m["status"],
                )
                for m in group
            ],
        )
        for dept, group in departments.items()
    ]
    children.sort(key=lambda node: len(node.children), reverse=True)
    return OrgNode(name=root_name, role="root", status="online", children=children)


async def collect_organization(
    runtime: AgentRuntimeAdapter,
    workspaces: list[AgentWorkspace],
    root_name: str,
) -> OrganizationPanel:
    status, agents = await asyncio.gather(runtime.status(full=True), runtime.list_agents())
    members = collect_members(extract_agents(try_parse_json(agents.stdout)), workspaces)
    return OrganizationPanel(hierarchy=build_hierarchy(members, root_name), raw=status.output)
