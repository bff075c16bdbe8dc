"""Overview, projects, memory, channels and organization panel tests."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from clawdash.services.channel_service import detect_channels
from clawdash.services.organization_service import build_hierarchy, collect_members, department_for
from clawdash.services.project_service import list_projects, read_memory
from clawdash.services.system_service import read_uptime
from clawdash.services.workspace_service import scan_workspaces
from conftest import failed, ok


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok", "service": "clawdash"}


# ── Overview ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_overview(client: AsyncClient, runtime, workspace_root: Path):
    runtime.status_result = ok("Gateway: running")
    with patch("clawdash.services.system_service.run_command", return_value=failed()):
        resp = await client.get("/api/overview")
    assert resp.status_code == 200
    data = resp.json()
    assert data["workspace"] == str(workspace_root.resolve())
    assert data["services"] == {"xvfb": "unknown", "openclawStatus": "Gateway: running"}
    assert data["hostname"]
    assert data["now"]


@pytest.mark.asyncio
async def test_overview_reports_cli_error(client: AsyncClient, runtime):
    runtime.status_result = failed("Command timed out after 12.0s")
    with patch("clawdash.services.system_service.run_command", return_value=ok("active")):
        data = (await client.get("/api/overview")).json()
    assert data["services"] == {"xvfb": "active", "openclawStatus": "Command timed out after 12.0s"}


def test_read_uptime(tmp_path: Path):
    f = tmp_path / "uptime"
    f.write_text("1234.56 99.0\n")
    assert read_uptime(f) == 1234.56
    f.write_text("garbage")
    assert read_uptime(f) is None
    assert read_uptime(tmp_path / "missing") is None


# ── Projects & memory ────────────────────────────────────────────────


def test_list_projects(workspace_root: Path):
    projects_dir = workspace_root / "projects"
    projects_dir.mkdir()
    (projects_dir / "launch.md").write_text("x" * 500)
    (projects_dir / "ignore.txt").write_text("nope")
    [project] = list_projects(projects_dir)
    assert project.name == "launch"
    assert len(project.preview) == 400
    assert len(project.content) == 500


def test_list_projects_missing_dir(tmp_path: Path):
    assert list_projects(tmp_path / "projects") == []


def test_read_memory(workspace_root: Path):
    memory_dir = workspace_root / "memory"
    memory_dir.mkdir()
    (memory_dir / "2026-01-01.md").write_text("old")
    (memory_dir / "2026-02-01.md").write_text("new")
    (memory_dir / "ideas.md").write_text("misc")
    (workspace_root / "MEMORY.md").write_text("# Long term")
    panel = read_memory(workspace_root, memory_dir)
    assert panel.long_term == "# Long term"
    assert [f.name for f in panel.files] == ["ideas", "2026-02-01", "2026-01-01"]
    assert panel.files[0].date is None
    assert panel.files[1].date == "2026-02-01"


@pytest.mark.asyncio
async def test_projects_and_memory_endpoints_empty(client: AsyncClient):
    projects = (await client.get("/api/projects")).json()
    assert projects["count"] == 0
    assert projects["projects"] == []
    memory = (await client.get("/api/memory")).json()
    assert memory == {"success": True, "data": {"longTerm": None, "count": 0, "files": []},
                      "longTerm": None, "count": 0, "files": []}


# ── Channels ─────────────────────────────────────────────────────────


def test_channels_inactive_without_evidence(tmp_path: Path):
    channels = detect_channels(tmp_path / "ws", tmp_path / "skills")
    assert len(channels) == 7
    assert not any(c.active for c in channels)


def test_channels_detect_env_keys_and_skill_dirs(tmp_path: Path):
    ws = tmp_path / "ws"
    ws.mkdir()
    skills = tmp_path / "skills"
    (skills / "slack-notify").mkdir(parents=True)
    (ws / "config.json").write_text("{}")
    channels = {c.id: c for c in detect_channels(ws, skills)}

    assert channels["slack"].active and channels["slack"].has_skill_dir
    assert not channels["slack"].has_env_key
    assert channels["telegram"].has_skill_dir  # config.json
    assert not channels["discord"].active

    (ws / ".env").write_text("DISCORD_TOKEN=abc\n")
    channels = {c.id: c for c in detect_channels(ws, skills)}
    assert channels["discord"].has_env_key
    # .env now exists, and it is a config path for every channel
    assert all(c.active for c in channels.values())


@pytest.mark.asyncio
async def test_channels_endpoint(client: AsyncClient):
    data = (await client.get("/api/channels")).json()
    assert [c["id"] for c in data["channels"]][:2] == ["telegram", "whatsapp"]
    assert "iconColor" in data["channels"][0]
    # the skills dir ships reddit-post
    reddit = next(c for c in data["channels"] if c["id"] == "reddit")
    assert reddit["hasSkillDir"] is True


# ── Organization ─────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, dept",
    [
        ("react frontend dev", "Design & Frontend"),
        ("database admin", "Backend & Architecture (CTO)"),
        ("seo writer", "Marketing & Growth (CMO)"),
        ("whatsapp support", "Cust. Service & Operations (COO)"),
        ("assistant", "General Assistants"),
    ],
)
def test_department_for(text, dept):
    assert department_for(text) == dept


def test_hierarchy_groups_and_sorts(workspace_root: Path):
    agents = [
        {"id": "alice", "role": "designer of ui", "status": "active"},
        {"id": "scout", "role": "A very long role name indeed"},
    ]
    members = collect_members(agents, scan_workspaces(workspace_root))
    # bob is on disk only
    assert [m["name"] for m in members] == ["Alice Prime", "scout", "bob"]
    assert members[2]["status"] == "offline"

    root = build_hierarchy(members, "Boss (CEO)")
    assert (root.name, root.role, root.status) == ("Boss (CEO)", "root", "online")
    assert [d.name for d in root.children] == ["General Assistants", "Design & Frontend"]
    general, design = root.children
    assert general.status == "idle"
    assert [c.name for c in general.children] == ["scout", "bob"]
    assert general.children[0].role == "Agent"  # role too long to show
    assert design.status == "active"
    assert design.children[0].role == "designer of ui"


@pytest.mark.asyncio
async def test_organization_endpoint(client: AsyncClient, runtime):
    runtime.status_all_result = ok("full status")
    runtime.agents_result = ok(json.dumps([{"id": "alice", "role": "frontend"}]))
    data = (await client.get("/api/organization")).json()
    assert data["raw"] == "full status"
    hierarchy = data["hierarchy"]
    assert hierarchy["name"] == "Owner (CEO)"
    names = {c["name"] for d in hierarchy["children"] for c in d["children"]}
    assert names == {"Alice Prime", "bob"}


# ── Idempotence ──────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/agents", "/api/skills", "/api/projects", "/api/channels", "/api/memory"])
async def test_read_only_endpoints_are_repeatable(client: AsyncClient, path):
    first = (await client.get(path)).content
    second = (await client.get(path)).content
    assert first == second


@pytest.mark.asyncio
async def test_organization_endpoint_tolerates_non_string_roles(client: AsyncClient, runtime):
    runtime.agents_result = ok(json.dumps([{"id": "x", "role": {"title": "cto"}, "status": 3}, {"id": 9}]))
    resp = await client.get("/api/organization")
    assert resp.status_code == 200
    members = {
        c["name"]: (d["name"], c["role"], c["status"])
        for d in resp.json()["hierarchy"]["children"]
        for c in d["children"]
    }
    assert members["x"] == ("General Assistants", "Agent", "3")
    assert members["9"] == ("General Assistants", "Agent", "idle")
