"""Skill registry tests."""

from pathlib import Path

import pytest
from httpx import AsyncClient

from clawdash.services.skill_service import attach_usage, list_skills, parse_skill_md
from clawdash.services.workspace_service import scan_workspaces


def test_list_skills_skips_undocumented(skills_dir: Path):
    skills = list_skills(skills_dir)
    assert [s.name for s in skills] == ["reddit-post", "summarize"]


def test_list_skills_skips_empty_doc(skills_dir: Path):
    (skills_dir / "blank").mkdir()
    (skills_dir / "blank" / "SKILL.md").write_text("  \n")
    assert "blank" not in [s.name for s in list_skills(skills_dir)]


def test_list_skills_missing_dir(tmp_path: Path):
    assert list_skills(tmp_path / "nope") == []


def test_frontmatter_description_and_heading_title(skills_dir: Path):
    summarize = {s.name: s for s in list_skills(skills_dir)}["summarize"]
    assert summarize.title == "Summarize"
    assert summarize.description == "Condense long text."
    assert summarize.path == str(skills_dir / "summarize")


def test_title_fallbacks():
    no_heading = parse_skill_md("---\nname: Fancy\n---\nplain line\n", "fancy", Path("/s/fancy"))
    assert no_heading.title == "Fancy"
    assert no_heading.description == "plain line"

    bare = parse_skill_md("just text\nmore text\nthird\n", "bare", Path("/s/bare"))
    assert bare.title == "just text"
    assert bare.description == "just text more text"


def test_attach_usage(skills_dir: Path, workspace_root: Path):
    skills = attach_usage(list_skills(skills_dir), scan_workspaces(workspace_root))
    used = {s.name: s.used_by_agents for s in skills}
    assert used == {"reddit-post": ["bob"], "summarize": ["alice"]}


def test_attach_usage_reads_cron_jobs(skills_dir: Path, workspace_root: Path):
    (workspace_root / "bob" / "cron").mkdir()
    (workspace_root / "bob" / "cron" / "jobs.json").write_text('[{"skill": "summarize"}]')
    skills = attach_usage(list_skills(skills_dir), scan_workspaces(workspace_root))
    used = {s.name: s.used_by_agents for s in skills}
    assert used["summarize"] == ["alice", "bob"]


@pytest.mark.asyncio
async def test_skills_endpoint(client: AsyncClient):
    resp = await client.get("/api/skills")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["count"] == 2
    assert data["data"]["count"] == 2
    names = [s["name"] for s in data["skills"]]
    assert names == ["reddit-post", "summarize"]
    assert "web-search" not in names
    assert data["skills"][1]["usedByAgents"] == ["alice"]


@pytest.mark.asyncio
async def test_skills_docs_alias(client: AsyncClient):
    a = (await client.get("/api/skills")).json()
    b = (await client.get("/api/skills-docs")).json()
    assert a == b
