"""Skill service — reads SKILL.md files from the OpenClaw skills directory."""

from __future__ import annotations

from pathlib import Path

from clawdash.schemas.agent import AgentWorkspace
from clawdash.schemas.skill import Skill
from clawdash.services.workspace_service import workspace_reference_text
from clawdash.utils.fs import Found, list_directories_safe, read_file_safe
from clawdash.utils.markdown import excerpt, first_heading, first_nonblank, parse_frontmatter, strip_heading

SKILL_FILE = "SKILL.md"


def parse_skill_md(content: str, name: str, path: Path) -> Skill:
    """Title and description from a SKILL.md (frontmatter first, body second)."""
    meta, body = parse_frontmatter(content)

    fallback = first_nonblank(body)
    title = (
        first_heading(body)
        or str(meta.get("name") or "").strip()
        or (strip_heading(fallback) if fallback else "")
        or name
    )
    description = str(meta.get("description") or "").strip() or excerpt(body, lines=2, limit=180)

    return Skill(name=name, title=title, description=description, path=str(path))


def list_skills(skills_dir: Path) -> list[Skill]:
    """Every skill folder with a non-empty SKILL.md, sorted by name."""
    skills: list[Skill] = []
    for name in list_directories_safe(skills_dir):
        skill_path = skills_dir / name
        result = read_file_safe(skill_path / SKILL_FILE)
        if not isinstance(result, Found) or not result.content.strip():
            continue
        skills.append(parse_skill_md(result.content, name, skill_path))
    return sorted(skills, key=lambda s: s.name)


def attach_usage(skills: list[Skill], workspaces: list[AgentWorkspace]) -> list[Skill]:
    """Fill ``used_by_agents``: workspaces whose AGENTS.md or cron jobs mention the skill."""
    texts = {ws.name: workspace_reference_text(ws) for ws in workspaces}
    return [
        skill.model_copy(update={
            "used_by_agents": [name for name, text in texts.items() if skill.name in text],
        })
        for skill in skills
    ]
