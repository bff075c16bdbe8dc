"""Workspace scanner — discovers agent workspaces under the workspace root.

A subdirectory counts as an agent workspace when it directly contains a
SOUL.md or AGENTS.md (any case).  Metadata is scraped from those files on a
best-effort basis: a missing file yields empty values, never an error.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

from clawdash.schemas.agent import AgentMeta, AgentWorkspace
from clawdash.utils.fs import find_entry, list_directories_safe, read_entry, text_or_empty
from clawdash.utils.markdown import excerpt, first_heading

logger = logging.getLogger(__name__)

SOUL_FILE = "SOUL.md"
AGENTS_FILE = "AGENTS.md"
MEMORY_FILE = "MEMORY.md"
CRON_JOBS_FILE = Path("cron") / "jobs.json"

MAX_ACTIVE_SKILLS = 8

_SKILL_RE = re.compile(r"(?:skills?|tools?)[:\s]+([\w\-]+)", re.IGNORECASE)
_SCHEDULE_RE = re.compile(r"\*.*\*.*\*")
_CRON_WORD_RE = re.compile(r"cron|schedule", re.IGNORECASE)


def is_agent_workspace(directory: Path) -> bool:
    return find_entry(directory, SOUL_FILE) is not None or find_entry(directory, AGENTS_FILE) is not None


def extract_active_skills(manifest: str) -> list[str]:
    """Distinct ``skill: name`` / ``tool: name`` captures, first-seen order."""
    seen: dict[str, None] = {}
    for match in _SKILL_RE.finditer(manifest):
        seen.setdefault(match.group(1), None)
    return list(seen)[:MAX_ACTIVE_SKILLS]


def count_cron_mentions(manifest: str) -> int:
    return sum(
        1 for line in manifest.splitlines()
        if _SCHEDULE_RE.search(line) or _CRON_WORD_RE.search(line)
    )


def daily_log_path(directory: Path, day: date | None = None) -> Path:
    day = day or date.today()
    return directory / "memory" / f"{day.isoformat()}.md"


def read_agent_meta(directory: Path) -> AgentMeta:
    soul = text_or_empty(read_entry(directory, SOUL_FILE))
    manifest = text_or_empty(read_entry(directory, AGENTS_FILE))

    return AgentMeta(
        title=first_heading(soul),
        soul=excerpt(soul, lines=3, limit=200),
        active_skills=extract_active_skills(manifest),
        cron_count=count_cron_mentions(manifest),
        has_memory=find_entry(directory, MEMORY_FILE) is not None,
        has_soul=find_entry(directory, SOUL_FILE) is not None,
        has_daily_log=daily_log_path(directory).is_file(),
    )


def scan_workspaces(root: Path) -> list[AgentWorkspace]:
    """All agent workspaces directly under ``root``, sorted by directory name."""
    workspaces: list[AgentWorkspace] = []
    for name in list_directories_safe(root):
        directory = root / name
        if not is_agent_workspace(directory):
            continue
        meta = read_agent_meta(directory)
        workspaces.append(AgentWorkspace(name=name, dir=str(directory), **meta.model_dump()))
    logger.debug("Found %d agent workspaces under %s", len(workspaces), root)
    return workspaces


def workspace_reference_text(workspace: AgentWorkspace) -> str:
    """Manifest plus cron jobs file, the text skills are looked up in."""
    directory = Path(workspace.dir)
    manifest = text_or_empty(read_entry(directory, AGENTS_FILE))
    jobs = text_or_empty(read_entry(directory / CRON_JOBS_FILE.parent, CRON_JOBS_FILE.name))
    return f"{manifest}\n{jobs}"
