"""Projects and memory panels — markdown files under the workspace root."""

from __future__ import annotations

import re
from pathlib import Path

from clawdash.schemas.panels import MemoryFile, MemoryPanel, Project
from clawdash.utils.fs import Found, list_entries_safe, read_entry, read_file_safe, text_or_empty

PREVIEW_CHARS = 400

_DATE_STEM_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _markdown_files(directory: Path) -> list[str]:
    return [name for name in list_entries_safe(directory) if name.endswith(".md")]


def list_projects(projects_dir: Path) -> list[Project]:
    projects = []
    for name in _markdown_files(projects_dir):
        full = projects_dir / name
        content = text_or_empty(read_file_safe(full))
        projects.append(Project(
            name=name.removesuffix(".md"),
            file=str(full),
            preview=content[:PREVIEW_CHARS],
            content=content,
        ))
    return projects


def read_memory(workspace_root: Path, memory_dir: Path) -> MemoryPanel:
    """Long-term MEMORY.md plus the daily logs, newest first."""
    long_term = read_entry(workspace_root, "MEMORY.md")

    files = []
    for name in reversed(_markdown_files(memory_dir)):
        full = memory_dir / name
        stem = name.removesuffix(".md")
        files.append(MemoryFile(
            name=stem,
            date=stem if _DATE_STEM_RE.match(stem) else None,
            file=str(full),
            preview=text_or_empty(read_file_safe(full))[:PREVIEW_CHARS],
        ))

    return MemoryPanel(
        long_term=long_term.content if isinstance(long_term, Found) else None,
        count=len(files),
        files=files,
    )
