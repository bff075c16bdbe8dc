"""Markdown helpers — SKILL.md frontmatter, headings and excerpts."""

from __future__ import annotations

import re
from typing import Any

import yaml

_HEADING_PREFIX = re.compile(r"^#+\s*")


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter from a markdown file.

    Returns (metadata_dict, body_after_frontmatter).
    """
    match = re.match(r"^---\s*\n(.*?)\n---\s*\n?(.*)", content, re.DOTALL)
    if not match:
        return {}, content

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}
    if not isinstance(meta, dict):
        meta = {}

    return meta, match.group(2)


def strip_heading(line: str) -> str:
    return _HEADING_PREFIX.sub("", line).strip()


def first_heading(content: str) -> str | None:
    """Text of the first line starting with ``#``, or None."""
    for line in content.splitlines():
        if line.startswith("#"):
            return strip_heading(line) or None
    return None


def first_nonblank(content: str) -> str | None:
    for line in content.splitlines():
        if line.strip():
            return line
    return None


def excerpt(content: str, *, lines: int, limit: int) -> str | None:
    """Join the first ``lines`` non-blank, non-heading lines, cut to ``limit`` chars."""
    picked = [l.strip() for l in content.splitlines() if l.strip() and not l.startswith("#")][:lines]
    text = " ".join(picked).strip()[:limit]
    return text or None
