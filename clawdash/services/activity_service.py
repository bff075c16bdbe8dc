"""Activity feed — best-effort classification of raw log lines.

This is a heuristic labeler, not a log parser.  Lines that match nothing
fall through to the ``bot`` type with no agent, they never fail.

Classification precedence: error > warning > success (``system``) > ``bot``.

Agent attribution, first hit wins:
  1. a ``[Token]`` that is neither a date nor a log-level word
  2. a ``{Token}``
  3. ``agent: name`` / ``"bot": "name"`` / ``identity name``
  4. a known workspace key appearing anywhere in the line
"""

from __future__ import annotations

import asyncio
import re
import shlex
from collections.abc import Sequence
from datetime import date, datetime, timezone
from pathlib import Path

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.activity import ActivityEvent, ActivityPanel, ActivityType
from clawdash.schemas.agent import AgentWorkspace
from clawdash.services.commands import run_command
from clawdash.services.workspace_service import daily_log_path
from clawdash.utils.fs import Found, read_file_safe

LOG_WINDOW = 35
MEMORY_WINDOW = 15
FEED_LIMIT = 60
DASH_LOG_TAIL = 80
OPENCLAW_LOG_TAIL = 40

FALLBACK_TEXT = "No log output available. Agent logs show up here once OpenClaw is running."

ERROR_RE = re.compile(r"error|fail|exception|critical", re.IGNORECASE)
WARNING_RE = re.compile(r"warn|timeout|retry", re.IGNORECASE)
SUCCESS_RE = re.compile(r"success|done|started|running|active|ok|posted|sent|completed", re.IGNORECASE)

_BRACKET_RE = re.compile(r"\[([A-Za-z0-9_\-\s]{2,30})\]")
_CURLY_RE = re.compile(r"\{([A-Za-z][A-Za-z0-9_\-\s]{1,25})\}")
_KEY_RE = re.compile(r"(?:agent|bot|identity)[\"\s:]+[\"']?([A-Za-z0-9_\-]{2,30})", re.IGNORECASE)
_DATE_RE = re.compile(r"^\d{4}[-/]")
_LEVEL_RE = re.compile(r"^(info|debug|trace|warn|warning|error|ok)$", re.IGNORECASE)


def classify_line(line: str) -> ActivityType:
    if ERROR_RE.search(line):
        return ActivityType.ERROR
    if WARNING_RE.search(line):
        return ActivityType.WARNING
    if SUCCESS_RE.search(line):
        return ActivityType.SYSTEM
    return ActivityType.BOT


def extract_agent(line: str, known: Sequence[tuple[str, str]] = ()) -> str | None:
    """Best guess at the agent a log line is about.

    ``known`` holds ``(workspace_key, display_name)`` pairs.
    """
    for match in _BRACKET_RE.finditer(line):
        candidate = match.group(1).strip()
        if candidate and not _DATE_RE.match(candidate) and not _LEVEL_RE.match(candidate):
            return candidate

    match = _CURLY_RE.search(line)
    if match:
        return match.group(1).strip()

    match = _KEY_RE.search(line)
    if match:
        return match.group(1).strip()

    lowered = line.lower()
    for key, display in known:
        if key.lower() in lowered:
            return display
    return None


def parse_log_lines(
    raw: str | None,
    source: str,
    known: Sequence[tuple[str, str]] = (),
    *,
    limit: int = LOG_WINDOW,
) -> list[ActivityEvent]:
    """Classify the last ``limit`` lines of ``raw``, newest first."""
    if not raw or not raw.strip():
        return []
    lines = [l for l in raw.splitlines() if l.strip()][-limit:]
    events = [
        ActivityEvent(
            id=f"{source}-{i}",
            text=line.strip(),
            type=classify_line(line),
            agent=extract_agent(line, known),
            time=source,
        )
        for i, line in enumerate(lines)
    ]
    events.reverse()
    return events


def memory_entries(workspaces: Sequence[AgentWorkspace], day: date | None = None) -> list[ActivityEvent]:
    """Tail of each workspace's daily memory log for ``day`` (default today)."""
    events: list[ActivityEvent] = []
    for ws in workspaces:
        result = read_file_safe(daily_log_path(Path(ws.dir), day))
        if not isinstance(result, Found):
            continue
        lines = [l for l in result.content.splitlines() if l.strip() and not l.startswith("#")]
        for i, line in enumerate(lines[-MEMORY_WINDOW:]):
            if ERROR_RE.search(line):
                kind = ActivityType.ERROR
            elif WARNING_RE.search(line):
                kind = ActivityType.WARNING
            else:
                kind = ActivityType.BOT
            events.append(ActivityEvent(
                id=f"mem-{ws.name}-{i}",
                text=line.strip(),
                type=kind,
                agent=ws.display_name,
                time=f"{ws.display_name} Memory",
            ))
    return events


def fallback_event() -> ActivityEvent:
    return ActivityEvent(
        id="fallback-0",
        text=FALLBACK_TEXT,
        type=ActivityType.SYSTEM,
        agent=None,
        time=datetime.now(timezone.utc).isoformat(),
    )


async def collect_activity(
    runtime: AgentRuntimeAdapter,
    workspaces: Sequence[AgentWorkspace],
    dashboard_log: Path,
    *,
    timeout: float,
) -> ActivityPanel:
    dash_log, openclaw_log = await asyncio.gather(
        run_command(f"tail -n {DASH_LOG_TAIL} {shlex.quote(str(dashboard_log))}", timeout=timeout),
        runtime.logs(OPENCLAW_LOG_TAIL),
    )
    known = [(ws.name, ws.display_name) for ws in workspaces]

    activities = [
        *parse_log_lines(openclaw_log.stdout, "openclaw", known),
        *memory_entries(workspaces),
        *parse_log_lines(dash_log.stdout, dashboard_log.name, known),
    ][:FEED_LIMIT]

    return ActivityPanel(
        activities=activities or [fallback_event()],
        raw_dash_log=dash_log.stdout,
        raw_openclaw_log=openclaw_log.stdout or openclaw_log.stderr,
    )
