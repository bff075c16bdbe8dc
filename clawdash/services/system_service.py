"""Host overview — hostname, uptime and service probes."""

from __future__ import annotations

import asyncio
import socket
from datetime import datetime, timezone
from pathlib import Path

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.panels import OverviewPanel, ServiceStatus
from clawdash.services.commands import run_command
from clawdash.utils.fs import Found, read_file_safe

PROC_UPTIME = Path("/proc/uptime")


def read_uptime(path: Path = PROC_UPTIME) -> float | None:
    result = read_file_safe(path)
    if not isinstance(result, Found):
        return None
    try:
        return float(result.content.split()[0])
    except (IndexError, ValueError):
        return None


async def collect_overview(runtime: AgentRuntimeAdapter, workspace_root: Path, *, timeout: float) -> OverviewPanel:
    xvfb, openclaw = await asyncio.gather(
        run_command("systemctl is-active xvfb", timeout=timeout),
        runtime.status(),
    )
    return OverviewPanel(
        hostname=socket.gethostname(),
        uptime_sec=read_uptime(),
        workspace=str(workspace_root.resolve()),
        now=datetime.now(timezone.utc).isoformat(),
        services=ServiceStatus(
            xvfb=xvfb.stdout or ("active" if xvfb.ok else "unknown"),
            openclaw_status=openclaw.stdout if openclaw.ok else (openclaw.stderr or openclaw.error or "unknown"),
        ),
    )
